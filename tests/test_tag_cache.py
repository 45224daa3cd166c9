"""Tests for the tag-addressed response cache."""

import pytest

from shared.cache.TagCache import TagCache
from shared.helper.HelperConfig import HelperConfig


class _Clock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> _Clock:
    return _Clock()


@pytest.fixture
def cache(helper_config: HelperConfig, clock: _Clock) -> TagCache:
    return TagCache(helper_config, ttl=3600, clock=clock)


def test_default_ttl_is_one_hour(helper_config: HelperConfig) -> None:
    assert TagCache(helper_config).ttl == 3600


def test_ttl_from_environment(monkeypatch: pytest.MonkeyPatch, helper_config: HelperConfig) -> None:
    monkeypatch.setenv("CMS_CACHE_TTL", "60")
    assert TagCache(helper_config).ttl == 60


def test_make_key_is_stable_and_order_independent() -> None:
    first = TagCache.make_key("post", "https://x/graphql", {"a": 1, "b": 2})
    second = TagCache.make_key("POST", "https://x/graphql", {"b": 2, "a": 1})

    assert first == second
    assert first != TagCache.make_key("POST", "https://x/graphql", {"a": 2, "b": 2})


def test_entries_expire_after_ttl(cache: TagCache, clock: _Clock) -> None:
    cache.set("k", {"posts": []}, ["cms"])
    clock.now += 3599
    assert cache.get("k") is not None

    clock.now += 1
    assert cache.get("k") is None
    assert len(cache) == 0


def test_get_returns_a_copy(cache: TagCache) -> None:
    cache.set("k", {"nodes": [1]}, ["cms"])
    cache.get("k").value["nodes"].append(2)

    assert cache.get("k").value == {"nodes": [1]}


def test_revalidate_tag_evicts_every_entry_with_tag(cache: TagCache) -> None:
    cache.set("a", 1, ["cms", "posts"])
    cache.set("b", 2, ["cms", "post-42"])
    cache.set("c", 3, ["cms", "categories"])

    assert cache.revalidate_tag("post-42") == 1
    assert cache.get("b") is None
    assert cache.get("a") is not None

    assert cache.revalidate_tags(["posts", "categories"]) == 2
    assert len(cache) == 0


def test_revalidate_unknown_tag_is_noop(cache: TagCache) -> None:
    cache.set("a", 1, ["cms"])

    assert cache.revalidate_tag("nope") == 0
    assert cache.revalidate_tag("cms") == 1
    assert cache.revalidate_tag("cms") == 0


async def test_revalidate_path_notifies_sync_and_async_listeners(cache: TagCache) -> None:
    calls: list[tuple] = []

    def on_path(path, scope):
        calls.append(("sync", path, scope))

    async def on_path_async(path, scope):
        calls.append(("async", path, scope))

    cache.add_path_listener(on_path)
    cache.add_path_listener(on_path_async)
    await cache.revalidate_path("/", "layout")

    assert calls == [("sync", "/", "layout"), ("async", "/", "layout")]


def test_expired_entries_are_swept_on_write(cache: TagCache, clock: _Clock) -> None:
    for i in range(1000):
        cache.set(f"search-{i}", [], ["cms", "posts-search"])
    assert len(cache) == 1000

    clock.now += 10 * 3600
    for i in range(1000, 2000):
        cache.set(f"search-{i}", [], ["cms", "posts-search"])

    assert len(cache) == 1000
    assert cache.get("search-0") is None
    assert cache.revalidate_tag("posts-search") == 1000


def test_sweep_keeps_fresh_entries(cache: TagCache, clock: _Clock) -> None:
    cache.set("short", 1, ["cms"], ttl=10)
    cache.set("long", 2, ["cms"])

    clock.now += 11
    cache.set("new", 3, ["cms"])

    assert len(cache) == 2
    assert cache.get("long").value == 2


def test_max_entries_evicts_entry_closest_to_expiry(helper_config: HelperConfig, clock: _Clock) -> None:
    cache = TagCache(helper_config, ttl=3600, clock=clock, max_entries=2)
    cache.set("soon", 1, ["cms"], ttl=60)
    cache.set("later", 2, ["cms"])
    cache.set("newest", 3, ["cms"])

    assert len(cache) == 2
    assert cache.get("soon") is None
    assert cache.get("later").value == 2


def test_max_entries_from_environment(monkeypatch: pytest.MonkeyPatch, helper_config: HelperConfig) -> None:
    monkeypatch.setenv("CMS_CACHE_MAX_ENTRIES", "50")
    assert TagCache(helper_config).max_entries == 50
