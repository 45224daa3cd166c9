"""Tests for mapping change notifications to cache tags."""

import pytest

from server.core.RevalidationService import RevalidationService
from shared.cache.TagCache import TagCache


@pytest.fixture
def cache(helper_config) -> TagCache:
    return TagCache(helper_config)


@pytest.fixture
def service(helper_config, cache) -> RevalidationService:
    return RevalidationService(helper_config=helper_config, cache=cache)


@pytest.mark.parametrize(
    ("content_type", "content_id", "tags"),
    [
        ("post", 42, ["posts", "post-42", "posts-page-1"]),
        ("post", None, ["posts", "posts-page-1"]),
        ("post", 0, ["posts", "posts-page-1"]),
        ("category", 3, ["categories", "posts-category-3", "category-3"]),
        ("tag", "7", ["tags", "posts-tag-7", "tag-7"]),
        ("author", 2, ["authors", "posts-author-2", "author-2"]),
        ("user", 2, ["authors", "posts-author-2", "author-2"]),
        ("options", None, ["options-pages"]),
        ("options-page", "site-settings", ["options-pages", "options-page-site-settings"]),
        ("guide", "first-guide", ["cpt-guide", "cpt-guide-first-guide"]),
        ("guide", "", ["cpt-guide"]),
    ],
)
def test_tag_mapping(content_type, content_id, tags) -> None:
    assert RevalidationService.get_tags(content_type, content_id) == tags


async def test_revalidate_is_idempotent(service, cache) -> None:
    cache.set("listing", ["post"], ["cms", "posts"])
    cache.set("single", {"id": 42}, ["cms", "post-42"])
    cache.set("schema", [], ["cms", "content-types"])

    first = await service.revalidate("post", 42)
    second = await service.revalidate("post", 42)

    assert first == second == ["cms", "posts", "post-42", "posts-page-1", "content-types"]
    assert len(cache) == 0


async def test_revalidate_rerenders_layout(service, cache) -> None:
    paths: list[tuple] = []
    cache.add_path_listener(lambda path, scope: paths.append((path, scope)))

    await service.revalidate("guide")

    assert paths == [("/", "layout")]
