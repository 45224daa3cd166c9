"""Per-process, tag-addressed response cache.

Every backend response is stored together with the cache tags of the request
that produced it. Entries expire after a freshness window; a stale entry is
never served and the next identical request goes back to the backend.
Invalidation evicts all entries sharing a tag. Route revalidation is
delegated to listeners registered by the renderers.
"""

import asyncio
import copy
import hashlib
import json
import math
import time
from typing import Any, Awaitable, Callable

from shared.helper.HelperConfig import HelperConfig

PathListener = Callable[[str, str | None], Awaitable[None] | None]


class CacheEntry:
    def __init__(self, value: Any, tags: list[str], expires_at: float):
        self.value = value
        self.tags = tags
        self.expires_at = expires_at


class TagCache:
    """In-memory cache whose entries can be evicted by tag."""

    def __init__(
        self,
        helper_config: HelperConfig,
        ttl: float | None = None,
        clock: Callable[[], float] = time.monotonic,
        max_entries: int | None = None,
    ):
        self.logging = helper_config.get_logger()
        self.ttl = ttl if ttl is not None else helper_config.get_number_val("CMS_CACHE_TTL", default=3600)
        self.max_entries = int(max_entries if max_entries is not None else helper_config.get_number_val("CMS_CACHE_MAX_ENTRIES", default=10000))
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._tag_index: dict[str, set[str]] = {}
        self._path_listeners: list[PathListener] = []
        # earliest expiry among stored entries; no sweep is needed before it
        self._next_expiry = math.inf

    ##########################################
    ################# KEYS ###################
    ##########################################

    @staticmethod
    def make_key(method: str, url: str, payload: Any = None) -> str:
        """Build a stable key from the request method, URL and body/params."""
        raw = json.dumps([method.upper(), url, payload], sort_keys=True, default=str)
        return hashlib.sha256(raw.encode("utf-8")).hexdigest()

    ##########################################
    ############### READ/WRITE ###############
    ##########################################

    def get(self, key: str) -> CacheEntry | None:
        """Return a fresh entry for key, or None on a miss or a stale entry."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.expires_at <= self._clock():
            self._drop(key)
            return None
        return CacheEntry(copy.deepcopy(entry.value), list(entry.tags), entry.expires_at)

    def set(self, key: str, value: Any, tags: list[str], ttl: float | None = None) -> None:
        """Store value under key, indexed by every tag in tags.

        Expired entries are swept on write, and once max_entries is reached
        the entry closest to expiry is evicted to make room.
        """
        if key in self._entries:
            self._drop(key)
        now = self._clock()
        if now >= self._next_expiry:
            self._sweep(now)
        while self.max_entries > 0 and len(self._entries) >= self.max_entries:
            self._drop(min(self._entries, key=lambda k: self._entries[k].expires_at))

        window = self.ttl if ttl is None else ttl
        expires_at = now + window
        self._entries[key] = CacheEntry(copy.deepcopy(value), list(tags), expires_at)
        self._next_expiry = min(self._next_expiry, expires_at)
        for tag in tags:
            self._tag_index.setdefault(tag, set()).add(key)

    def clear(self) -> None:
        self._entries.clear()
        self._tag_index.clear()
        self._next_expiry = math.inf

    def __len__(self) -> int:
        return len(self._entries)

    def _sweep(self, now: float) -> int:
        expired = [key for key, entry in self._entries.items() if entry.expires_at <= now]
        for key in expired:
            self._drop(key)
        self._next_expiry = min((entry.expires_at for entry in self._entries.values()), default=math.inf)
        if expired:
            self.logging.debug("Cache sweep dropped %d expired entries.", len(expired))
        return len(expired)

    def _drop(self, key: str) -> None:
        entry = self._entries.pop(key, None)
        if entry is None:
            return
        for tag in entry.tags:
            keys = self._tag_index.get(tag)
            if keys is None:
                continue
            keys.discard(key)
            if not keys:
                del self._tag_index[tag]

    ##########################################
    ############## INVALIDATION ##############
    ##########################################

    def revalidate_tag(self, tag: str) -> int:
        """Evict every entry carrying tag.

        Returns:
            int: The number of evicted entries. Unknown tags evict nothing.
        """
        keys = list(self._tag_index.get(tag, ()))
        for key in keys:
            self._drop(key)
        self.logging.debug("Cache tag %r evicted %d entries.", tag, len(keys))
        return len(keys)

    def revalidate_tags(self, tags: list[str]) -> int:
        return sum(self.revalidate_tag(tag) for tag in tags)

    def add_path_listener(self, listener: PathListener) -> None:
        """Register a callback invoked with (path, scope) on route revalidation."""
        self._path_listeners.append(listener)

    async def revalidate_path(self, path: str, scope: str | None = None) -> None:
        """Ask every registered renderer to re-render the routes under path."""
        self.logging.debug("Revalidating route %r (scope=%s) for %d listeners.", path, scope, len(self._path_listeners))
        for listener in self._path_listeners:
            result = listener(path, scope)
            if asyncio.iscoroutine(result):
                await result
