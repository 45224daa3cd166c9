from typing import Any

from shared.cache.TagCache import TagCache
from shared.cache.tags import ALL_CONTENT_TAG, CONTENT_TYPES_TAG, content_type_tag, domain_tag
from shared.helper.HelperConfig import HelperConfig


class RevalidationService:
    """Turns a change notification from the backend into cache evictions."""

    def __init__(self, helper_config: HelperConfig, cache: TagCache):
        self.logging = helper_config.get_logger()
        self.cache = cache

    @staticmethod
    def get_tags(content_type: str, content_id: Any = None) -> list[str]:
        """Map a changed content type (and optional id) to the cache tags it invalidates.

        Id-specific tags are only produced for a truthy content_id (0 and "" count as absent). The
        umbrella tag and the schema discovery tag are not part of the result;
        they are always evicted by revalidate().

        Args:
            content_type (str): e.g. "post", "category", "options-page" or a custom type name.
            content_id (Any): The changed item's id or slug, if known.

        Returns:
            list[str]: The mapped tags, in eviction order.
        """
        has_id = bool(content_id)
        if content_type == "post":
            tags = ["posts"]
            if has_id:
                tags.append(domain_tag("post", content_id))
            # every post change shifts the first listing page
            tags.append("posts-page-1")
            return tags
        if content_type in ("category", "tag"):
            tags = ["categories" if content_type == "category" else "tags"]
            if has_id:
                tags += [domain_tag(f"posts-{content_type}", content_id), domain_tag(content_type, content_id)]
            return tags
        if content_type in ("author", "user"):
            tags = ["authors"]
            if has_id:
                tags += [domain_tag("posts-author", content_id), domain_tag("author", content_id)]
            return tags
        if content_type in ("options", "options-page"):
            tags = ["options-pages"]
            if has_id:
                tags.append(domain_tag("options-page", content_id))
            return tags

        tags = [content_type_tag(content_type)]
        if has_id:
            tags.append(content_type_tag(content_type, content_id))
        return tags

    async def revalidate(self, content_type: str, content_id: Any = None) -> list[str]:
        """Evict everything affected by a change and re-render the layout.

        Safe to call repeatedly with the same notification.

        Returns:
            list[str]: Every tag that was evicted.
        """
        tags = [ALL_CONTENT_TAG, *self.get_tags(content_type, content_id), CONTENT_TYPES_TAG]
        self.logging.info(
            "Revalidating content: %s%s",
            content_type,
            f" (ID: {content_id})" if content_id not in (None, "") else "",
        )
        evicted = self.cache.revalidate_tags(tags)
        self.logging.debug("Evicted %d cache entries for tags %s.", evicted, tags)
        await self.cache.revalidate_path("/", "layout")
        return tags
