"""Backend-independent content entity model."""

from typing import Any, Literal

from pydantic import BaseModel

from shared.clients.cms.models.Author import EmbeddedAuthor
from shared.clients.cms.models.Media import FeaturedMedia
from shared.clients.cms.models.Seo import SeoMetadata
from shared.clients.cms.models.Taxonomy import CustomTaxonomyAssignment, TaxonomyTerm

ContentStatus = Literal["publish", "future", "draft", "pending", "private"]
DiscussionStatus = Literal["open", "closed"]


class ContentEntity(BaseModel):
    """
    Fields shared by every piece of content, as returned by a CMS client.

    custom_fields is either None or non-empty; an empty mapping is never stored.
    """
    id: int = 0
    slug: str = ""
    date: str = ""
    modified: str = ""
    status: ContentStatus = "publish"
    link: str = ""
    content_type: str = ""
    custom_fields: dict[str, Any] | None = None
    custom_taxonomies: list[CustomTaxonomyAssignment] | None = None
    seo: SeoMetadata | None = None

    def with_extras(self, extras: "ContentExtras") -> "ContentEntity":
        """Return a copy carrying the custom fields and taxonomies of extras."""
        return self.model_copy(update={
            "custom_fields": extras.custom_fields or None,
            "custom_taxonomies": extras.custom_taxonomies or None,
        })


class Post(ContentEntity):
    content_type: str = "post"
    date_gmt: str = ""
    modified_gmt: str = ""
    title: str = ""
    content: str = ""
    excerpt: str | None = None
    author: int = 0
    featured_media: int = 0
    comment_status: DiscussionStatus = "closed"
    ping_status: DiscussionStatus = "closed"
    sticky: bool = False
    format: str = "standard"
    categories: list[int] = []
    tags: list[int] = []
    embedded_author: EmbeddedAuthor | None = None
    embedded_media: FeaturedMedia | None = None
    embedded_categories: list[TaxonomyTerm] = []


class Page(ContentEntity):
    content_type: str = "page"
    date_gmt: str = ""
    modified_gmt: str = ""
    title: str = ""
    content: str = ""
    excerpt: str | None = None
    author: int = 0
    featured_media: int = 0
    parent: int = 0
    menu_order: int = 0
    comment_status: DiscussionStatus = "closed"
    ping_status: DiscussionStatus = "closed"


class ContentNode(ContentEntity):
    """
    An item of a dynamically discovered content type. Fields the type does
    not support stay None.
    """
    title: str | None = None
    content: str | None = None
    excerpt: str | None = None
    author: int | None = None
    featured_media: int | None = None
    embedded_author: EmbeddedAuthor | None = None
    embedded_media: FeaturedMedia | None = None


class ContentExtras(BaseModel):
    """
    Custom fields and custom taxonomy terms only reachable via the document API.
    """
    custom_fields: dict[str, Any] | None = None
    custom_taxonomies: list[CustomTaxonomyAssignment] | None = None
