from typing import Any
from urllib.parse import quote

from shared.cache.TagCache import TagCache
from shared.clients.cms.CMSClientInterface import CMSClientInterface
from shared.clients.cms.models.Author import Author, EmbeddedAuthor
from shared.clients.cms.models.ContentEntity import ContentEntity, ContentNode, Page, Post
from shared.clients.cms.models.ContentType import ContentTypeDescriptor
from shared.clients.cms.models.Media import FeaturedMedia, MediaSize
from shared.clients.cms.models.Seo import SeoImage, SeoMetadata
from shared.clients.cms.models.Taxonomy import Category, CustomTaxonomyDescriptor, Tag, TaxonomyTerm
from shared.clients.cms.wordpress.queries import QUERIES
from shared.helper.HelperConfig import HelperConfig
from shared.models.config import EnvConfig

USER_AGENT = "cms-bridge WordPress client"

# Standard keys of a WordPress REST resource; everything else is a custom field or taxonomy
RESERVED_DOCUMENT_KEYS = {
    "id", "date", "date_gmt", "guid", "modified", "modified_gmt",
    "slug", "status", "type", "link", "title", "content", "excerpt",
    "author", "featured_media", "comment_status", "ping_status",
    "sticky", "template", "format", "meta", "categories", "tags",
    "acf", "yoast_head", "yoast_head_json", "class_list", "_links",
    "parent", "menu_order", "_embedded",
}

BUILTIN_CONTENT_TYPES = {
    "post", "page", "attachment", "revision", "nav_menu_item", "wp_block",
    "wp_template", "wp_template_part", "wp_navigation", "wp_font_family",
    "wp_font_face", "wp_global_styles",
}

BUILTIN_TAXONOMIES = {"category", "post_tag", "post_format", "nav_menu"}

CONTENT_STATUSES = {"publish", "future", "draft", "pending", "private"}


def _dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _str(value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value)


def _int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


def _connection_node(raw: dict, field: str) -> dict | None:
    """Unwrap {field: {node: {...}}} to the inner node."""
    node = _dict(raw.get(field)).get("node")
    return node if isinstance(node, dict) else None


def _connection_nodes(raw: dict, field: str) -> list[dict]:
    """Unwrap {field: {nodes: [...]}} to its nodes, skipping null entries."""
    nodes = _dict(raw.get(field)).get("nodes")
    if not isinstance(nodes, list):
        return []
    return [node for node in nodes if isinstance(node, dict)]


def _status(value: Any) -> str:
    status = _str(value).lower()
    return status if status in CONTENT_STATUSES else "publish"


def _discussion_status(value: Any) -> str:
    return "open" if _str(value).lower() == "open" else "closed"


class CMSClientWordpress(CMSClientInterface):
    def __init__(self, helper_config: HelperConfig, cache: TagCache | None = None):
        super().__init__(helper_config=helper_config, cache=cache)
        self._base_url = (self.get_config_val("BASE_URL", default="", val_type="string") or "").rstrip("/")
        self._rest_prefix = "/" + self.get_config_val("REST_PREFIX", default="/api/v2", val_type="string").strip("/")
        self._ext_prefix = "/" + self.get_config_val("EXT_PREFIX", default="/api/ext/v1", val_type="string").strip("/")
        self._count_cap = int(self.get_config_val("COUNT_CAP", default=10000, val_type="number"))

        if not self._base_url:
            self.logging.warning("CMS_WORDPRESS_BASE_URL is not set, WordPress content will be unavailable.")

    ##########################################
    ################ GETTER ##################
    ##########################################

    ################ GENERAL ##################
    def _get_engine_name(self) -> str:
        return "Wordpress"

    def _get_count_cap(self) -> int:
        return self._count_cap

    def _get_builtin_content_types(self) -> set[str]:
        return BUILTIN_CONTENT_TYPES

    def _get_builtin_taxonomies(self) -> set[str]:
        return BUILTIN_TAXONOMIES

    def _get_reserved_document_keys(self) -> set[str]:
        return RESERVED_DOCUMENT_KEYS

    ################ CONFIG ##################
    def _get_required_config(self) -> list[EnvConfig]:
        return [
            EnvConfig(env_key="BASE_URL", val_type="string", default=""),
            EnvConfig(env_key="REST_PREFIX", val_type="string", default="/api/v2"),
            EnvConfig(env_key="EXT_PREFIX", val_type="string", default="/api/ext/v1"),
            EnvConfig(env_key="COUNT_CAP", val_type="number", default=10000),
        ]

    ################ HEADERS ##################
    def _get_default_headers(self) -> dict:
        return {"User-Agent": USER_AGENT}

    ################ ENDPOINTS ##################
    def _get_base_url(self) -> str:
        return self._base_url

    def _get_endpoint_healthcheck(self) -> str:
        return self._rest_prefix

    def _get_endpoint_query(self) -> str:
        return "/graphql"

    def _get_document_resource(self, content_type_name: str) -> str:
        if content_type_name == "post":
            return "posts"
        if content_type_name == "page":
            return "pages"
        return content_type_name

    def _get_endpoint_document(self, resource: str, resource_id: int | str) -> str:
        return f"{self._rest_prefix}/{quote(str(resource), safe='')}/{resource_id}"

    def _get_endpoint_collection(self, resource: str) -> str:
        return f"{self._rest_prefix}/{quote(resource, safe='')}"

    def _get_endpoint_options_pages(self) -> str:
        return f"{self._ext_prefix}/options-pages"

    def _get_endpoint_options_page(self, slug: str) -> str:
        return f"{self._ext_prefix}/options-pages/{quote(slug, safe='')}"

    ################ QUERIES ##################
    def _get_query(self, name: str) -> str:
        return QUERIES[name]

    def _build_post_filters(self, author: str | int | None = None, tag: str | int | None = None, category: str | int | None = None, search: str | None = None) -> dict:
        where: dict = {}
        if search:
            where["search"] = search
        if author:
            author_id = _int(author)
            if author_id > 0:
                where["author"] = author_id
            else:
                self.logging.warning("Ignoring post filter author=%r, it is not a numeric id.", author)
        if tag:
            where["tagId"] = str(tag)
        if category:
            category_id = _int(category)
            if category_id > 0:
                where["categoryId"] = category_id
            else:
                self.logging.warning("Ignoring post filter category=%r, it is not a numeric id.", category)
        return where

    ##########################################
    ########### RESPONSE PARSER ##############
    ##########################################

    ############### ENVELOPE ###############
    def _nodes(self, data: Any, connection: str) -> list[dict]:
        return _connection_nodes(_dict(data), connection)

    def _page_info(self, data: Any, connection: str) -> tuple[bool, str | None]:
        page_info = _dict(_dict(_dict(data).get(connection)).get("pageInfo"))
        cursor = page_info.get("endCursor")
        return bool(page_info.get("hasNextPage")), cursor if isinstance(cursor, str) else None

    def _single(self, data: Any, field: str) -> dict | None:
        node = _dict(data).get(field)
        return node if isinstance(node, dict) else None

    ############### ENTITIES ###############
    def normalize(self, raw_node: Any, content_type_name: str) -> ContentEntity:
        raw = _dict(raw_node)
        if content_type_name == "post":
            return self._parse_post(raw)
        if content_type_name == "page":
            return self._parse_page(raw)
        return self._parse_content_node(raw, content_type_name)

    def _parse_post(self, raw: dict) -> Post:
        author = _connection_node(raw, "author")
        media = _connection_node(raw, "featuredImage")
        categories = _connection_nodes(raw, "categories")
        tags = _connection_nodes(raw, "tags")

        return Post(
            id=_int(raw.get("databaseId")),
            slug=_str(raw.get("slug")),
            date=_str(raw.get("date")),
            date_gmt=_str(raw.get("dateGmt") or raw.get("date")),
            modified=_str(raw.get("modified")),
            modified_gmt=_str(raw.get("modifiedGmt") or raw.get("modified")),
            status=_status(raw.get("status")),
            link=_str(raw.get("link")),
            title=_str(raw.get("title")),
            content=_str(raw.get("content")),
            excerpt=_str(raw.get("excerpt")) or None,
            author=_int(author.get("databaseId")) if author else 0,
            featured_media=_int(media.get("databaseId")) if media else 0,
            comment_status=_discussion_status(raw.get("commentStatus")),
            ping_status=_discussion_status(raw.get("pingStatus")),
            sticky=raw.get("isSticky") is True,
            categories=[_int(c["databaseId"]) for c in categories if c.get("databaseId") is not None],
            tags=[_int(t["databaseId"]) for t in tags if t.get("databaseId") is not None],
            embedded_author=self._parse_embedded_author(author) if author else None,
            embedded_media=self._parse_media(media) if media else None,
            embedded_categories=[self._parse_term(c) for c in categories],
            seo=self._parse_seo(raw.get("seo")),
        )

    def _parse_page(self, raw: dict) -> Page:
        author = _connection_node(raw, "author")
        media = _connection_node(raw, "featuredImage")

        return Page(
            id=_int(raw.get("databaseId")),
            slug=_str(raw.get("slug")),
            date=_str(raw.get("date")),
            date_gmt=_str(raw.get("dateGmt") or raw.get("date")),
            modified=_str(raw.get("modified")),
            modified_gmt=_str(raw.get("modifiedGmt") or raw.get("modified")),
            status=_status(raw.get("status")),
            link=_str(raw.get("link")),
            title=_str(raw.get("title")),
            content=_str(raw.get("content")),
            excerpt=_str(raw.get("excerpt")) or None,
            author=_int(author.get("databaseId")) if author else 0,
            featured_media=_int(media.get("databaseId")) if media else 0,
            parent=_int(raw.get("parentDatabaseId")),
            menu_order=_int(raw.get("menuOrder")),
            comment_status=_discussion_status(raw.get("commentStatus")),
            ping_status=_discussion_status(raw.get("pingStatus")),
            seo=self._parse_seo(raw.get("seo")),
        )

    def _parse_content_node(self, raw: dict, content_type_name: str) -> ContentNode:
        author = _connection_node(raw, "author")
        media = _connection_node(raw, "featuredImage")

        return ContentNode(
            id=_int(raw.get("databaseId")),
            slug=_str(raw.get("slug")),
            date=_str(raw.get("date")),
            modified=_str(raw.get("modified")),
            status=_status(raw.get("status")),
            link=_str(raw.get("link")),
            content_type=content_type_name,
            title=_str(raw.get("title")) or None,
            content=_str(raw.get("content")) or None,
            excerpt=_str(raw.get("excerpt")) or None,
            author=_int(author.get("databaseId")) if author else None,
            featured_media=_int(media.get("databaseId")) if media else None,
            embedded_author=self._parse_embedded_author(author) if author else None,
            embedded_media=self._parse_media(media) if media else None,
            seo=self._parse_seo(raw.get("seo")),
        )

    def _parse_embedded_author(self, raw: dict) -> EmbeddedAuthor:
        avatar = _str(_dict(raw.get("avatar")).get("url"))
        return EmbeddedAuthor(
            id=_int(raw.get("databaseId")),
            name=_str(raw.get("name")),
            slug=_str(raw.get("slug")),
            avatar_urls={"96": avatar} if avatar else {},
        )

    def _parse_seo(self, raw: Any) -> SeoMetadata | None:
        if not isinstance(raw, dict):
            return None
        return SeoMetadata(
            title=_str(raw.get("title")),
            description=_str(raw.get("metaDesc")),
            canonical=_str(raw.get("canonical")),
            opengraph_title=_str(raw.get("opengraphTitle")),
            opengraph_description=_str(raw.get("opengraphDescription")),
            opengraph_url=_str(raw.get("opengraphUrl")),
            opengraph_image=self._parse_seo_image(raw.get("opengraphImage")),
            twitter_title=_str(raw.get("twitterTitle")),
            twitter_description=_str(raw.get("twitterDescription")),
            twitter_image=self._parse_seo_image(raw.get("twitterImage")),
        )

    def _parse_seo_image(self, raw: Any) -> SeoImage | None:
        if not isinstance(raw, dict):
            return None
        return SeoImage(
            url=_str(raw.get("sourceUrl")),
            width=_int(raw.get("width")),
            height=_int(raw.get("height")),
            alt_text=_str(raw.get("altText")),
        )

    ############### TERMS & RELATIONS ###############
    def _parse_category(self, raw: Any) -> Category:
        raw = _dict(raw)
        return Category(
            id=_int(raw.get("databaseId")),
            name=_str(raw.get("name")),
            slug=_str(raw.get("slug")),
            count=_int(raw.get("count")),
            description=_str(raw.get("description")),
            link=_str(raw.get("link")),
            parent=_int(raw.get("parentDatabaseId")),
        )

    def _parse_tag(self, raw: Any) -> Tag:
        raw = _dict(raw)
        return Tag(
            id=_int(raw.get("databaseId")),
            name=_str(raw.get("name")),
            slug=_str(raw.get("slug")),
            count=_int(raw.get("count")),
            description=_str(raw.get("description")),
            link=_str(raw.get("link")),
        )

    def _parse_author(self, raw: Any) -> Author:
        raw = _dict(raw)
        avatar = _str(_dict(raw.get("avatar")).get("url"))
        return Author(
            id=_int(raw.get("databaseId")),
            name=_str(raw.get("name")),
            slug=_str(raw.get("slug")),
            url=_str(raw.get("url")),
            description=_str(raw.get("description")),
            link=_str(raw.get("link") or raw.get("url")),
            avatar_urls={"96": avatar} if avatar else {},
        )

    def _parse_media(self, raw: Any) -> FeaturedMedia:
        raw = _dict(raw)
        details = _dict(raw.get("mediaDetails"))
        sizes: dict[str, MediaSize] = {}
        for size in details.get("sizes") or []:
            if not isinstance(size, dict):
                continue
            sizes[_str(size.get("name")) or "unknown"] = MediaSize(
                file=_str(size.get("file")),
                width=_int(size.get("width")),
                height=_int(size.get("height")),
                mime_type=_str(size.get("mimeType")),
                source_url=_str(size.get("sourceUrl")),
            )

        return FeaturedMedia(
            id=_int(raw.get("databaseId")),
            title=_str(raw.get("title")),
            caption=_str(raw.get("caption")),
            alt_text=_str(raw.get("altText")),
            mime_type=_str(raw.get("mimeType")) or "image/jpeg",
            source_url=_str(raw.get("sourceUrl")),
            width=_int(details.get("width")),
            height=_int(details.get("height")),
            file=_str(details.get("file")),
            sizes=sizes,
        )

    def _parse_term(self, raw: Any) -> TaxonomyTerm:
        # query API terms carry databaseId, document API terms carry id
        raw = _dict(raw)
        return TaxonomyTerm(
            id=_int(raw.get("databaseId", raw.get("id"))),
            name=_str(raw.get("name")),
            slug=_str(raw.get("slug")),
        )

    ############### SCHEMA ###############
    def _parse_content_type(self, raw: Any) -> ContentTypeDescriptor:
        raw = _dict(raw)
        return ContentTypeDescriptor(
            name=_str(raw.get("name")),
            label=_str(raw.get("label")),
            description=_str(raw.get("description")),
            singular_query_name=_str(raw.get("graphqlSingleName")),
            plural_query_name=_str(raw.get("graphqlPluralName")),
            has_archive=raw.get("hasArchive") is True,
        )

    def _parse_taxonomy(self, raw: Any) -> CustomTaxonomyDescriptor:
        raw = _dict(raw)
        name = _str(raw.get("name"))
        return CustomTaxonomyDescriptor(
            name=name,
            label=_str(raw.get("label")) or name,
            content_types=[_str(node.get("name")) for node in _connection_nodes(raw, "connectedContentTypes")],
        )
