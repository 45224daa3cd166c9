import asyncio
from abc import abstractmethod
from typing import Any, Callable, TypeVar

from shared.cache.TagCache import TagCache
from shared.cache.tags import ALL_CONTENT_TAG, CONTENT_TYPES_TAG, TAXONOMIES_TAG, content_type_tag, domain_tag, page_tag
from shared.clients.ClientInterface import ClientInterface
from shared.clients.cms.FetchPolicy import FetchPolicy
from shared.clients.cms.SchemaRegistry import SchemaRegistry, is_valid_content_type_name, to_content_type_enum
from shared.clients.cms.models.Author import Author
from shared.clients.cms.models.ContentEntity import ContentEntity, ContentExtras, ContentNode, Page, Post
from shared.clients.cms.models.ContentType import ContentTypeDescriptor
from shared.clients.cms.models.Media import FeaturedMedia
from shared.clients.cms.models.OptionsPage import OptionsPageData, OptionsPageInfo
from shared.clients.cms.models.Pagination import PaginatedResult, SlugEntry
from shared.clients.cms.models.Taxonomy import Category, CustomTaxonomyAssignment, CustomTaxonomyDescriptor, Tag, TaxonomyTerm
from shared.clients.cms.pagination import page_to_cursor
from shared.helper.HelperConfig import HelperConfig
from shared.helper.OnceCell import OnceCell
from shared.models.errors import BackendError, NotFoundError, TransportError

T = TypeVar("T")

SLUG_BATCH_SIZE = 100   # items per request when walking all slugs
LIST_LIMIT = 100        # items fetched by the non-paginated listing queries


def is_empty_value(value: Any) -> bool:
    """True for the values dropped from custom fields: False, None, "" and []."""
    if value is None or value is False:
        return True
    if isinstance(value, str) and value == "":
        return True
    return isinstance(value, list) and len(value) == 0


def is_term_id_list(key: str, value: Any) -> bool:
    """Guess whether a document field holds taxonomy term ids.

    A field qualifies when its value is a non-empty list of numbers and its key
    is safe to use as a path segment. A custom field that happens to be a list
    of numbers is indistinguishable and is treated as a taxonomy as well.
    """
    if not isinstance(value, list) or not value:
        return False
    if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in value):
        return False
    return is_valid_content_type_name(key)


def _format_term_id(value: int | float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


class CMSClientInterface(ClientInterface):
    def __init__(self, helper_config: HelperConfig, cache: TagCache | None = None):
        super().__init__(helper_config=helper_config)
        self._cache = cache if cache is not None else TagCache(helper_config)

        # schema discovery, populated once per process
        self._content_types_cell: OnceCell[list[ContentTypeDescriptor]] = OnceCell()
        self._taxonomies_cell: OnceCell[list[CustomTaxonomyDescriptor]] = OnceCell()

    ##########################################
    ################ GETTER ##################
    ##########################################

    ################ GENERAL ##################
    def _get_client_type(self) -> str:
        return "cms"

    def get_cache(self) -> TagCache:
        return self._cache

    @abstractmethod
    def _get_count_cap(self) -> int:
        """
        Returns the upper bound of the count query, i.e. the largest collection whose total can be reported.
        """
        pass

    @abstractmethod
    def _get_builtin_content_types(self) -> set[str]:
        pass

    @abstractmethod
    def _get_builtin_taxonomies(self) -> set[str]:
        pass

    @abstractmethod
    def _get_reserved_document_keys(self) -> set[str]:
        """
        Returns the standard keys of a document API resource. Every other key is a custom field or a custom taxonomy.
        """
        pass

    ################ ENDPOINTS ##################
    @abstractmethod
    def _get_endpoint_query(self) -> str:
        """
        Returns the endpoint path of the query API (e.g. "/graphql").
        """
        pass

    @abstractmethod
    def _get_document_resource(self, content_type_name: str) -> str:
        """
        Maps a content type name to its document API resource (e.g. "post" → "posts").
        """
        pass

    @abstractmethod
    def _get_endpoint_document(self, resource: str, resource_id: int | str) -> str:
        pass

    @abstractmethod
    def _get_endpoint_collection(self, resource: str) -> str:
        pass

    @abstractmethod
    def _get_endpoint_options_pages(self) -> str:
        pass

    @abstractmethod
    def _get_endpoint_options_page(self, slug: str) -> str:
        pass

    ################ QUERIES ##################
    @abstractmethod
    def _get_query(self, name: str) -> str:
        """
        Returns the query document registered under name (e.g. "posts", "posts_count").

        Raises:
            KeyError: If the engine has no query of that name.
        """
        pass

    @abstractmethod
    def _build_post_filters(self, author: str | int | None = None, tag: str | int | None = None, category: str | int | None = None, search: str | None = None) -> dict:
        """
        Translates the post listing filters into the query API's "where" argument.
        """
        pass

    ##########################################
    ########### RESPONSE PARSER ##############
    ##########################################

    @abstractmethod
    def _nodes(self, data: Any, connection: str) -> list[dict]:
        """
        Returns the nodes of a connection field of a query result, or [] if absent.
        """
        pass

    @abstractmethod
    def _page_info(self, data: Any, connection: str) -> tuple[bool, str | None]:
        """
        Returns (has_next_page, end_cursor) of a connection field.
        """
        pass

    @abstractmethod
    def _single(self, data: Any, field: str) -> dict | None:
        pass

    @abstractmethod
    def normalize(self, raw_node: Any, content_type_name: str) -> ContentEntity:
        """
        Maps a raw post, page or content node onto the entity model. Never raises.
        """
        pass

    @abstractmethod
    def _parse_category(self, raw: Any) -> Category:
        pass

    @abstractmethod
    def _parse_tag(self, raw: Any) -> Tag:
        pass

    @abstractmethod
    def _parse_author(self, raw: Any) -> Author:
        pass

    @abstractmethod
    def _parse_media(self, raw: Any) -> FeaturedMedia:
        pass

    @abstractmethod
    def _parse_term(self, raw: Any) -> TaxonomyTerm:
        pass

    @abstractmethod
    def _parse_content_type(self, raw: Any) -> ContentTypeDescriptor:
        pass

    @abstractmethod
    def _parse_taxonomy(self, raw: Any) -> CustomTaxonomyDescriptor:
        pass

    ##########################################
    ############### TRANSPORT ################
    ##########################################

    async def do_query(self, query: str, variables: dict | None = None, tags: list[str] | None = None, policy: FetchPolicy | None = None) -> Any:
        """
        Executes a query against the query API and returns its "data" member.

        Results are cached under tags for the cache's freshness window.

        Args:
            query (str): The query document.
            variables (dict | None): Query variables.
            tags (list[str] | None): Cache tags of the result, defaults to the umbrella tag.
            policy (FetchPolicy | None): Strict (default) or graceful error handling.

        Returns:
            Any: The "data" member of the response, or the policy's fallback.

        Raises:
            TransportError: On a non-2xx status or an unreachable/unconfigured backend (strict only).
            BackendError: If the response carries an "errors" array (strict only).
        """
        policy = policy or FetchPolicy.strict()
        tags = list(tags) if tags else [ALL_CONTENT_TAG]

        if policy.is_graceful and not self.is_configured():
            return policy.get_fallback()

        try:
            return await self._execute_query(query, variables, tags)
        except Exception as e:
            if not policy.is_graceful:
                raise
            self.logging.warning("Query against %s failed: %s", self.get_engine_name(), e)
            return policy.get_fallback()

    async def do_query_graceful(self, query: str, fallback: Any, variables: dict | None = None, tags: list[str] | None = None) -> Any:
        """Shorthand for do_query with FetchPolicy.graceful(fallback)."""
        return await self.do_query(query, variables, tags, policy=FetchPolicy.graceful(fallback))

    async def _execute_query(self, query: str, variables: dict | None, tags: list[str]) -> Any:
        endpoint = self._get_endpoint_query()
        url = self.build_url(endpoint)
        if not self.is_configured():
            raise TransportError(f"{self.get_engine_name()} base URL not configured", status=0, endpoint=endpoint)

        payload = {"query": query, "variables": variables or {}}
        key = TagCache.make_key("POST", url, payload)
        cached = self._cache.get(key)
        if cached is not None:
            return cached.value

        response = await self.do_request(
            method="POST",
            json=payload,
            endpoint=endpoint,
            additional_headers={"Content-Type": "application/json"},
            raise_on_error=True,
        )
        try:
            envelope = response.json()
        except ValueError as e:
            raise BackendError([f"invalid JSON response: {e}"], url) from e
        if not isinstance(envelope, dict):
            raise BackendError(["response envelope is not an object"], url)

        errors = envelope.get("errors")
        if errors:
            messages = [str(err.get("message", err)) if isinstance(err, dict) else str(err) for err in errors]
            raise BackendError(messages, url)

        data = envelope.get("data")
        self._cache.set(key, data, tags)
        return data

    async def do_fetch_document(self, endpoint: str, params: dict | None = None, tags: list[str] | None = None) -> Any | None:
        """
        Fetches a resource from the document API. Never raises.

        Returns:
            Any | None: The decoded JSON body, or None if the backend is not configured, answers non-2xx or fails.
        """
        if not self.is_configured():
            return None
        tags = list(tags) if tags else [ALL_CONTENT_TAG]
        url = self.build_url(endpoint)
        key = TagCache.make_key("GET", url, params)
        cached = self._cache.get(key)
        if cached is not None:
            return cached.value

        try:
            response = await self.do_request(method="GET", endpoint=endpoint, params=params)
            if not response.is_success:
                self.logging.warning("Document request to %s answered with status %d.", url, response.status_code)
                return None
            body = response.json()
        except Exception as e:
            self.logging.warning("Document request to %s failed: %s", url, e)
            return None

        self._cache.set(key, body, tags)
        return body

    ##########################################
    ############## PAGINATION ################
    ##########################################

    async def _do_fetch_paginated(
        self,
        query_name: str,
        connection: str,
        variables: dict,
        page: int,
        per_page: int,
        tags: list[str],
        parse: Callable[[dict], T],
    ) -> PaginatedResult[T]:
        """
        Fetches one page of a connection and, concurrently, its total via the count query.

        The two queries are independent, so a change in between can leave total
        slightly out of date relative to items. Any failure yields an empty result.
        """
        cursor = page_to_cursor(page, per_page)
        empty = PaginatedResult(items=[], total=0, total_pages=0)
        if not self.is_configured():
            return empty

        try:
            page_data, count_data = await asyncio.gather(
                self.do_query(self._get_query(query_name), {**variables, "first": per_page, "after": cursor}, tags),
                self.do_query(self._get_query(f"{query_name}_count"), {**variables, "first": self._get_count_cap()}, tags),
            )
        except Exception as e:
            self.logging.warning("Paginated fetch of %s (page %d) failed: %s", connection, page, e)
            return empty

        total = len(self._nodes(count_data, connection))
        items = [parse(node) for node in self._nodes(page_data, connection)]
        return PaginatedResult.from_total(items, total, per_page)

    async def _do_fetch_all_slugs(self, query_name: str, connection: str, variables: dict | None = None, with_modified: bool = False) -> list[SlugEntry]:
        """
        Walks a connection page by page and collects every slug.

        Pages are requested one after another since each needs the previous
        page's end cursor. Any failure yields [].
        """
        if not self.is_configured():
            return []

        entries: list[SlugEntry] = []
        cursor: str | None = None
        try:
            while True:
                data = await self.do_query(self._get_query(query_name), {**(variables or {}), "first": SLUG_BATCH_SIZE, "after": cursor})
                for node in self._nodes(data, connection):
                    entries.append(SlugEntry(
                        slug=node.get("slug") or "",
                        modified=(node.get("modified") or "") if with_modified else None,
                    ))
                has_next, cursor = self._page_info(data, connection)
                if not has_next or not cursor:
                    break
        except Exception as e:
            self.logging.warning("Slug enumeration of %s failed, returning no slugs: %s", connection, e)
            return []

        self.logging.debug("Enumerated %d slugs from %s.", len(entries), connection)
        return entries

    ##########################################
    ########### SCHEMA DISCOVERY #############
    ##########################################

    async def list_custom_content_types(self) -> list[ContentTypeDescriptor]:
        """
        Returns the content types that are not built into the backend.

        The first successful discovery is kept for the lifetime of the client;
        a failed discovery returns [] and is retried on the next call.
        """
        if not self.is_configured():
            return []
        try:
            return list(await self._content_types_cell.get_or_init(self._discover_content_types))
        except Exception as e:
            self.logging.warning("Content type discovery failed: %s", e)
            return []

    async def _discover_content_types(self) -> list[ContentTypeDescriptor]:
        data = await self.do_query(self._get_query("content_types"), tags=[ALL_CONTENT_TAG, CONTENT_TYPES_TAG])
        builtin = self._get_builtin_content_types()
        descriptors = [self._parse_content_type(node) for node in self._nodes(data, "contentTypes")]
        return [d for d in descriptors if d.name and d.name not in builtin]

    async def list_custom_taxonomies(self) -> list[CustomTaxonomyDescriptor]:
        """
        Returns the taxonomies that are not built into the backend. Memoised like list_custom_content_types().
        """
        if not self.is_configured():
            return []
        try:
            return list(await self._taxonomies_cell.get_or_init(self._discover_taxonomies))
        except Exception as e:
            self.logging.warning("Taxonomy discovery failed: %s", e)
            return []

    async def _discover_taxonomies(self) -> list[CustomTaxonomyDescriptor]:
        data = await self.do_query(self._get_query("taxonomies"), tags=[ALL_CONTENT_TAG, TAXONOMIES_TAG])
        builtin = self._get_builtin_taxonomies()
        descriptors = [self._parse_taxonomy(node) for node in self._nodes(data, "taxonomies")]
        return [d for d in descriptors if d.name and d.name not in builtin]

    async def get_schema_registry(self) -> SchemaRegistry:
        """Returns a snapshot of the discovered content types and taxonomies."""
        content_types, taxonomies = await asyncio.gather(
            self.list_custom_content_types(),
            self.list_custom_taxonomies(),
        )
        return SchemaRegistry(content_types=tuple(content_types), taxonomies=tuple(taxonomies))

    async def get_content_type_by_slug(self, slug: str) -> ContentTypeDescriptor | None:
        registry = await self.get_schema_registry()
        return registry.get_content_type(slug)

    ##########################################
    ################ EXTRAS ##################
    ##########################################

    async def fetch_extras(self, content_type_name: str, content_id: int, registry: SchemaRegistry | None = None) -> ContentExtras:
        """
        Fetches the custom fields and custom taxonomy terms of one item from the document API.

        Never raises; any failure yields empty extras. A taxonomy whose terms
        cannot be resolved is left out without affecting the others.

        Args:
            content_type_name (str): e.g. "post", "page" or a custom type name.
            content_id (int): The item's id.
            registry (SchemaRegistry | None): Source of taxonomy labels; discovered when omitted.

        Returns:
            ContentExtras: custom_fields and custom_taxonomies, each None when empty.
        """
        if not self.is_configured():
            return ContentExtras()

        try:
            resource = self._get_document_resource(content_type_name)
            document = await self.do_fetch_document(
                self._get_endpoint_document(resource, content_id),
                tags=[ALL_CONTENT_TAG, f"rest-{content_type_name}-{content_id}"],
            )
            if not isinstance(document, dict):
                return ContentExtras()

            reserved = self._get_reserved_document_keys()
            custom_fields: dict[str, Any] = {}
            plugin_fields = document.get("acf")
            if isinstance(plugin_fields, dict):
                custom_fields.update({k: v for k, v in plugin_fields.items() if not is_empty_value(v)})

            taxonomy_fields: dict[str, list] = {}
            for key, value in document.items():
                if key in reserved:
                    continue
                if is_term_id_list(key, value):
                    taxonomy_fields[key] = value
                elif not is_empty_value(value):
                    custom_fields[key] = value

            custom_taxonomies: list[CustomTaxonomyAssignment] = []
            if taxonomy_fields:
                registry = registry or await self.get_schema_registry()
                for key, term_ids in taxonomy_fields.items():
                    assignment = await self._fetch_taxonomy_terms(key, term_ids, registry)
                    if assignment is not None:
                        custom_taxonomies.append(assignment)

            return ContentExtras(
                custom_fields=custom_fields or None,
                custom_taxonomies=custom_taxonomies or None,
            )
        except Exception as e:
            self.logging.warning("Document API extras fetch failed for %s/%s: %s", content_type_name, content_id, e)
            return ContentExtras()

    async def _fetch_taxonomy_terms(self, taxonomy: str, term_ids: list, registry: SchemaRegistry) -> CustomTaxonomyAssignment | None:
        terms_data = await self.do_fetch_document(
            self._get_endpoint_collection(taxonomy),
            params={"include": ",".join(_format_term_id(term_id) for term_id in term_ids)},
            tags=[ALL_CONTENT_TAG, f"taxonomy-{taxonomy}"],
        )
        if not isinstance(terms_data, list):
            return None
        terms = [self._parse_term(term) for term in terms_data if isinstance(term, dict)]
        if not terms:
            return None
        return CustomTaxonomyAssignment(taxonomy=taxonomy, label=registry.taxonomy_label(taxonomy), terms=terms)

    async def _with_extras(self, entity: ContentEntity, content_type_name: str) -> ContentEntity:
        extras = await self.fetch_extras(content_type_name, entity.id)
        return entity.with_extras(extras)

    ##########################################
    ############### REQUESTS #################
    ##########################################

    ################ POSTS ##################
    async def get_posts_paginated(
        self,
        page: int = 1,
        per_page: int = 9,
        author: str | int | None = None,
        tag: str | int | None = None,
        category: str | int | None = None,
        search: str | None = None,
    ) -> PaginatedResult[Post]:
        """
        Fetches one page of posts, optionally filtered, with the filtered collection's totals.

        Returns an empty result (never raises) if the backend is unconfigured or fails.
        """
        tags = [ALL_CONTENT_TAG, "posts", page_tag("posts", page)]
        if search:
            tags.append("posts-search")
        if author:
            tags.append(domain_tag("posts-author", author))
        if tag:
            tags.append(domain_tag("posts-tag", tag))
        if category:
            tags.append(domain_tag("posts-category", category))

        where = self._build_post_filters(author=author, tag=tag, category=category, search=search)
        return await self._do_fetch_paginated(
            query_name="posts",
            connection="posts",
            variables={"where": where or None},
            page=page,
            per_page=per_page,
            tags=tags,
            parse=lambda node: self.normalize(node, "post"),
        )

    async def get_posts_by_category_paginated(self, category_id: int, page: int = 1, per_page: int = 9) -> PaginatedResult[Post]:
        return await self.get_posts_paginated(page, per_page, category=category_id)

    async def get_posts_by_tag_paginated(self, tag_id: int, page: int = 1, per_page: int = 9) -> PaginatedResult[Post]:
        return await self.get_posts_paginated(page, per_page, tag=tag_id)

    async def get_posts_by_author_paginated(self, author_id: int, page: int = 1, per_page: int = 9) -> PaginatedResult[Post]:
        return await self.get_posts_paginated(page, per_page, author=author_id)

    async def get_recent_posts(self, author: str | int | None = None, tag: str | int | None = None, category: str | int | None = None, search: str | None = None) -> list[Post]:
        where = self._build_post_filters(author=author, tag=tag, category=category, search=search)
        data = await self.do_query_graceful(
            self._get_query("posts"),
            {"posts": {"nodes": []}},
            {"first": LIST_LIMIT, "where": where or None},
            [ALL_CONTENT_TAG, "posts"],
        )
        return [self.normalize(node, "post") for node in self._nodes(data, "posts")]

    async def get_post_by_id(self, post_id: int) -> Post:
        """
        Raises:
            TransportError, BackendError: If the backend fails.
            NotFoundError: If no post has that id.
        """
        data = await self.do_query(self._get_query("post_by_id"), {"id": str(post_id)}, [ALL_CONTENT_TAG, domain_tag("post", post_id)])
        node = self._single(data, "post")
        if node is None:
            raise NotFoundError("post", post_id)
        return self.normalize(node, "post")

    async def get_post_by_slug(self, slug: str) -> Post | None:
        """
        Fetches a single post with its custom fields and taxonomies, or None if missing or unreachable.
        """
        data = await self.do_query_graceful(self._get_query("post_by_slug"), {"post": None}, {"slug": slug}, [ALL_CONTENT_TAG, "posts"])
        node = self._single(data, "post")
        if node is None:
            return None
        return await self._with_extras(self.normalize(node, "post"), "post")

    async def _get_posts_where(self, where: dict, tags: list[str]) -> list[Post]:
        data = await self.do_query(self._get_query("posts"), {"first": LIST_LIMIT, "where": where}, tags)
        return [self.normalize(node, "post") for node in self._nodes(data, "posts")]

    async def get_posts_by_category(self, category_id: int) -> list[Post]:
        return await self._get_posts_where(self._build_post_filters(category=category_id), [ALL_CONTENT_TAG, "posts", domain_tag("posts-category", category_id)])

    async def get_posts_by_tag(self, tag_id: int) -> list[Post]:
        return await self._get_posts_where(self._build_post_filters(tag=tag_id), [ALL_CONTENT_TAG, "posts", domain_tag("posts-tag", tag_id)])

    async def get_posts_by_author(self, author_id: int) -> list[Post]:
        return await self._get_posts_where(self._build_post_filters(author=author_id), [ALL_CONTENT_TAG, "posts", domain_tag("posts-author", author_id)])

    async def get_posts_by_category_slug(self, category_slug: str) -> list[Post]:
        category = await self.get_category_by_slug(category_slug)
        return await self.get_posts_by_category(category.id)

    async def get_posts_by_tag_slug(self, tag_slug: str) -> list[Post]:
        tag = await self.get_tag_by_slug(tag_slug)
        return await self.get_posts_by_tag(tag.id)

    async def get_posts_by_author_slug(self, author_slug: str) -> list[Post]:
        author = await self.get_author_by_slug(author_slug)
        return await self.get_posts_by_author(author.id)

    async def get_all_post_slugs(self) -> list[SlugEntry]:
        return await self._do_fetch_all_slugs("post_slugs", "posts")

    async def get_all_posts_for_sitemap(self) -> list[SlugEntry]:
        return await self._do_fetch_all_slugs("posts_sitemap", "posts", with_modified=True)

    ################ TERMS ##################
    async def _get_all(self, query_name: str, connection: str, tags: list[str], parse: Callable[[Any], T], search: str | None = None) -> list[T]:
        variables: dict = {"first": LIST_LIMIT}
        if search is not None:
            variables["where"] = {"search": search}
        data = await self.do_query_graceful(self._get_query(query_name), {connection: {"nodes": []}}, variables, tags)
        return [parse(node) for node in self._nodes(data, connection)]

    async def _get_one(self, query_name: str, field: str, variables: dict, tags: list[str], parse: Callable[[Any], T], identifier: str | int) -> T:
        data = await self.do_query(self._get_query(query_name), variables, tags)
        node = self._single(data, field)
        if node is None:
            raise NotFoundError(field, identifier)
        return parse(node)

    async def get_all_categories(self) -> list[Category]:
        return await self._get_all("categories", "categories", [ALL_CONTENT_TAG, "categories"], self._parse_category)

    async def get_category_by_id(self, category_id: int) -> Category:
        return await self._get_one("category_by_id", "category", {"id": str(category_id)}, [ALL_CONTENT_TAG, domain_tag("category", category_id)], self._parse_category, category_id)

    async def get_category_by_slug(self, slug: str) -> Category:
        return await self._get_one("category_by_slug", "category", {"slug": slug}, [ALL_CONTENT_TAG, "categories"], self._parse_category, slug)

    async def search_categories(self, query: str) -> list[Category]:
        return await self._get_all("categories", "categories", [ALL_CONTENT_TAG, "categories"], self._parse_category, search=query)

    async def get_all_tags(self) -> list[Tag]:
        return await self._get_all("tags", "tags", [ALL_CONTENT_TAG, "tags"], self._parse_tag)

    async def get_tag_by_id(self, tag_id: int) -> Tag:
        return await self._get_one("tag_by_id", "tag", {"id": str(tag_id)}, [ALL_CONTENT_TAG, domain_tag("tag", tag_id)], self._parse_tag, tag_id)

    async def get_tag_by_slug(self, slug: str) -> Tag:
        return await self._get_one("tag_by_slug", "tag", {"slug": slug}, [ALL_CONTENT_TAG, "tags"], self._parse_tag, slug)

    async def get_tags_by_post(self, post_id: int) -> list[Tag]:
        data = await self.do_query(self._get_query("tags_by_post"), {"id": str(post_id)}, [ALL_CONTENT_TAG, domain_tag("post", post_id)])
        post = self._single(data, "post")
        if post is None:
            raise NotFoundError("post", post_id)
        return [self._parse_tag(node) for node in self._nodes(post, "tags")]

    async def search_tags(self, query: str) -> list[Tag]:
        return await self._get_all("tags", "tags", [ALL_CONTENT_TAG, "tags"], self._parse_tag, search=query)

    ################ AUTHORS ##################
    async def get_all_authors(self) -> list[Author]:
        return await self._get_all("authors", "users", [ALL_CONTENT_TAG, "authors"], self._parse_author)

    async def get_author_by_id(self, author_id: int) -> Author:
        return await self._get_one("author_by_id", "user", {"id": str(author_id)}, [ALL_CONTENT_TAG, domain_tag("author", author_id)], self._parse_author, author_id)

    async def get_author_by_slug(self, slug: str) -> Author:
        return await self._get_one("author_by_slug", "user", {"slug": slug}, [ALL_CONTENT_TAG, "authors"], self._parse_author, slug)

    async def search_authors(self, query: str) -> list[Author]:
        return await self._get_all("authors", "users", [ALL_CONTENT_TAG, "authors"], self._parse_author, search=query)

    ################ PAGES ##################
    async def get_all_pages(self) -> list[Page]:
        return await self._get_all("pages", "pages", [ALL_CONTENT_TAG, "pages"], lambda node: self.normalize(node, "page"))

    async def get_page_by_id(self, page_id: int) -> Page:
        return await self._get_one("page_by_id", "page", {"id": str(page_id)}, [ALL_CONTENT_TAG, domain_tag("page", page_id)], lambda node: self.normalize(node, "page"), page_id)

    async def get_page_by_slug(self, slug: str) -> Page | None:
        data = await self.do_query_graceful(self._get_query("page_by_slug"), {"page": None}, {"slug": slug}, [ALL_CONTENT_TAG, "pages"])
        node = self._single(data, "page")
        if node is None:
            return None
        return await self._with_extras(self.normalize(node, "page"), "page")

    ################ MEDIA ##################
    async def get_featured_media_by_id(self, media_id: int) -> FeaturedMedia:
        return await self._get_one("media_by_id", "mediaItem", {"id": str(media_id)}, [ALL_CONTENT_TAG, domain_tag("media", media_id)], self._parse_media, media_id)

    ########### CUSTOM CONTENT TYPES ###########
    async def get_content_nodes_paginated(self, descriptor: ContentTypeDescriptor, page: int = 1, per_page: int = 9) -> PaginatedResult[ContentNode]:
        """
        Fetches one page of items of a discovered content type.

        Raises:
            InvalidContentTypeName: If the descriptor's name is not a valid content type name.
        """
        content_type = to_content_type_enum(descriptor.name)
        tags = [ALL_CONTENT_TAG, content_type_tag(descriptor.name), page_tag(content_type_tag(descriptor.name), page)]
        return await self._do_fetch_paginated(
            query_name="content_nodes",
            connection="contentNodes",
            variables={"contentType": content_type},
            page=page,
            per_page=per_page,
            tags=tags,
            parse=lambda node: self.normalize(node, descriptor.name),
        )

    async def get_content_node_by_slug(self, descriptor: ContentTypeDescriptor, slug: str) -> ContentNode | None:
        content_type = to_content_type_enum(descriptor.name)
        data = await self.do_query_graceful(
            self._get_query("content_node_by_slug"),
            {"contentNodes": {"nodes": []}},
            {"contentType": content_type, "slug": slug},
            [ALL_CONTENT_TAG, content_type_tag(descriptor.name), content_type_tag(descriptor.name, slug)],
        )
        nodes = self._nodes(data, "contentNodes")
        if not nodes:
            return None
        return await self._with_extras(self.normalize(nodes[0], descriptor.name), descriptor.name)

    async def get_all_content_node_slugs(self, descriptor: ContentTypeDescriptor) -> list[SlugEntry]:
        content_type = to_content_type_enum(descriptor.name)
        return await self._do_fetch_all_slugs("content_node_slugs", "contentNodes", {"contentType": content_type})

    ############### OPTIONS PAGES ###############
    async def get_options_pages(self) -> list[OptionsPageInfo]:
        data = await self.do_fetch_document(self._get_endpoint_options_pages(), tags=[ALL_CONTENT_TAG, "options-pages"])
        if not isinstance(data, list):
            return []
        pages: list[OptionsPageInfo] = []
        for item in data:
            try:
                pages.append(OptionsPageInfo.model_validate(item))
            except ValueError as e:
                self.logging.warning("Skipping malformed options page entry: %s", e)
        return pages

    async def get_options_page_by_slug(self, slug: str) -> OptionsPageData | None:
        data = await self.do_fetch_document(
            self._get_endpoint_options_page(slug),
            tags=[ALL_CONTENT_TAG, "options-pages", domain_tag("options-page", slug)],
        )
        if not isinstance(data, dict) or data.get("code"):
            return None
        try:
            return OptionsPageData.model_validate(data)
        except ValueError as e:
            self.logging.warning("Malformed options page %r: %s", slug, e)
            return None
