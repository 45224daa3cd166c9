"""Tests for runtime discovery of custom content types and taxonomies."""

import httpx


CONTENT_TYPES = {"data": {"contentTypes": {"nodes": [
    {"name": "post", "label": "Posts", "graphqlSingleName": "post", "graphqlPluralName": "posts"},
    {"name": "attachment", "label": "Media"},
    {"name": "guide", "label": "Guides", "graphqlSingleName": "guide", "graphqlPluralName": "guides", "hasArchive": True},
    {"name": "actualite-veille", "label": "News watch"},
]}}}

TAXONOMIES = {"data": {"taxonomies": {"nodes": [
    {"name": "post_tag", "label": "Tags", "connectedContentTypes": {"nodes": [{"name": "post"}]}},
    {"name": "regions", "label": "Regions", "connectedContentTypes": {"nodes": [{"name": "guide"}, None]}},
]}}}


def _handler(query: str, variables: dict):
    if "GetContentTypes" in query:
        return CONTENT_TYPES
    return TAXONOMIES


async def test_builtin_types_are_excluded(cms_client, backend) -> None:
    backend.query_handler = _handler

    content_types = await cms_client.list_custom_content_types()

    assert [ct.name for ct in content_types] == ["guide", "actualite-veille"]
    assert content_types[0].plural_query_name == "guides"
    assert content_types[0].has_archive is True


async def test_builtin_taxonomies_are_excluded(cms_client, backend) -> None:
    backend.query_handler = _handler

    taxonomies = await cms_client.list_custom_taxonomies()

    assert len(taxonomies) == 1
    assert taxonomies[0].name == "regions"
    assert taxonomies[0].content_types == ["guide"]


async def test_discovery_is_memoised_for_the_process(cms_client, backend) -> None:
    backend.query_handler = _handler

    await cms_client.list_custom_content_types()
    # a webhook eviction does not reset the discovered schema
    cms_client.get_cache().clear()
    registry = await cms_client.get_schema_registry()

    content_type_queries = [q for q in backend.queries() if "GetContentTypes" in q["query"]]
    assert len(content_type_queries) == 1
    assert registry.get_content_type("guide").label == "Guides"
    assert registry.taxonomy_label("regions") == "Regions"


async def test_failed_discovery_is_retried(cms_client, backend) -> None:
    backend.query_handler = lambda query, variables: httpx.Response(500)
    assert await cms_client.list_custom_content_types() == []

    backend.query_handler = _handler
    assert [ct.name for ct in await cms_client.list_custom_content_types()] == ["guide", "actualite-veille"]


async def test_content_type_by_slug(cms_client, backend) -> None:
    backend.query_handler = _handler

    assert (await cms_client.get_content_type_by_slug("guide")).label == "Guides"
    assert await cms_client.get_content_type_by_slug("post") is None


async def test_unconfigured_discovery_is_empty(unconfigured_client, backend) -> None:
    registry = await unconfigured_client.get_schema_registry()

    assert registry.content_types == ()
    assert registry.taxonomies == ()
    assert backend.requests == []
