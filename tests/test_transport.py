"""Tests for the query and document transports."""

import httpx
import pytest

from shared.clients.cms.FetchPolicy import FetchPolicy
from shared.models.errors import BackendError, NotFoundError, TransportError


async def test_query_posts_json_and_returns_data(cms_client, backend) -> None:
    backend.query_handler = lambda query, variables: {"data": {"posts": {"nodes": [{"slug": "a"}]}}}

    data = await cms_client.do_query("query { posts { nodes { slug } } }", {"first": 1})

    assert data == {"posts": {"nodes": [{"slug": "a"}]}}
    request = backend.requests[0]
    assert request.method == "POST"
    assert request.headers["content-type"] == "application/json"
    assert "WordPress" in request.headers["user-agent"]
    assert backend.queries()[0]["variables"] == {"first": 1}


async def test_identical_queries_are_served_from_cache(cms_client, backend) -> None:
    backend.query_handler = lambda query, variables: {"data": {"ok": True}}

    await cms_client.do_query("query { ok }", tags=["cms", "posts"])
    await cms_client.do_query("query { ok }", tags=["cms", "posts"])
    assert len(backend.requests) == 1

    cms_client.get_cache().revalidate_tag("posts")
    await cms_client.do_query("query { ok }", tags=["cms", "posts"])
    assert len(backend.requests) == 2


async def test_non_2xx_raises_transport_error(cms_client, backend) -> None:
    backend.query_handler = lambda query, variables: httpx.Response(503, text="unavailable")

    with pytest.raises(TransportError) as exc_info:
        await cms_client.do_query("query { ok }")

    assert exc_info.value.status == 503
    assert exc_info.value.endpoint.endswith("/graphql")


async def test_errors_array_raises_backend_error(cms_client, backend) -> None:
    backend.query_handler = lambda query, variables: {"data": None, "errors": [{"message": "bad field"}, {"message": "worse"}]}

    with pytest.raises(BackendError) as exc_info:
        await cms_client.do_query("query { nope }")

    assert exc_info.value.messages == ["bad field", "worse"]
    assert "bad field, worse" in str(exc_info.value)


async def test_graceful_policy_returns_fallback(cms_client, backend) -> None:
    backend.query_handler = lambda query, variables: httpx.Response(500)

    data = await cms_client.do_query("query { ok }", policy=FetchPolicy.graceful({"posts": {"nodes": []}}))

    assert data == {"posts": {"nodes": []}}


async def test_unconfigured_backend_short_circuits_without_network(unconfigured_client, backend) -> None:
    assert await unconfigured_client.do_query_graceful("query { ok }", {"fallback": True}) == {"fallback": True}
    assert await unconfigured_client.do_fetch_document("/api/v2/posts/1") is None
    assert backend.requests == []

    with pytest.raises(TransportError) as exc_info:
        await unconfigured_client.do_query("query { ok }")
    assert exc_info.value.status == 0


async def test_document_fetch_never_raises(cms_client, backend) -> None:
    backend.documents["/api/v2/posts/1"] = (200, {"id": 1})

    assert await cms_client.do_fetch_document("/api/v2/posts/1") == {"id": 1}
    assert await cms_client.do_fetch_document("/api/v2/posts/2") is None


async def test_strict_lookup_of_missing_item_raises_not_found(cms_client, backend) -> None:
    backend.query_handler = lambda query, variables: {"data": {"category": None}}

    with pytest.raises(NotFoundError):
        await cms_client.get_category_by_id(404)


async def test_strict_lookup_parses_item(cms_client, backend) -> None:
    backend.query_handler = lambda query, variables: {"data": {"tag": {"databaseId": 5, "name": "Python", "slug": "python", "count": 3}}}

    tag = await cms_client.get_tag_by_slug("python")

    assert tag.id == 5
    assert tag.taxonomy == "post_tag"
    assert backend.queries()[0]["variables"] == {"slug": "python"}
