"""Tests for the JSON read API while the backend is not configured."""

import pytest
from fastapi.testclient import TestClient

from server.api_server import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def test_health_reports_unconfigured_backend(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["cms_engine"] == "wordpress"
    assert response.json()["cms_configured"] is False


def test_listings_degrade_to_empty(client: TestClient) -> None:
    assert client.get("/api/posts", params={"page": 2}).json() == {"items": [], "total": 0, "total_pages": 0}
    assert client.get("/api/categories").json() == []
    assert client.get("/api/content-types").json() == []
    assert client.get("/api/options-pages").json() == []


def test_missing_single_items_are_404(client: TestClient) -> None:
    response = client.get("/api/posts/hello-world")

    assert response.status_code == 404
    assert response.json() == {"message": "post 'hello-world' not found"}
    assert client.get("/api/content-types/guide/items").status_code == 404


def test_strict_lookup_without_backend_is_bad_gateway(client: TestClient) -> None:
    response = client.get("/api/categories/news")

    assert response.status_code == 502
    assert "not configured" in response.json()["message"]


def test_invalid_page_is_rejected(client: TestClient) -> None:
    assert client.get("/api/posts", params={"page": 0}).status_code == 422


@pytest.mark.parametrize("params", [{"author": "abc"}, {"category": "news"}, {"author": 0}])
def test_non_numeric_post_filters_are_rejected(client: TestClient, params: dict) -> None:
    assert client.get("/api/posts", params=params).status_code == 422


def test_numeric_post_filters_are_accepted(client: TestClient) -> None:
    response = client.get("/api/posts", params={"author": 3, "category": 7})

    assert response.status_code == 200
    assert response.json()["items"] == []
