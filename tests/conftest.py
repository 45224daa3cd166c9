"""Shared fixtures: environment isolation and a fake CMS backend behind httpx.MockTransport."""

import json
import logging
from typing import Any, Callable

import httpx
import pytest

from shared.cache.TagCache import TagCache
from shared.clients.cms.wordpress.CMSClientWordpress import CMSClientWordpress
from shared.helper.HelperConfig import HelperConfig

BASE_URL = "https://cms.example.test"

ENV_KEYS = [
    "CMS_ENGINE",
    "CMS_TIMEOUT",
    "CMS_CACHE_TTL",
    "CMS_CACHE_MAX_ENTRIES",
    "CMS_WORDPRESS_BASE_URL",
    "CMS_WORDPRESS_REST_PREFIX",
    "CMS_WORDPRESS_EXT_PREFIX",
    "CMS_WORDPRESS_COUNT_CAP",
    "WEBHOOK_SECRET",
    "WEBHOOK_RATE_LIMIT",
    "WEBHOOK_RATE_WINDOW",
]

QueryHandler = Callable[[str, dict], Any]


class FakeBackend:
    """Answers query and document requests from canned data and records every request."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.query_handler: QueryHandler = lambda query, variables: {"data": {}}
        self.documents: dict[str, tuple[int, Any]] = {}

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/graphql":
            payload = json.loads(request.content)
            result = self.query_handler(payload["query"], payload.get("variables") or {})
            if isinstance(result, httpx.Response):
                return result
            return httpx.Response(200, json=result)

        status, body = self.documents.get(request.url.path, (404, {"code": "rest_no_route", "message": "No route"}))
        return httpx.Response(status, json=body)

    def queries(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests if r.url.path == "/graphql"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def helper_config() -> HelperConfig:
    return HelperConfig(logger=logging.getLogger("cms_bridge.tests"))


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
async def cms_client(monkeypatch: pytest.MonkeyPatch, helper_config: HelperConfig, backend: FakeBackend):
    monkeypatch.setenv("CMS_WORDPRESS_BASE_URL", BASE_URL)
    client = CMSClientWordpress(helper_config=helper_config, cache=TagCache(helper_config))
    await client.boot(transport=httpx.MockTransport(backend.handle))
    yield client
    await client.close()


@pytest.fixture
async def unconfigured_client(helper_config: HelperConfig, backend: FakeBackend):
    client = CMSClientWordpress(helper_config=helper_config, cache=TagCache(helper_config))
    await client.boot(transport=httpx.MockTransport(backend.handle))
    yield client
    await client.close()
