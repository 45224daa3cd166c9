"""FastAPI application entry point for cms_content_bridge."""

import os
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.logging.logging_setup import setup_logging
from shared.helper.HelperConfig import HelperConfig
from shared.cache.TagCache import TagCache
from shared.clients.cms.CMSClientInterface import CMSClientInterface
from shared.clients.cms.CMSClientManager import CMSClientManager
from shared.models.errors import BackendError, CMSBridgeError, InvalidContentTypeName, NotFoundError, TransportError, WebhookError
from server.core.RateLimiter import RateLimiter
from server.core.RevalidationService import RevalidationService
from server.models.responses import HealthResponse
from server.routers.WebhookRouter import router as webhook_router
from server.routers.ContentRouter import router as content_router

logging = setup_logging()
app_version = os.getenv("APP_VERSION", "unknown")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # when the app starts
    app.state.logging = logging
    app.state.helper_config = HelperConfig(logger=logging)

    app.state.cache = TagCache(helper_config=app.state.helper_config)
    cms_client = CMSClientManager(helper_config=app.state.helper_config, cache=app.state.cache).get_client()

    logging.info("Booting CMS client...")
    await cms_client.boot()
    app.state.cms_client = cms_client

    app.state.rate_limiter = RateLimiter(helper_config=app.state.helper_config)
    app.state.revalidation_service = RevalidationService(
        helper_config=app.state.helper_config,
        cache=app.state.cache,
    )

    await check_connection(cms_client)

    # while the app is running...
    yield

    # when the app shuts down, close the client connection
    logging.info("Shutting down, closing CMS client...")
    await cms_client.close()
    logging.info("CMS client closed.")


app = FastAPI(
    title="cms_content_bridge",
    description=(
        "Read-through content cache between a headless CMS (e.g. WordPress with WPGraphQL) "
        "and page renderers. Content is served via GET /api/*, "
        "cache invalidation is triggered via POST /api/revalidate."
    ),
    version=app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(webhook_router)
app.include_router(content_router)


def get_error_status(exc: CMSBridgeError) -> int:
    """HTTP status a bridge error is reported with."""
    if isinstance(exc, WebhookError):
        return exc.status_code
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, InvalidContentTypeName):
        return 400
    if isinstance(exc, (TransportError, BackendError)):
        return 502
    return 500


@app.exception_handler(CMSBridgeError)
async def handle_bridge_error(request: Request, exc: CMSBridgeError) -> JSONResponse:
    status = get_error_status(exc)
    if status >= 500:
        logging.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=status,
        content={"message": exc.message},
        headers=getattr(exc, "headers", None) or None,
    )


@app.get("/health", tags=["health"])
async def health(request: Request) -> HealthResponse:
    client: CMSClientInterface = request.app.state.cms_client
    return HealthResponse(
        status="ok",
        version=app_version,
        cms_engine=client.get_engine_name(),
        cms_configured=client.is_configured(),
    )


async def check_connection(cms_client: CMSClientInterface) -> None:
    """Check connectivity to the CMS backend on startup.

    Failures are non-fatal: every read path degrades to empty content while
    the backend is unreachable or unconfigured.
    """
    if not cms_client.is_configured():
        logging.warning("CMS backend is not configured. All content reads will return empty results.")
        return

    try:
        result = await cms_client.do_healthcheck()
    except TransportError as e:
        logging.warning("CMS backend '%s' is not reachable: %s", cms_client.get_engine_name(), e.message)
        return
    if not result.is_success:
        logging.warning(
            "CMS backend '%s' answered the healthcheck with status %d. Content reads may be empty.",
            cms_client.get_engine_name(),
            result.status_code,
        )


if __name__ == "__main__":
    import uvicorn

    logging.info(
        "Starting cms_content_bridge API Server v%s from root dir: %s on port 8000...",
        app_version,
        os.environ.get("ROOT_DIR", "unknown"),
    )
    uvicorn.run(app, host="0.0.0.0", port=8000)
