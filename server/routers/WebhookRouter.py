import json
import re
from datetime import datetime

import pytz
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from server.dependencies.webhook_auth import verify_webhook
from server.models.requests import RevalidateRequest
from server.models.responses import ErrorResponse, RevalidateResponse
from shared.models.errors import InvalidFormat

router = APIRouter(prefix="/api", tags=["webhook"])

# alphanumeric, hyphens, underscores only
CONTENT_TYPE_FORMAT = re.compile(r"^[a-z0-9_-]+$")


def _timestamp() -> str:
    return datetime.now(pytz.utc).isoformat()


def parse_revalidate_body(raw_body: bytes) -> RevalidateRequest:
    """Parse and validate a webhook body.

    Raises:
        InvalidFormat: 400 if the body is not a JSON object, lacks a string
            contentType, or contentType has an invalid format.
    """
    try:
        payload = json.loads(raw_body)
    except ValueError:
        raise InvalidFormat("Invalid JSON body")
    if not isinstance(payload, dict):
        raise InvalidFormat("Invalid JSON body")

    content_type = payload.get("contentType")
    if not content_type or not isinstance(content_type, str):
        raise InvalidFormat("Missing content type")
    if not CONTENT_TYPE_FORMAT.fullmatch(content_type):
        raise InvalidFormat()

    content_id = payload.get("contentId")
    if isinstance(content_id, bool) or not isinstance(content_id, (str, int, type(None))):
        raise InvalidFormat("Invalid content id")
    return RevalidateRequest(content_type=content_type, content_id=content_id)


@router.post(
    "/revalidate",
    response_model=RevalidateResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}, 429: {"model": ErrorResponse}, 500: {"model": RevalidateResponse}},
)
async def revalidate(request: Request, raw_body: bytes = Depends(verify_webhook)):
    """Evict the cached content affected by a backend change notification.

    Args:
        request (Request): FastAPI request (provides app.state.revalidation_service).
        raw_body (bytes): The authenticated raw body, from the webhook dependency.

    Returns:
        RevalidateResponse: 200 on success, 500 with revalidated=False if eviction failed.
    """
    body = parse_revalidate_body(raw_body)
    revalidation_service = request.app.state.revalidation_service
    try:
        await revalidation_service.revalidate(body.content_type, body.content_id)
    except Exception as e:
        request.app.state.logging.error("Error revalidating content %s: %s", body.content_type, e)
        failed = RevalidateResponse(revalidated=False, message="Failed to revalidate site", timestamp=_timestamp())
        return JSONResponse(status_code=500, content=failed.model_dump())

    return RevalidateResponse(
        revalidated=True,
        message=f"Revalidated {body.content_type} and related content",
        timestamp=_timestamp(),
    )
