import hashlib
import hmac

from fastapi import Header, Request

from shared.models.errors import ServerMisconfigured, TooManyRequests, Unauthorized


def verify_signature(body: bytes, signature: str | None, secret: str) -> bool:
    """Check a hex HMAC-SHA256 signature of the raw request body."""
    if not signature:
        return False
    expected = hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()
    return hmac.compare_digest(signature.strip().encode("utf-8"), expected.encode("utf-8"))


def verify_secret(header_secret: str | None, secret: str) -> bool:
    """Legacy shared-secret check."""
    if not header_secret or not secret:
        return False
    return hmac.compare_digest(header_secret.encode("utf-8"), secret.encode("utf-8"))


async def verify_webhook(
    request: Request,
    x_webhook_signature: str | None = Header(None),
    x_webhook_secret: str | None = Header(None),
) -> bytes:
    """Rate-limit and authenticate a webhook call.

    The rate limit is checked before anything else so that a rejected request
    reveals nothing about its credentials. A signature header, when present,
    takes precedence over the legacy secret header.

    Args:
        request (Request): The FastAPI request object (provides app.state).
        x_webhook_signature (str | None): Hex HMAC-SHA256 of the raw body.
        x_webhook_secret (str | None): Legacy shared secret.

    Returns:
        bytes: The raw request body, for the route to parse.

    Raises:
        TooManyRequests: 429 if the rate limit window is full.
        ServerMisconfigured: 500 if WEBHOOK_SECRET is not configured.
        Unauthorized: 401 if neither credential validates.
    """
    state = request.app.state
    if not state.rate_limiter.hit():
        raise TooManyRequests(retry_after=state.rate_limiter.retry_after())

    secret = state.helper_config.get_string_val("WEBHOOK_SECRET", default="")
    if not secret:
        state.logging.error("WEBHOOK_SECRET is not configured")
        raise ServerMisconfigured()

    body = await request.body()
    if x_webhook_signature:
        is_valid = verify_signature(body, x_webhook_signature, secret)
    else:
        is_valid = verify_secret(x_webhook_secret, secret)

    if not is_valid:
        state.logging.error("Invalid webhook authentication")
        raise Unauthorized()
    return body
