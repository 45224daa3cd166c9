"""Error taxonomy of the CMS content bridge.

Read-side errors (``TransportError``, ``BackendError``) are raised by the CMS
client in strict mode and swallowed in graceful mode. Webhook errors carry the
HTTP status they map to and are rendered as ``{"message": ...}`` responses.
"""


class CMSBridgeError(Exception):
    """Base exception for the CMS content bridge."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class TransportError(CMSBridgeError):
    """The backend answered with a non-2xx HTTP status or could not be reached."""

    def __init__(self, message: str, status: int, endpoint: str):
        self.status = status
        self.endpoint = endpoint
        super().__init__(message)


class BackendError(CMSBridgeError):
    """The backend answered 200 but its response envelope carries an ``errors`` array."""

    def __init__(self, messages: list[str], endpoint: str):
        self.messages = messages
        self.endpoint = endpoint
        super().__init__(f"Query errors: {', '.join(messages)}")


class NotFoundError(CMSBridgeError):
    """A strict by-id or by-slug lookup found nothing."""

    def __init__(self, resource: str, identifier: str | int):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} {identifier!r} not found")


class InvalidContentTypeName(CMSBridgeError, ValueError):
    """A content type name does not match ``^[a-z][a-z0-9_-]{0,49}$``."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid content type name: {name}")


class WebhookError(CMSBridgeError):
    """Base class for errors surfaced by the invalidation webhook."""

    status_code: int = 500

    def __init__(self, message: str, headers: dict[str, str] | None = None):
        self.headers = headers or {}
        super().__init__(message)


class Unauthorized(WebhookError):
    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class ServerMisconfigured(WebhookError):
    status_code = 500

    def __init__(self, message: str = "Server misconfiguration"):
        super().__init__(message)


class TooManyRequests(WebhookError):
    status_code = 429

    def __init__(self, retry_after: int = 60):
        self.retry_after = retry_after
        super().__init__("Too many requests", headers={"Retry-After": str(retry_after)})


class InvalidFormat(WebhookError):
    status_code = 400

    def __init__(self, message: str = "Invalid content type format"):
        super().__init__(message)
