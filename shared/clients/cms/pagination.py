"""Translation between page numbers and the backend's connection cursors.

The query API only paginates forward by opaque cursor. Its cursors are the
base64 encoding of ``arrayconnection:<offset>``, where offset is the index of
the last item of the previous page, so a page number can be turned into a
cursor without walking the collection. This assumes a stable ordering and no
inserts or deletes between requests.
"""

import base64
import math

CURSOR_PREFIX = "arrayconnection:"


def page_to_cursor(page: int, page_size: int) -> str | None:
    """Return the "after" cursor that starts the given 1-based page.

    Args:
        page (int): 1-based page number; values <= 1 start from the beginning.
        page_size (int): Items per page.

    Returns:
        str | None: None for the first page, an opaque cursor otherwise.

    Raises:
        ValueError: If page_size is smaller than 1.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")
    if page <= 1:
        return None
    offset = (page - 1) * page_size - 1
    return base64.b64encode(f"{CURSOR_PREFIX}{offset}".encode("utf-8")).decode("ascii")


def cursor_to_offset(cursor: str) -> int:
    """Decode a connection cursor back to its numeric offset.

    Raises:
        ValueError: If the cursor is not a base64 ``arrayconnection:`` token.
    """
    decoded = base64.b64decode(cursor.encode("ascii"), validate=True).decode("utf-8")
    if not decoded.startswith(CURSOR_PREFIX):
        raise ValueError(f"Not a connection cursor: {cursor!r}")
    return int(decoded[len(CURSOR_PREFIX):])


def total_pages(total: int, page_size: int) -> int:
    """ceil(total / page_size); 0 exactly when total is 0."""
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")
    return math.ceil(total / page_size) if total > 0 else 0
