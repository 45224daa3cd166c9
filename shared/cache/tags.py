"""Cache tag names shared by the CMS client and the invalidation webhook.

Tags follow three shapes: ``{domain}``, ``{domain}-{id}`` and
``{domain}-page-{n}``. They are recomputed for every request from the content
type and identifiers involved; nothing stores them permanently.
"""

# attached to every backend fetch
ALL_CONTENT_TAG = "cms"
# schema discovery results
CONTENT_TYPES_TAG = "content-types"
TAXONOMIES_TAG = "taxonomies"


def domain_tag(domain: str, identifier: str | int | None = None) -> str:
    return f"{domain}-{identifier}" if identifier not in (None, "") else domain


def page_tag(domain: str, page: int) -> str:
    return f"{domain}-page-{page}"


def content_type_tag(content_type: str, identifier: str | int | None = None) -> str:
    """Tag of a dynamically discovered content type, e.g. "cpt-guide" or "cpt-guide-12"."""
    return domain_tag(f"cpt-{content_type}", identifier)
