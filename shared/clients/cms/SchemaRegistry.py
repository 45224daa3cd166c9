"""Snapshot of the custom content types and taxonomies discovered on the backend."""

import re

from pydantic import BaseModel, ConfigDict

from shared.clients.cms.models.ContentType import ContentTypeDescriptor
from shared.clients.cms.models.Taxonomy import CustomTaxonomyDescriptor
from shared.models.errors import InvalidContentTypeName

# lowercase alphanumeric, hyphens, underscores, max 50 chars
CONTENT_TYPE_NAME_PATTERN = re.compile(r"^[a-z][a-z0-9_-]{0,49}$")


def is_valid_content_type_name(name: str) -> bool:
    return isinstance(name, str) and CONTENT_TYPE_NAME_PATTERN.fullmatch(name) is not None


def to_content_type_enum(name: str) -> str:
    """Convert a content type name to the query API's enum value.

    e.g. "actualite-veille" → "ACTUALITE_VEILLE", "guide" → "GUIDE"

    Raises:
        InvalidContentTypeName: If name does not match CONTENT_TYPE_NAME_PATTERN.
    """
    if not is_valid_content_type_name(name):
        raise InvalidContentTypeName(name)
    return name.replace("-", "_").upper()


class SchemaRegistry(BaseModel):
    """Immutable result of one schema discovery, handed to the code that needs it."""

    model_config = ConfigDict(frozen=True)

    content_types: tuple[ContentTypeDescriptor, ...] = ()
    taxonomies: tuple[CustomTaxonomyDescriptor, ...] = ()

    def get_content_type(self, name: str) -> ContentTypeDescriptor | None:
        for descriptor in self.content_types:
            if descriptor.name == name:
                return descriptor
        return None

    def content_type_names(self) -> list[str]:
        return [descriptor.name for descriptor in self.content_types]

    def taxonomy_labels(self) -> dict[str, str]:
        return {taxonomy.name: taxonomy.label for taxonomy in self.taxonomies}

    def taxonomy_label(self, name: str) -> str:
        """Display label of a custom taxonomy, falling back to its raw key."""
        return self.taxonomy_labels().get(name) or name
