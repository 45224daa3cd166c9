"""Tests for content type name validation and the schema snapshot."""

import pytest
from pydantic import ValidationError

from shared.clients.cms.SchemaRegistry import SchemaRegistry, to_content_type_enum
from shared.clients.cms.models.ContentType import ContentTypeDescriptor
from shared.clients.cms.models.Taxonomy import CustomTaxonomyDescriptor
from shared.models.errors import InvalidContentTypeName


@pytest.mark.parametrize(
    ("name", "enum"),
    [("guide", "GUIDE"), ("actualite-veille", "ACTUALITE_VEILLE"), ("case_study2", "CASE_STUDY2")],
)
def test_to_content_type_enum(name: str, enum: str) -> None:
    assert to_content_type_enum(name) == enum


@pytest.mark.parametrize("name", ["", "Guide", "1guide", "guide!", "a" * 51, "guide) { posts"])
def test_invalid_content_type_names_are_rejected(name: str) -> None:
    with pytest.raises(InvalidContentTypeName):
        to_content_type_enum(name)


def test_registry_lookups() -> None:
    registry = SchemaRegistry(
        content_types=(ContentTypeDescriptor(name="guide", label="Guides"),),
        taxonomies=(CustomTaxonomyDescriptor(name="flags", label="Flags", content_types=["guide"]),),
    )

    assert registry.get_content_type("guide").label == "Guides"
    assert registry.get_content_type("event") is None
    assert registry.content_type_names() == ["guide"]
    assert registry.taxonomy_label("flags") == "Flags"
    assert registry.taxonomy_label("regions") == "regions"


def test_registry_is_immutable() -> None:
    registry = SchemaRegistry()

    with pytest.raises(ValidationError):
        registry.content_types = (ContentTypeDescriptor(name="guide"),)
