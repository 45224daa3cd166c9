"""Taxonomy models: built-in terms (categories, tags) and custom taxonomies."""

from typing import Literal

from pydantic import BaseModel


class TaxonomyTerm(BaseModel):
    """
    A single term reference: id, name and slug.
    """
    id: int = 0
    name: str = ""
    slug: str = ""


class CustomTaxonomyAssignment(BaseModel):
    """
    The terms of one custom taxonomy assigned to an entity.
    """
    taxonomy: str
    label: str
    terms: list[TaxonomyTerm] = []


class CustomTaxonomyDescriptor(BaseModel):
    """
    A custom taxonomy discovered on the backend.
    """
    name: str
    label: str
    content_types: list[str] = []


class TermDetails(TaxonomyTerm):
    """
    Shared fields of categories and tags.
    """
    count: int = 0
    description: str = ""
    link: str = ""


class Category(TermDetails):
    taxonomy: Literal["category"] = "category"
    parent: int = 0


class Tag(TermDetails):
    taxonomy: Literal["post_tag"] = "post_tag"
