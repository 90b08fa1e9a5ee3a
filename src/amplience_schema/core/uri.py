"""
Canonical Amplience schema URIs for schema types.
"""

from __future__ import annotations

from .nodes import TypeLike, name_of
from .utils import to_kebab_case


def type_uri(type_: TypeLike, schema_host: str) -> str:
    """
    Schema id of a type.

    Example:
        HeroBanner, https://schema.example.com -> https://schema.example.com/hero-banner
    """
    return f"{schema_host}/{to_kebab_case(name_of(type_))}"


def definition_uri(type_: TypeLike, schema_host: str) -> str:
    """Reference to the inline definition of a type inside its own schema."""
    return f"{type_uri(type_, schema_host)}#/definitions/{to_kebab_case(name_of(type_))}"
