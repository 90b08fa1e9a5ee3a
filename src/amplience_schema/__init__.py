"""
amplience-schema - Amplience content types from an annotated GraphQL schema.

Turns GraphQL object types into Amplience documents:
- content type settings (label, icon, visualizations)
- content type schema registration
- JSON schema bodies with sortable/hierarchy/filterable traits

Usage:
    from amplience_schema import GeneratorConfig, generate, load_schema

    schema = load_schema(sdl)
    config = GeneratorConfig(schema_host="https://schema.example.com")
    files = generate(schema, config)
"""

from __future__ import annotations

from .core import (
    AmplienceSchemaError,
    DIRECTIVES_SDL,
    FieldDirectives,
    GeneratorConfig,
    GraphConfigError,
    Visualization,
    amplience_property_type,
    content_type,
    content_type_schema,
    definition_uri,
    filterable_trait,
    find_directive,
    find_directive_value,
    has_directive,
    hierarchy_trait,
    load_config,
    object_properties,
    schema_document,
    sortable_trait,
    type_uri,
)
from .generator import GeneratedFile, find_content_types, generate, load_schema

__version__ = "0.1.0"

__all__ = [
    # Config
    "GeneratorConfig",
    "Visualization",
    "load_config",
    # Errors
    "AmplienceSchemaError",
    "GraphConfigError",
    # Directives
    "DIRECTIVES_SDL",
    "FieldDirectives",
    "has_directive",
    "find_directive",
    "find_directive_value",
    # Mapping
    "type_uri",
    "definition_uri",
    "amplience_property_type",
    "object_properties",
    "sortable_trait",
    "hierarchy_trait",
    "filterable_trait",
    "content_type",
    "content_type_schema",
    "schema_document",
    # Generator
    "GeneratedFile",
    "load_schema",
    "find_content_types",
    "generate",
]
