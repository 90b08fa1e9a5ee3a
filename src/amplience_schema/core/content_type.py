"""
Content type assembler - the top-level Amplience documents of one type.

Produces:
- Content type schema registration (`content-type-schemas/<name>.json`)
- Content type settings (`content-types/<name>.json`)
- Schema document body (`content-type-schemas/schemas/<name>-schema.json`)
"""

from __future__ import annotations

from typing import Any

from graphql import GraphQLObjectType, GraphQLSchema

from .config import GeneratorConfig
from .defs import (
    CONTENT,
    DEFAULT_ICON,
    HIERARCHY_NODE,
    JSON_SCHEMA_DRAFT,
    VALIDATION_LEVELS,
    ValidationLevel,
)
from .errors import GraphConfigError
from .nodes import TypeLike, name_of
from .properties import object_properties, property_ordering
from .traits import filterable_trait, hierarchy_trait, sortable_trait
from .uri import type_uri
from .utils import drop_none, to_capital_case, to_kebab_case


def content_type_schema(
    type_: TypeLike,
    validation_level: ValidationLevel,
    config: GeneratorConfig,
) -> dict[str, Any]:
    """
    Registration of a type's schema.

    Raises:
        GraphConfigError: validation_level is not CONTENT_TYPE, PARTIAL or SLOT
    """
    if validation_level not in VALIDATION_LEVELS:
        raise GraphConfigError(
            f"Invalid validation level '{validation_level}', must be one of {VALIDATION_LEVELS}",
            type_name=name_of(type_),
        )

    return {
        "body": f"./schemas/{to_kebab_case(name_of(type_))}-schema.json",
        "schemaId": type_uri(type_, config.schema_host),
        "validationLevel": validation_level,
    }


def content_type(
    type_: TypeLike,
    config: GeneratorConfig,
    icon: str = DEFAULT_ICON,
) -> dict[str, Any]:
    """Settings of a content type: label, icon and visualizations."""
    return {
        "contentTypeUri": type_uri(type_, config.schema_host),
        "status": "ACTIVE",
        "settings": {
            "label": to_capital_case(name_of(type_)),
            "icons": [
                {
                    "size": 256,
                    "url": icon,
                },
            ],
            "visualizations": config.visualization_dicts(),
            "cards": [],
        },
    }


def schema_document(
    type_: GraphQLObjectType,
    schema: GraphQLSchema,
    config: GeneratorConfig,
    hierarchy: bool = False,
) -> dict[str, Any]:
    """
    Full JSON schema of a content type, traits included.

    Args:
        type_: Object type the content type is generated from
        schema: Schema used to resolve field types
        config: Generator configuration
        hierarchy: Make the content type a hierarchy node

    Returns:
        Schema document dict, ready to be written as JSON
    """
    title = to_capital_case(type_.name)
    base = [{"$ref": CONTENT}]
    if hierarchy:
        base.append({"$ref": HIERARCHY_NODE})

    return drop_none({
        "$id": type_uri(type_, config.schema_host),
        "$schema": JSON_SCHEMA_DRAFT,
        "allOf": base,
        "title": title,
        "description": type_.description or title,
        "trait:sortable": sortable_trait(type_),
        "trait:hierarchy": hierarchy_trait(type_, config.schema_host) if hierarchy else None,
        "trait:filterable": filterable_trait(type_),
        "type": "object",
        "properties": object_properties(type_, schema, config.schema_host),
        **property_ordering(type_),
    })
