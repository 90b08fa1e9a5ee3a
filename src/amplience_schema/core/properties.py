"""
Property type resolver - maps GraphQL fields to Amplience property descriptors.

Decision order for a field's type:
- union        -> content link to every member type
- enum         -> string with an `enum` list
- object       -> content link when the field is `@link`, otherwise an inline object
- scalar       -> String / Boolean / Int / Float / AmplienceImage / AmplienceVideo
- anything else -> {} (no constraints)

List fields are wrapped in an `array` descriptor around the item type.

Usage:
    from graphql import build_schema
    from amplience_schema.core.properties import object_properties

    schema = build_schema(sdl)
    properties = object_properties(schema.get_type("HeroBanner"), schema, "https://schema.example.com")
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from graphql import (
    FieldDefinitionNode,
    GraphQLEnumType,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLUnionType,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    TypeNode,
)

from .defs import CONTENT_LINK, LOCALIZED_STRING, LOCALIZED_VALUE, MEDIA_TYPES
from .directives import FieldDirectives
from .errors import GraphConfigError
from .nodes import field_nodes, list_item_type, name_of, named_type
from .uri import type_uri
from .utils import drop_none, to_capital_case

logger = logging.getLogger(__name__)


ObjectType = Union[GraphQLObjectType, ObjectTypeDefinitionNode]


# =============================================================================
# Reference helpers
# =============================================================================


def ref_type(ref: str, *other: dict[str, Any]) -> dict[str, Any]:
    """`{"allOf": [{"$ref": ref}, *other]}`"""
    return {"allOf": [{"$ref": ref}, *other]}


def localized(value: dict[str, Any]) -> dict[str, Any]:
    """Wrap a descriptor in an Amplience localized value."""
    return {
        **ref_type(LOCALIZED_VALUE),
        "properties": {
            "values": {
                "items": {
                    "properties": {
                        "value": value,
                    },
                },
            },
        },
    }


def check_localized(
    directives: FieldDirectives,
    type_node: TypeNode,
    result: dict[str, Any],
) -> dict[str, Any]:
    """
    Localize `result` when the field is `@localized`.

    A String field whose only directive is `@localized` becomes the canonical
    localized string; every other localized field is wrapped with `localized`.
    """
    if not directives.localized:
        return result
    if directives.count == 1 and named_type(type_node) == "String":
        return ref_type(LOCALIZED_STRING)
    return localized(result)


def content_link(type_: Union[GraphQLObjectType, GraphQLUnionType], schema_host: str) -> dict[str, Any]:
    """Content link allowing the type itself, or every member of a union."""
    targets = type_.types if isinstance(type_, GraphQLUnionType) else [type_]
    return ref_type(
        CONTENT_LINK,
        {
            "properties": {
                "contentType": {
                    "enum": [type_uri(t, schema_host) for t in targets],
                },
            },
        },
    )


# =============================================================================
# Object properties
# =============================================================================


def eligible_fields(type_: ObjectType) -> list[tuple[FieldDefinitionNode, FieldDirectives]]:
    """Fields that belong in the property map, with their decoded directives."""
    fields = []
    for field in field_nodes(type_):
        directives = FieldDirectives.from_node(field)
        # @children fields live in the hierarchy, not on the object itself
        if not directives.excluded:
            fields.append((field, directives))
    return fields


def object_properties(
    type_: ObjectType,
    schema: GraphQLSchema,
    schema_host: str,
    path: frozenset[str] = frozenset(),
) -> dict[str, dict[str, Any]]:
    """
    The properties that go inside Amplience `{"type": "object", "properties": ...}`.

    Args:
        type_: Object type (schema type or AST definition)
        schema: Schema used to resolve field types
        schema_host: Host prefix of every schema URI
        path: Object types already being inlined above this one

    Returns:
        Dict of field name -> property descriptor, in declaration order
    """
    path = path | {name_of(type_)}
    properties: dict[str, dict[str, Any]] = {}

    for field, directives in eligible_fields(type_):
        name = field.name.value
        properties[name] = {
            "title": to_capital_case(name),
            **drop_none({"description": field.description.value if field.description else None}),
            **field_property_type(field, schema, schema_host, directives, path),
        }

    return properties


def field_property_type(
    field: FieldDefinitionNode,
    schema: GraphQLSchema,
    schema_host: str,
    directives: Optional[FieldDirectives] = None,
    path: frozenset[str] = frozenset(),
) -> dict[str, Any]:
    """Descriptor of a field, wrapping list types in an `array`."""
    if directives is None:
        directives = FieldDirectives.from_node(field)

    item_type = list_item_type(field.type)
    if item_type is None:
        return amplience_property_type(field, field.type, schema, schema_host, directives, path)

    return drop_none({
        "type": "array",
        "minItems": directives.array.min_items,
        "maxItems": directives.array.max_items,
        "items": amplience_property_type(field, item_type, schema, schema_host, directives, path),
        "const": directives.const.items,
    })


def inline_object(
    type_: GraphQLObjectType,
    schema: GraphQLSchema,
    schema_host: str,
    path: frozenset[str] = frozenset(),
) -> dict[str, Any]:
    """Object embedded in its parent, with its own properties."""
    if type_.name in path:
        raise GraphConfigError(
            f"Type '{type_.name}' is inlined inside itself; mark the field with @link",
            type_name=type_.name,
        )

    return {
        "type": "object",
        "properties": object_properties(type_, schema, schema_host, path),
        **property_ordering(type_),
    }


def property_ordering(type_: ObjectType) -> dict[str, list[str]]:
    """`propertyOrder` and `required` (the non-null fields) of an object's property map."""
    fields = eligible_fields(type_)
    return {
        "propertyOrder": [field.name.value for field, _ in fields],
        "required": [
            field.name.value
            for field, _ in fields
            if isinstance(field.type, NonNullTypeNode)
        ],
    }


# =============================================================================
# Type resolution
# =============================================================================


def amplience_property_type(
    field: FieldDefinitionNode,
    type_node: TypeNode,
    schema: GraphQLSchema,
    schema_host: str,
    directives: Optional[FieldDirectives] = None,
    path: frozenset[str] = frozenset(),
) -> dict[str, Any]:
    """
    Amplience descriptor for one (non-list) type reference of a field.

    Args:
        field: Field the type belongs to; its directives refine the result
        type_node: Type reference to resolve (the field type or a list item type)
        schema: Schema used to resolve named types
        schema_host: Host prefix of every schema URI
        directives: Decoded directives of `field` (decoded here when omitted)
        path: Object types already being inlined, for cycle detection

    Returns:
        Property descriptor dict; {} for types without an Amplience mapping
    """
    if directives is None:
        directives = FieldDirectives.from_node(field)

    name = named_type(type_node)
    node = schema.get_type(name)

    if isinstance(node, GraphQLUnionType):
        return content_link(node, schema_host)

    if isinstance(node, GraphQLEnumType):
        return {
            "type": "string",
            "enum": list(node.values),
        }

    if isinstance(node, GraphQLObjectType):
        if directives.link:
            return content_link(node, schema_host)
        return inline_object(node, schema, schema_host, path)

    if node is None:
        logger.warning(f"Unknown type '{name}' on field '{field.name.value}', emitting no constraints")

    return _scalar_property_type(name, type_node, directives)


def _scalar_property_type(
    name: str,
    type_node: TypeNode,
    directives: FieldDirectives,
) -> dict[str, Any]:
    """Descriptor for built-in and Amplience media scalars."""
    if name == "String":
        if directives.const.item is not None:
            return {
                "type": "string",
                "const": directives.const.item,
            }
        return check_localized(directives, type_node, drop_none({
            "type": "string",
            "format": directives.text.format,
            "minLength": directives.text.min_length,
            "maxLength": directives.text.max_length,
            "examples": directives.example,
        }))

    if name == "Boolean":
        return check_localized(directives, type_node, {"type": "boolean"})

    if name in ("Int", "Float"):
        return check_localized(directives, type_node, drop_none({
            "type": "number" if name == "Float" else "integer",
            "minimum": directives.number.minimum,
            "maximum": directives.number.maximum,
        }))

    if name in MEDIA_TYPES:
        plain, localized_ref = MEDIA_TYPES[name]
        return ref_type(localized_ref if directives.localized else plain)

    logger.debug(f"No Amplience mapping for scalar '{name}'")
    return {}
