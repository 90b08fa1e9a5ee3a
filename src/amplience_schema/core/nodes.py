"""
Helpers for walking graphql-core type references and definitions.
"""

from __future__ import annotations

from typing import Optional, Union

from graphql import (
    FieldDefinitionNode,
    GraphQLNamedType,
    GraphQLObjectType,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    TypeDefinitionNode,
    TypeNode,
)


TypeLike = Union[GraphQLNamedType, TypeDefinitionNode, NamedTypeNode]


def name_of(type_: TypeLike) -> str:
    """Name of a schema type, an AST definition or a named type reference."""
    name = type_.name
    return name if isinstance(name, str) else name.value


def named_type(type_node: TypeNode) -> str:
    """
    Name of the type behind a reference, unwrapping lists and non-null.

    Examples:
        String! -> String
        [Article!]! -> Article
    """
    while not isinstance(type_node, NamedTypeNode):
        type_node = type_node.type
    return type_node.name.value


def list_item_type(type_node: TypeNode) -> Optional[TypeNode]:
    """Item type of a list reference (`[T]` or `[T]!`), None for anything else."""
    if isinstance(type_node, NonNullTypeNode):
        type_node = type_node.type
    if isinstance(type_node, ListTypeNode):
        return type_node.type
    return None


def field_nodes(type_: Union[GraphQLObjectType, ObjectTypeDefinitionNode]) -> list[FieldDefinitionNode]:
    """
    Field definition nodes of an object type, in declaration order.

    For a schema type the fields of `extend type` blocks follow the fields of
    the definition itself. Types built without SDL have no nodes.
    """
    if isinstance(type_, ObjectTypeDefinitionNode):
        return list(type_.fields or ())

    nodes: list[FieldDefinitionNode] = []
    for ast_node in [type_.ast_node, *(type_.extension_ast_nodes or ())]:
        if ast_node is not None:
            nodes.extend(ast_node.fields or ())
    return nodes
