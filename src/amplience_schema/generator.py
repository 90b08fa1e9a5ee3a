"""
Generator - every Amplience document for every annotated type of a schema.

Types tagged `@amplienceContentType` become content types:

    type HeroBanner @amplienceContentType(icon: "https://...", hierarchy: false) {
      heading: String! @localized
      image: AmplienceImage
    }

Usage:
    from amplience_schema import GeneratorConfig, generate, load_schema

    schema = load_schema(Path("schema.graphql").read_text())
    config = GeneratorConfig(schema_host="https://schema.example.com")
    for file in generate(schema, config):
        print(file.path, file.to_json())
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

from graphql import (
    DirectiveDefinitionNode,
    DocumentNode,
    GraphQLError,
    GraphQLObjectType,
    GraphQLSchema,
    Node,
    TypeDefinitionNode,
    build_ast_schema,
    parse,
)

from .core.config import GeneratorConfig
from .core.content_type import content_type, content_type_schema, schema_document
from .core.defs import CONTENT_TYPE_DIRECTIVE, DEFAULT_ICON, DIRECTIVES_SDL
from .core.directives import find_directive_value, has_directive
from .core.errors import GraphConfigError
from .core.utils import to_kebab_case

logger = logging.getLogger(__name__)


@dataclass
class GeneratedFile:
    """One document to write, at a path relative to the output directory."""
    path: str
    content: dict[str, Any]

    def to_json(self) -> str:
        return json.dumps(self.content, indent=2) + "\n"


def load_schema(sdl: str) -> GraphQLSchema:
    """
    Build a schema from SDL, declaring the Amplience directives it leaves out.

    Directives and scalars the SDL declares itself are kept as written.

    Raises:
        GraphConfigError: the SDL does not parse or is not a valid schema
    """
    try:
        document = parse(sdl)
    except GraphQLError as e:
        raise GraphConfigError(f"Invalid schema: {e}") from e

    declared = {
        definition.name.value
        for definition in document.definitions
        if isinstance(definition, (DirectiveDefinitionNode, TypeDefinitionNode))
    }
    missing = [
        definition
        for definition in parse(DIRECTIVES_SDL).definitions
        if definition.name.value not in declared
    ]
    if missing:
        logger.debug(f"Adding {len(missing)} Amplience declarations to schema")

    try:
        return build_ast_schema(DocumentNode(definitions=(*document.definitions, *missing)))
    except (GraphQLError, TypeError) as e:
        # graphql-core reports SDL validation failures as TypeError
        raise GraphConfigError(f"Invalid schema: {e}") from e


def content_type_node(type_: GraphQLObjectType) -> Optional[Node]:
    """Definition or `extend type` node carrying `@amplienceContentType`, if any."""
    for node in [type_.ast_node, *(type_.extension_ast_nodes or ())]:
        if node is not None and has_directive(node, CONTENT_TYPE_DIRECTIVE):
            return node
    return None


def find_content_types(schema: GraphQLSchema) -> list[GraphQLObjectType]:
    """Object types tagged `@amplienceContentType`, sorted by name."""
    return sorted(
        (
            type_
            for type_ in schema.type_map.values()
            if isinstance(type_, GraphQLObjectType)
            and content_type_node(type_) is not None
        ),
        key=lambda t: t.name,
    )


def generate(schema: GraphQLSchema, config: GeneratorConfig) -> list[GeneratedFile]:
    """
    Generate settings, schema registration and schema body for every content type.

    Raises:
        GraphConfigError: when a type breaks a generation rule
    """
    files: list[GeneratedFile] = []
    content_types = find_content_types(schema)
    logger.info(f"Generating {len(content_types)} Amplience content types")

    for type_ in content_types:
        name = to_kebab_case(type_.name)
        node = content_type_node(type_)
        icon = find_directive_value(node, CONTENT_TYPE_DIRECTIVE, "icon") or DEFAULT_ICON
        hierarchy = bool(find_directive_value(node, CONTENT_TYPE_DIRECTIVE, "hierarchy"))
        validation_level = (
            find_directive_value(node, CONTENT_TYPE_DIRECTIVE, "validationLevel")
            or "CONTENT_TYPE"
        )
        logger.debug(f"{type_.name}: validationLevel={validation_level} hierarchy={hierarchy}")

        files.extend([
            GeneratedFile(
                path=f"content-types/{name}.json",
                content=content_type(type_, config, icon=icon),
            ),
            GeneratedFile(
                path=f"content-type-schemas/{name}.json",
                content=content_type_schema(type_, validation_level, config),
            ),
            GeneratedFile(
                path=f"content-type-schemas/schemas/{name}-schema.json",
                content=schema_document(type_, schema, config, hierarchy=hierarchy),
            ),
        ])

    return files
