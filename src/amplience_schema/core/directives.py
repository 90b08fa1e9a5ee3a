"""
Directive reader.

Inspects the directives attached to schema AST nodes and decodes the
directives of a field into a typed record once, so the resolvers never
match directive names themselves.

Usage:
    from amplience_schema.core.directives import FieldDirectives

    directives = FieldDirectives.from_node(field_node)
    if directives.link:
        ...
    directives.text.min_length  # None when @text(minLength:) is absent
"""

from __future__ import annotations

from typing import Any, Optional, Union

from graphql import DirectiveNode, Node, value_from_ast_untyped
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import GraphConfigError


Number = Union[int, float]


# =============================================================================
# Raw lookups
# =============================================================================


def has_directive(node: Node, name: str) -> bool:
    """True if any directive attached to `node` is called `name`."""
    return find_directive(node, name) is not None


def find_directive(node: Node, name: str) -> Optional[DirectiveNode]:
    """First directive on `node` called `name`, or None."""
    for directive in getattr(node, "directives", None) or ():
        if directive.name.value == name:
            return directive
    return None


def find_directive_value(node: Node, name: str, argument: str) -> Any:
    """
    Value of `argument` on the first `@name` directive of `node`.

    Literals are converted to Python values: Int -> int, Float -> float,
    lists -> list, enum values -> str. Returns None when either the directive
    or the argument is missing.
    """
    directive = find_directive(node, name)
    if directive is None:
        return None

    for arg in directive.arguments or ():
        if arg.name.value == argument:
            return value_from_ast_untyped(arg.value)
    return None


# =============================================================================
# Typed record
# =============================================================================


def _as_list(value: Any) -> Any:
    """GraphQL input coercion accepts a lone value where a list is expected."""
    return [value] if isinstance(value, str) else value


class TextDirective(BaseModel):
    """@text(format:, minLength:, maxLength:)"""
    format: Optional[str] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None


class NumberDirective(BaseModel):
    """@number(minimum:, maximum:)"""
    minimum: Optional[Number] = None
    maximum: Optional[Number] = None


class ListDirective(BaseModel):
    """@list(minItems:, maxItems:)"""
    min_items: Optional[int] = None
    max_items: Optional[int] = None


class ConstDirective(BaseModel):
    """@const(item:) for a single string, @const(items:) for a list of strings."""
    item: Optional[str] = None
    items: Optional[list[str]] = None

    @field_validator("items", mode="before")
    @classmethod
    def wrap_single_item(cls, value: Any) -> Any:
        return _as_list(value)


class FieldDirectives(BaseModel):
    """
    Every directive the mapper understands, decoded from one field.

    `count` is the total number of directives on the field, known or not.
    """
    sortable: bool = False
    filterable: bool = False
    link: bool = False
    localized: bool = False
    children: bool = False
    ignore: bool = False
    text: TextDirective = Field(default_factory=TextDirective)
    number: NumberDirective = Field(default_factory=NumberDirective)
    array: ListDirective = Field(default_factory=ListDirective)
    const: ConstDirective = Field(default_factory=ConstDirective)
    example: Optional[list[str]] = None
    count: int = 0

    @field_validator("example", mode="before")
    @classmethod
    def wrap_single_example(cls, value: Any) -> Any:
        return _as_list(value)

    @property
    def excluded(self) -> bool:
        """Field is kept out of the property map of its object."""
        return self.children or self.ignore

    @classmethod
    def from_node(cls, node: Node) -> "FieldDirectives":
        """Decode the directives of a field definition node."""
        try:
            return cls(
                sortable=has_directive(node, "sortable"),
                filterable=has_directive(node, "filterable"),
                link=has_directive(node, "link"),
                localized=has_directive(node, "localized"),
                children=has_directive(node, "children"),
                ignore=has_directive(node, "ignoreAmplience"),
                text=TextDirective(
                    format=find_directive_value(node, "text", "format"),
                    min_length=find_directive_value(node, "text", "minLength"),
                    max_length=find_directive_value(node, "text", "maxLength"),
                ),
                number=NumberDirective(
                    minimum=find_directive_value(node, "number", "minimum"),
                    maximum=find_directive_value(node, "number", "maximum"),
                ),
                array=ListDirective(
                    min_items=find_directive_value(node, "list", "minItems"),
                    max_items=find_directive_value(node, "list", "maxItems"),
                ),
                const=ConstDirective(
                    item=find_directive_value(node, "const", "item"),
                    items=find_directive_value(node, "const", "items"),
                ),
                example=find_directive_value(node, "example", "items"),
                count=len(getattr(node, "directives", None) or ()),
            )
        except ValidationError as e:
            name = node.name.value if getattr(node, "name", None) else "<anonymous>"
            raise GraphConfigError(f"Invalid directive arguments on field '{name}': {e}") from e
