"""
Trait builders for Amplience content type schemas.

Each builder returns the object that can be stored under the matching
`trait:*` key of a schema, or None when the type has nothing to contribute.
"""

from __future__ import annotations

from typing import Any, Optional

from .defs import MAX_FILTERABLE_PATHS
from .directives import FieldDirectives
from .errors import GraphConfigError
from .nodes import field_nodes, name_of
from .properties import ObjectType
from .uri import type_uri
from .utils import combinations, to_kebab_case


def _tagged_fields(type_: ObjectType, flag: str) -> list[str]:
    """Names of the fields whose decoded directives have `flag` set."""
    return [
        field.name.value
        for field in field_nodes(type_)
        if getattr(FieldDirectives.from_node(field), flag)
    ]


def sortable_trait(type_: ObjectType) -> Optional[dict[str, Any]]:
    """
    Sortable trait from the fields tagged `@sortable`.

    Example:
        a @sortable, b, c @sortable -> {"sortBy": [{"key": "default", "paths": ["/a", "/c"]}]}
    """
    names = _tagged_fields(type_, "sortable")
    if not names:
        return None

    return {
        "sortBy": [
            {
                "key": "default",
                "paths": [f"/{name}" for name in names],
            },
        ],
    }


def hierarchy_trait(type_: ObjectType, schema_host: str) -> dict[str, Any]:
    """
    Hierarchy trait: the type itself plus every type named by a `@children` field.
    """
    return {
        "childContentTypes": [
            type_uri(type_, schema_host),
            *(f"{schema_host}/{to_kebab_case(name)}" for name in _tagged_fields(type_, "children")),
        ],
    }


def filterable_trait(type_: ObjectType) -> Optional[dict[str, Any]]:
    """
    Filterable trait from the fields tagged `@filterable`.

    Amplience filters on one path combination at a time, so every non-empty
    combination of the tagged paths is listed: by size, then field order.

    Raises:
        GraphConfigError: more than five fields are tagged
    """
    names = _tagged_fields(type_, "filterable")
    if not names:
        return None
    if len(names) > MAX_FILTERABLE_PATHS:
        raise GraphConfigError(
            f"max @filterable tags can be {MAX_FILTERABLE_PATHS}, got {len(names)}",
            type_name=name_of(type_),
        )

    return {
        "filterBy": [{"paths": paths} for paths in combinations(f"/{name}" for name in names)],
    }
