"""
Core module - directive decoding, property resolution, traits and documents.
"""

from __future__ import annotations

from .config import GeneratorConfig, Visualization, load_config
from .content_type import content_type, content_type_schema, schema_document
from .defs import (
    DEFAULT_ICON,
    DIRECTIVES_SDL,
    MAX_FILTERABLE_PATHS,
    VALIDATION_LEVELS,
    ValidationLevel,
)
from .directives import (
    FieldDirectives,
    find_directive,
    find_directive_value,
    has_directive,
)
from .errors import AmplienceSchemaError, GraphConfigError
from .properties import (
    amplience_property_type,
    check_localized,
    content_link,
    field_property_type,
    inline_object,
    localized,
    object_properties,
    ref_type,
)
from .traits import filterable_trait, hierarchy_trait, sortable_trait
from .uri import definition_uri, type_uri
from .utils import combinations, to_capital_case, to_kebab_case

__all__ = [
    # Config
    "GeneratorConfig",
    "Visualization",
    "load_config",
    # Constants
    "DEFAULT_ICON",
    "DIRECTIVES_SDL",
    "MAX_FILTERABLE_PATHS",
    "VALIDATION_LEVELS",
    "ValidationLevel",
    # Errors
    "AmplienceSchemaError",
    "GraphConfigError",
    # Directives
    "FieldDirectives",
    "has_directive",
    "find_directive",
    "find_directive_value",
    # URIs
    "type_uri",
    "definition_uri",
    # Properties
    "amplience_property_type",
    "field_property_type",
    "object_properties",
    "inline_object",
    "content_link",
    "check_localized",
    "localized",
    "ref_type",
    # Traits
    "sortable_trait",
    "hierarchy_trait",
    "filterable_trait",
    # Documents
    "content_type",
    "content_type_schema",
    "schema_document",
    # Utils
    "to_kebab_case",
    "to_capital_case",
    "combinations",
]
