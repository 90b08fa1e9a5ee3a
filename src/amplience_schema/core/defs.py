"""
Amplience constants: canonical schema URIs, directive names and defaults.
"""

from __future__ import annotations

from typing import Literal


ValidationLevel = Literal["CONTENT_TYPE", "PARTIAL", "SLOT"]
VALIDATION_LEVELS = ("CONTENT_TYPE", "PARTIAL", "SLOT")

JSON_SCHEMA_DRAFT = "http://json-schema.org/draft-07/schema#"

DEFAULT_ICON = "https://bigcontent.io/cms/icons/ca-types-primitives.png"

# Amplience only supports multi-path filtering up to five paths
MAX_FILTERABLE_PATHS = 5

IMAGE_SCALAR = "AmplienceImage"
VIDEO_SCALAR = "AmplienceVideo"


# =============================================================================
# Canonical Amplience schema definitions
# =============================================================================

_CORE = "http://bigcontent.io/cms/schema/v1/core#/definitions"
_LOCALIZATION = "http://bigcontent.io/cms/schema/v1/localization#/definitions"

CONTENT = f"{_CORE}/content"
CONTENT_LINK = f"{_CORE}/content-link"
LOCALIZED_VALUE = f"{_CORE}/localized-value"
LOCALIZED_STRING = f"{_LOCALIZATION}/localized-string"
HIERARCHY_NODE = "http://bigcontent.io/cms/schema/v2/hierarchy#/definitions/hierarchy-node"

# media scalar -> (plain ref, localized ref)
MEDIA_TYPES = {
    IMAGE_SCALAR: (f"{_CORE}/image-link", f"{_LOCALIZATION}/localized-image"),
    VIDEO_SCALAR: (f"{_CORE}/video-link", f"{_LOCALIZATION}/localized-video"),
}


CONTENT_TYPE_DIRECTIVE = "amplienceContentType"

# Declarations for every directive and scalar the mapper understands.
# `load_schema` adds the ones a user schema does not declare itself.
DIRECTIVES_SDL = '''
directive @amplienceContentType(
  icon: String
  hierarchy: Boolean
  validationLevel: AmplienceValidationLevel
) on OBJECT

enum AmplienceValidationLevel {
  CONTENT_TYPE
  PARTIAL
  SLOT
}

# Field directives may repeat; the first one of a name wins

directive @link repeatable on FIELD_DEFINITION
directive @localized repeatable on FIELD_DEFINITION
directive @children repeatable on FIELD_DEFINITION
directive @ignoreAmplience repeatable on FIELD_DEFINITION
directive @sortable repeatable on FIELD_DEFINITION
directive @filterable repeatable on FIELD_DEFINITION
directive @text(format: String, minLength: Int, maxLength: Int) repeatable on FIELD_DEFINITION
directive @number(minimum: Float, maximum: Float) repeatable on FIELD_DEFINITION
directive @list(minItems: Int, maxItems: Int) repeatable on FIELD_DEFINITION
directive @const(item: String, items: [String!]) repeatable on FIELD_DEFINITION
directive @example(items: [String!]) repeatable on FIELD_DEFINITION

scalar AmplienceImage
scalar AmplienceVideo
'''
