"""
Utility functions for amplience-schema.

Includes:
- Case conversion (PascalCase/camelCase -> kebab-case, Capital Case)
- Descriptor helpers (dropping absent keys, path combinations)
"""

from __future__ import annotations

import itertools
import re
from typing import Any, Iterable


# =============================================================================
# Case conversion utilities
# =============================================================================

# Pre-compiled regex patterns for better performance
_LOWER_UPPER_PATTERN = re.compile(r'([a-z0-9])([A-Z])')
_ACRONYM_PATTERN = re.compile(r'([A-Z])([A-Z][a-z])')
_SEPARATOR_PATTERN = re.compile(r'[^A-Za-z0-9]+')
_SNAKE_TO_CAMEL_PATTERN = re.compile(r'_([a-z])')


def split_words(name: str) -> list[str]:
    """
    Split an identifier into its words.

    Examples:
        AmplienceImage -> ["Amplience", "Image"]
        firstName -> ["first", "Name"]
        HTTPResponse -> ["HTTP", "Response"]
        hero_banner -> ["hero", "banner"]
    """
    result = _LOWER_UPPER_PATTERN.sub(r'\1 \2', name)
    # Handle consecutive uppercase (HTTPResponse -> HTTP Response)
    result = _ACRONYM_PATTERN.sub(r'\1 \2', result)
    result = _SEPARATOR_PATTERN.sub(' ', result)
    return result.split()


def to_kebab_case(name: str) -> str:
    """
    Convert an identifier to kebab-case.

    Examples:
        HeroBanner -> hero-banner
        AmplienceImage -> amplience-image
        HTTPResponse -> http-response
    """
    return "-".join(word.lower() for word in split_words(name))


def to_capital_case(name: str) -> str:
    """
    Convert an identifier to Capital Case.

    Examples:
        firstName -> First Name
        HeroBanner -> Hero Banner
    """
    return " ".join(word[0].upper() + word[1:].lower() for word in split_words(name))


def to_camel_case(name: str) -> str:
    """
    Convert snake_case to camelCase.

    Examples:
        schema_host -> schemaHost
        templated_uri -> templatedUri
    """
    def replace_underscore(match):
        return match.group(1).upper()

    return _SNAKE_TO_CAMEL_PATTERN.sub(replace_underscore, name)


# =============================================================================
# Descriptor utilities
# =============================================================================


def drop_none(data: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of `data` without the keys whose value is None."""
    return {k: v for k, v in data.items() if v is not None}


def combinations(items: Iterable[str]) -> list[list[str]]:
    """
    Every non-empty subset of `items`, by increasing size and then item order.

    Example:
        ["/a", "/b", "/c"] ->
        [["/a"], ["/b"], ["/c"], ["/a", "/b"], ["/a", "/c"], ["/b", "/c"], ["/a", "/b", "/c"]]
    """
    items = list(items)
    return [
        list(subset)
        for size in range(1, len(items) + 1)
        for subset in itertools.combinations(items, size)
    ]
