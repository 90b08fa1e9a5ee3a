"""
Custom exceptions for the amplience-schema generator.
"""

from __future__ import annotations

from typing import Optional


class AmplienceSchemaError(Exception):
    """Base exception for all amplience-schema errors."""
    pass


class GraphConfigError(AmplienceSchemaError):
    """Raised when the annotated schema or generator configuration is invalid."""

    def __init__(self, message: str, type_name: Optional[str] = None):
        self.type_name = type_name
        super().__init__(f"[{type_name}] {message}" if type_name else message)
