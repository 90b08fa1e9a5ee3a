"""
amplience-schema CLI - Command line tools for generating Amplience content types.
"""

from __future__ import annotations

from .main import main, app

__all__ = ["main", "app"]
