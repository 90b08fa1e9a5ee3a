"""
Output writer - stores generated Amplience documents on disk.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..generator import GeneratedFile

logger = logging.getLogger(__name__)


class SchemaWriter:
    """Writes generated files below an output directory."""

    def __init__(self, output: Path | str = "amplience", dry_run: bool = False):
        self.output = Path(output)
        self.dry_run = dry_run

    def write_all(self, files: list[GeneratedFile]) -> list[Path]:
        """Write every file, returning the paths written (or that would be)."""
        return [self.write(file) for file in files]

    def write(self, file: GeneratedFile) -> Path:
        """Write a single file, creating its directories."""
        path = self.output / file.path
        if self.dry_run:
            print(f"Would write {path}")
            return path

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(file.to_json())
        logger.debug(f"Wrote {path}")
        return path
