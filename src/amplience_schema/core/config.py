"""
Generator configuration loading and validation.

Config file (amplience.yaml):

    schemaHost: https://schema.example.com
    visualizations:
      - label: Localhost
        templatedUri: http://localhost:3000/visualization?id={{content.sys.id}}
        default: true
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import GraphConfigError
from .utils import to_camel_case


DEFAULT_CONFIG_PATH = "amplience.yaml"


class Visualization(BaseModel):
    """Preview URL offered by Amplience for a content type."""
    model_config = ConfigDict(alias_generator=to_camel_case, populate_by_name=True, frozen=True)

    label: str
    templated_uri: str
    default: bool = False


class GeneratorConfig(BaseModel):
    """Settings shared by every document of one generation run."""
    model_config = ConfigDict(alias_generator=to_camel_case, populate_by_name=True, frozen=True)

    schema_host: str
    visualizations: list[Visualization] = Field(default_factory=list)

    def visualization_dicts(self) -> list[dict[str, Any]]:
        """Visualizations as they appear in content type settings."""
        return [v.model_dump(by_alias=True) for v in self.visualizations]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GeneratorConfig":
        """Create config from dictionary."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise GraphConfigError(f"Invalid generator config: {e}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for YAML serialization."""
        return self.model_dump(by_alias=True)

    def save(self, path: Path | str = DEFAULT_CONFIG_PATH) -> None:
        """Save configuration to YAML file."""
        path = Path(path)
        content = yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False)
        path.write_text(content)


def load_config(path: Path | str = DEFAULT_CONFIG_PATH) -> Optional[GeneratorConfig]:
    """Load configuration from YAML file, None when the file does not exist."""
    path = Path(path)
    if not path.exists():
        return None

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise GraphConfigError(f"{path}: invalid YAML: {e}") from e
    if not isinstance(data, dict):
        raise GraphConfigError(f"{path}: expected a mapping at the top level")

    try:
        return GeneratorConfig.from_dict(data)
    except GraphConfigError as e:
        raise GraphConfigError(f"{path}: {e}") from e
