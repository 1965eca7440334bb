"""Coverage configuration."""

import json
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .CoverageConfigError import CoverageConfigError


class CoverageConfig(BaseModel):
    """Options for a coverage run."""

    model_config = ConfigDict(extra="forbid")

    sentinel: str = Field("any", min_length=1, description="Printed type that marks an unknown position")
    snippet_length: int = Field(40, gt=0, description="Characters kept for identifier and function snippets")
    indent: int = Field(2, ge=0, description="JSON indentation of the written report")
    language: Literal["typescript", "tsx", "javascript"] | None = Field(
        None, description="Tree-sitter language for every root file; inferred from the extension when unset"
    )

    @classmethod
    def from_config_dict(cls, config: dict[str, Any]) -> "CoverageConfig":
        """Load coverage config from the optional ``coverage`` section of a config dict.

        Raises:
            CoverageConfigError: If the section or any of its fields is invalid
        """
        section = config.get("coverage", {})
        if not isinstance(section, dict):
            raise CoverageConfigError(
                [f"coverage section must be a dict (found: {type(section).__name__}, expected: dict of options)"]
            )

        try:
            return cls(**section)
        except ValidationError as e:
            errors = []
            for error in e.errors():
                loc = error.get("loc", ())
                field = ".".join(str(x) for x in loc)
                errors.append(f"coverage.{field}: {error.get('msg', 'invalid value')}")
            raise CoverageConfigError(errors or [str(e)]) from e

    @classmethod
    def load(cls, path: Path) -> "CoverageConfig":
        """Load and validate config from a JSON file.

        Raises:
            CoverageConfigError: If the file is missing, not valid JSON, or fails validation
        """
        path = Path(path)
        if not path.exists():
            raise CoverageConfigError([f"Configuration file not found at {path}"])

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise CoverageConfigError([f"Invalid JSON in config file {path}: {e}"]) from e

        if not isinstance(raw, dict):
            raise CoverageConfigError([f"Config file {path} must contain a JSON object (found: {type(raw).__name__})"])
        return cls.from_config_dict(raw)
