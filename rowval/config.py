"""
Configuration models and YAML I/O for rowval.

Key models:
- ParserConfig: Top-level config (row + value + reader).
- RowConfig: Field delimiter for the row parser.
- ValueConfig: Nesting limit for the value parser.
- ReaderConfig: Encoding used when reading text sources from disk.

Key functions:
- load_config(path) -> ParserConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from rowval.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)

# Two interpreter frames per nesting level; stays well below the default
# recursion limit of 1000.
MAX_DEPTH_CEILING = 256


class RowConfig(BaseModel):
    """Row parser settings."""

    delimiter: str = Field(",", description="Single field separator character")

    @field_validator("delimiter")
    @classmethod
    def _check_delimiter(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(
                f"delimiter must be exactly one character, got {value!r}"
            )
        if value == '"':
            raise ValueError("delimiter cannot be the quote character")
        if value in "\r\n":
            raise ValueError("delimiter cannot be a line break")
        return value


class ValueConfig(BaseModel):
    """Value parser settings."""

    max_depth: int = Field(
        64,
        ge=1,
        le=MAX_DEPTH_CEILING,
        description="Maximum array/object nesting depth",
    )


class ReaderConfig(BaseModel):
    """Settings for reading text sources from disk."""

    encoding: str = Field(
        "utf-8-sig", description="Text encoding; the default strips a BOM"
    )


class ParserConfig(BaseModel):
    """Top-level configuration for rowval.

    Every section has defaults, so an empty mapping is a valid config.
    Unknown section names are rejected so a misspelt ``rows:`` does not
    silently fall back to the defaults.
    """

    model_config = ConfigDict(extra="forbid")

    row: RowConfig = Field(default_factory=RowConfig)
    value: ValueConfig = Field(default_factory=ValueConfig)
    reader: ReaderConfig = Field(default_factory=ReaderConfig)

    @classmethod
    def from_yaml(cls, text: str, source: str = "<string>") -> ParserConfig:
        """Validate a YAML document.

        Raises:
            ConfigValidationError: If the document is empty or not a mapping.
            pydantic.ValidationError: If a section fails schema validation.
        """
        raw = yaml.safe_load(text)
        if raw is None:
            raise ConfigValidationError(f"Config file is empty: {source}")
        if not isinstance(raw, dict):
            raise ConfigValidationError(
                f"Config file must contain a mapping, got {type(raw).__name__}: {source}"
            )
        return cls.model_validate(raw)

    def to_yaml(self) -> str:
        """Render as YAML, sections in declaration order, after a header comment."""
        body = yaml.safe_dump(
            self.model_dump(mode="json"),
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
        return "# rowval configuration\n\n" + body


def load_config(path: str | Path) -> ParserConfig:
    """Load a YAML config file into a ParserConfig.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty or not a mapping.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")
    config = ParserConfig.from_yaml(path.read_text(encoding="utf-8"), str(path))
    logger.info(
        "Loaded config from %s (delimiter=%r, max_depth=%d)",
        path, config.row.delimiter, config.value.max_depth,
    )
    return config


def save_config(config: ParserConfig, path: str | Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.to_yaml(), encoding="utf-8")
    logger.info("Saved config to %s", path)
