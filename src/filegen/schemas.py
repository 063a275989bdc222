"""Pydantic schemas for runtime validation of generation settings."""

from __future__ import annotations

import codecs
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from filegen.errors import ConfigurationError

DEFAULT_SOURCE_SUFFIX = ".xml.py"
DEFAULT_DESTINATION_SUFFIX = ".xml"
DEFAULT_ENGINE = "py"
DEFAULT_ENCODING = "utf-8"
PYPROJECT_TABLE = "filegen"


class GenerationConfig(BaseModel):
    """Validated settings for one generation run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source_root: Path
    output_root: Path
    source_suffix: str = DEFAULT_SOURCE_SUFFIX
    destination_suffix: str = DEFAULT_DESTINATION_SUFFIX
    engine: str = DEFAULT_ENGINE
    converters: dict[str, str] = Field(default_factory=dict)
    encoding: str = DEFAULT_ENCODING
    excludes: list[str] = Field(default_factory=list)
    script_paths: list[Path] = Field(default_factory=list)
    engine_modules: list[str] = Field(default_factory=list)

    @field_validator("source_suffix", "destination_suffix")
    @classmethod
    def _validate_suffix(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("file suffixes cannot be empty.")
        if not value.startswith("."):
            raise ValueError(f"file suffix '{value}' must start with '.'.")
        return value

    @field_validator("engine")
    @classmethod
    def _validate_engine(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("engine selector cannot be empty.")
        return value

    @field_validator("encoding")
    @classmethod
    def _validate_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown text encoding '{value}'.") from exc
        return value

    @field_validator("converters")
    @classmethod
    def _validate_converters(cls, value: dict[str, str]) -> dict[str, str]:
        for type_name, converter_name in value.items():
            if not type_name.strip() or not converter_name.strip():
                raise ValueError("converter entries cannot contain empty names.")
        return {key.strip(): item.strip() for key, item in value.items()}

    @property
    def include_pattern(self) -> str:
        """Glob pattern selecting script files under ``source_root``."""
        return f"**/*{self.source_suffix}"


def build_config(**values: Any) -> GenerationConfig:
    """Validate settings, raising ``ConfigurationError`` on failure."""
    try:
        return GenerationConfig(**values)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid generation settings: {exc}") from exc


def load_config(pyproject_path: Path, **overrides: Any) -> GenerationConfig:
    """Build settings from the ``[tool.filegen]`` table of a pyproject file.

    Parameters
    ----------
    pyproject_path : Path
        Path to a ``pyproject.toml`` file.
    **overrides : Any
        Values taking precedence over the file. ``None`` values are ignored.

    Returns
    -------
    GenerationConfig
        Validated settings. Relative paths in the file are resolved against
        the directory containing it.

    Raises
    ------
    ConfigurationError
        If the file cannot be read or the resulting settings are invalid.
    """
    try:
        document = tomllib.loads(pyproject_path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigurationError(f"Unable to read {pyproject_path}: {exc}") from exc

    table = dict(document.get("tool", {}).get(PYPROJECT_TABLE, {}))
    base_dir = pyproject_path.resolve().parent
    for key in ("source_root", "output_root"):
        if key in table:
            table[key] = base_dir / table[key]
    if "script_paths" in table:
        table["script_paths"] = [base_dir / item for item in table["script_paths"]]

    table.update({key: value for key, value in overrides.items() if value is not None})
    return build_config(**table)
