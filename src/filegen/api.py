"""Public generation API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable
from typing import Mapping
from typing import Optional

from filegen.application.use_cases import generate_files as run_generation
from filegen.converters import ConverterRegistry
from filegen.engines.registry import EngineRegistry
from filegen.schemas import (
    DEFAULT_DESTINATION_SUFFIX,
    DEFAULT_ENCODING,
    DEFAULT_ENGINE,
    DEFAULT_SOURCE_SUFFIX,
    build_config,
    load_config,
)


def generate_files(
    source_root: Path,
    output_root: Path,
    *,
    source_suffix: str = DEFAULT_SOURCE_SUFFIX,
    destination_suffix: str = DEFAULT_DESTINATION_SUFFIX,
    engine: str = DEFAULT_ENGINE,
    converters: Optional[Mapping[str, str]] = None,
    encoding: str = DEFAULT_ENCODING,
    excludes: Optional[Iterable[str]] = None,
    script_paths: Optional[Iterable[Path]] = None,
    engine_modules: Optional[Iterable[str]] = None,
    converter_registry: Optional[ConverterRegistry] = None,
    engine_registry: Optional[EngineRegistry] = None,
) -> list[Path]:
    """Generate one output file per script and return the written paths."""
    config = build_config(
        source_root=source_root,
        output_root=output_root,
        source_suffix=source_suffix,
        destination_suffix=destination_suffix,
        engine=engine,
        converters=dict(converters or {}),
        encoding=encoding,
        excludes=list(excludes or []),
        script_paths=list(script_paths or []),
        engine_modules=list(engine_modules or []),
    )
    result = run_generation(
        config,
        engines=engine_registry,
        converters=converter_registry,
    )
    return list(result.outputs)


def generate_files_from_pyproject(pyproject_path: Path, **overrides: object) -> list[Path]:
    """Generate files using the ``[tool.filegen]`` table of a pyproject file."""
    config = load_config(pyproject_path, **overrides)
    return list(run_generation(config).outputs)
