"""Generate files from scripts found under a source tree."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

__version__ = "0.1.0"


def generate_files(
    source_root: Path,
    output_root: Path,
    *,
    source_suffix: str = ".xml.py",
    destination_suffix: str = ".xml",
    engine: str = "py",
    converters: Mapping[str, str] | None = None,
    encoding: str = "utf-8",
    excludes: Iterable[str] | None = None,
    script_paths: Iterable[Path] | None = None,
    engine_modules: Iterable[str] | None = None,
) -> list[Path]:
    """Run every script under ``source_root`` and write its result.

    Parameters
    ----------
    source_root : Path
        Directory scanned for scripts.
    output_root : Path
        Directory receiving generated files; relative paths are mirrored.
    source_suffix : str, default=".xml.py"
        Suffix identifying scripts, replaced in output file names.
    destination_suffix : str, default=".xml"
        Suffix of generated files.
    engine : str, default="py"
        Scripting backend selector.
    converters : Mapping[str, str], optional
        Qualified type name to qualified converter class name.
    encoding : str, default="utf-8"
        Encoding used to read scripts and write outputs.
    excludes : Iterable[str], optional
        Glob patterns of relative paths to skip.
    script_paths : Iterable[Path], optional
        Directories made importable while scripts and converters load.
    engine_modules : Iterable[str], optional
        Modules or file paths registering additional scripting backends.

    Returns
    -------
    list[Path]
        Written output files, in processing order.
    """
    from .api import generate_files as _impl

    return _impl(
        source_root=source_root,
        output_root=output_root,
        source_suffix=source_suffix,
        destination_suffix=destination_suffix,
        engine=engine,
        converters=converters,
        encoding=encoding,
        excludes=excludes,
        script_paths=script_paths,
        engine_modules=engine_modules,
    )


__all__ = ["generate_files"]
