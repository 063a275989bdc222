"""Filesystem-backed source locator and output writer."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from filegen.scanning import scan_sources
from filegen.writer import RenderedOutput, write_output


class FileSystemSourceLocator:
    """Default source locator walking the local filesystem."""

    def scan(self, root: Path, include_pattern: str, excludes: Iterable[str] = ()) -> list[str]:
        """Return sorted relative paths of matching files below ``root``."""
        return scan_sources(root, include_pattern, excludes)


class FileSystemOutputWriter:
    """Default writer producing one text file per rendered output."""

    def write(self, output: RenderedOutput, encoding: str) -> Path:
        """Write ``output`` with ``encoding`` and return its path."""
        return write_output(output, encoding=encoding)
