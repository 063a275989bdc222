"""Application ports for the generation pipeline."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from filegen.writer import RenderedOutput


class SourceLocator(Protocol):
    """Enumerate script files below a source root."""

    def scan(self, root: Path, include_pattern: str, excludes: Iterable[str] = ()) -> list[str]:
        """Return relative POSIX paths, in processing order."""


class OutputWriter(Protocol):
    """Persist rendered output."""

    def write(self, output: RenderedOutput, encoding: str) -> Path:
        """Write output and return the written path."""
