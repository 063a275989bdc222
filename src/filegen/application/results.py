"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GenerationResult:
    """Structured outcome of a successful generation run."""

    source_root: Path
    output_root: Path
    engine: str
    sources: tuple[str, ...] = ()
    outputs: tuple[Path, ...] = ()
