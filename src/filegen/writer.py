"""Output path mapping and file writing."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from filegen.errors import WriteError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedOutput:
    """Rendered text bound to its destination file."""

    text: str
    destination: Path


def destination_path(relative_path: str, source_suffix: str, destination_suffix: str) -> str:
    """Swap the trailing ``source_suffix`` of ``relative_path`` for ``destination_suffix``.

    >>> destination_path("a/b/c.xml.py", ".xml.py", ".xml")
    'a/b/c.xml'
    """
    if not relative_path.endswith(source_suffix):
        raise ValueError(f"'{relative_path}' does not end with '{source_suffix}'.")
    return relative_path[: len(relative_path) - len(source_suffix)] + destination_suffix


def write_output(output: RenderedOutput, encoding: str = "utf-8") -> Path:
    """Write rendered text, creating parent directories as needed.

    Text is written without newline translation so that identical inputs
    always produce identical bytes. A failed write may leave a truncated file.

    Raises
    ------
    WriteError
        On I/O failure, unknown encoding, or text the encoding cannot express.
    """
    path = output.destination
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding=encoding, newline="") as handle:
            handle.write(output.text)
    except (OSError, LookupError, UnicodeError) as exc:
        raise WriteError(path, exc) from exc
    logger.info("Wrote %s", path)
    return path
