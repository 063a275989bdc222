"""Source file discovery under a source root."""

from __future__ import annotations

import fnmatch
import logging
from collections.abc import Iterable
from pathlib import Path

from filegen.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDED_DIRS = frozenset(
    {".git", ".hg", ".svn", "CVS", ".bzr", "__pycache__", ".mypy_cache", ".pytest_cache"}
)


def resource_exclude_pattern(source_suffix: str) -> str:
    """Return the glob a host should exclude from packaged resources."""
    return f"**/*{source_suffix}"


def _is_excluded(relative: Path, excludes: Iterable[str]) -> bool:
    if any(part in DEFAULT_EXCLUDED_DIRS for part in relative.parts[:-1]):
        return True
    posix = relative.as_posix()
    return any(fnmatch.fnmatchcase(posix, pattern) for pattern in excludes)


def scan_sources(
    root: Path,
    include_pattern: str,
    excludes: Iterable[str] = (),
) -> list[str]:
    """List script files below ``root``.

    Parameters
    ----------
    root : Path
        Source root directory.
    include_pattern : str
        Glob pattern relative to ``root`` (for example ``**/*.xml.py``).
    excludes : Iterable[str], optional
        Glob patterns matched against the relative POSIX path.

    Returns
    -------
    list[str]
        Sorted relative POSIX paths of matching regular files.

    Raises
    ------
    ConfigurationError
        If ``root`` is not an existing directory.
    """
    if not root.is_dir():
        raise ConfigurationError(f"Source root {root} does not exist or is not a directory.")

    exclude_patterns = list(excludes)
    found: list[str] = []
    for candidate in root.glob(include_pattern):
        if not candidate.is_file():
            continue
        relative = candidate.relative_to(root)
        if _is_excluded(relative, exclude_patterns):
            logger.debug("Skipping excluded file %s", relative)
            continue
        found.append(relative.as_posix())
    return sorted(found)
