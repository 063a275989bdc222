"""Unit tests for source discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from filegen.errors import ConfigurationError
from filegen.scanning import resource_exclude_pattern, scan_sources


def _touch(root: Path, relative: str) -> None:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("'x'\n", encoding="utf-8")


def test_scan_finds_nested_matches_sorted(tmp_path: Path) -> None:
    """Return sorted relative POSIX paths at every depth."""
    for relative in ["z.xml.py", "a/b/c.xml.py", "a/a.xml.py", "a/notes.txt", "a/plain.py"]:
        _touch(tmp_path, relative)

    found = scan_sources(tmp_path, "**/*.xml.py")

    assert found == ["a/a.xml.py", "a/b/c.xml.py", "z.xml.py"]


def test_scan_skips_directories_and_vcs_folders(tmp_path: Path) -> None:
    """Ignore matching directories and default-excluded folders."""
    (tmp_path / "dir.xml.py").mkdir()
    _touch(tmp_path, ".git/hooks/x.xml.py")
    _touch(tmp_path, "pkg/__pycache__/y.xml.py")
    _touch(tmp_path, "pkg/ok.xml.py")

    assert scan_sources(tmp_path, "**/*.xml.py") == ["pkg/ok.xml.py"]


def test_scan_applies_exclude_globs(tmp_path: Path) -> None:
    """Drop files matching user exclude patterns."""
    _touch(tmp_path, "keep/a.xml.py")
    _touch(tmp_path, "drafts/b.xml.py")
    _touch(tmp_path, "drafts/deep/c.xml.py")

    found = scan_sources(tmp_path, "**/*.xml.py", excludes=["drafts/*"])

    assert found == ["keep/a.xml.py"]


def test_scan_missing_root_raises(tmp_path: Path) -> None:
    """Fail with ConfigurationError when the source root is absent."""
    with pytest.raises(ConfigurationError, match="does not exist"):
        scan_sources(tmp_path / "missing", "**/*.xml.py")


def test_scan_empty_tree(tmp_path: Path) -> None:
    """Return an empty list when nothing matches."""
    assert scan_sources(tmp_path, "**/*.xml.py") == []


def test_resource_exclude_pattern() -> None:
    """Build the glob hosts use to keep raw scripts out of resources."""
    assert resource_exclude_pattern(".xml.kts") == "**/*.xml.kts"
