#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/filegen"


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = path.read_text(encoding="utf-8")
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Keep the CLI out of library layers and I/O out of the renderer."""
    library_modules = [
        *PACKAGE.glob("application/*.py"),
        *PACKAGE.glob("engines/*.py"),
        *PACKAGE.glob("infrastructure/*.py"),
        PACKAGE / "converters.py",
        PACKAGE / "rendering.py",
        PACKAGE / "runner.py",
        PACKAGE / "writer.py",
    ]
    for path in library_modules:
        _assert_no_imports(path, ["import typer", "from typer", "filegen.cli"])

    _assert_no_imports(
        PACKAGE / "rendering.py",
        ["filegen.writer", "filegen.runner", "filegen.scanning", "open("],
    )

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
