#!/usr/bin/env python3
"""Simple complexity guard for the generation orchestrator."""

from __future__ import annotations

import ast
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
TARGET = ROOT / "src/filegen/application/use_cases.py"
MAX_STATEMENTS = 40


def _functions(tree: ast.Module) -> list[ast.FunctionDef]:
    found: list[ast.FunctionDef] = []
    for node in tree.body:
        if isinstance(node, ast.FunctionDef):
            found.append(node)
        elif isinstance(node, ast.ClassDef):
            found.extend(item for item in node.body if isinstance(item, ast.FunctionDef))
    return found


def main() -> None:
    """Fail when orchestrator functions exceed the statement threshold."""
    tree = ast.parse(TARGET.read_text(encoding="utf-8"))
    violations = [
        f"{node.name}: {len(node.body)} statements"
        for node in _functions(tree)
        if len(node.body) > MAX_STATEMENTS
    ]
    if violations:
        raise SystemExit(
            "Use-case complexity threshold exceeded:\n"
            + "\n".join(f"- {v}" for v in violations)
        )
    print("Orchestrator complexity check passed.")


if __name__ == "__main__":
    main()
