"""Shared pytest configuration, marker assignment and fixtures."""

from __future__ import annotations

import uuid
from pathlib import Path

import pytest

WIDGET_MODULE_SOURCE = '''
class Widget:
    def __init__(self, label="widget"):
        self.label = label


class SpecialWidget(Widget):
    pass


class WidgetConverter:
    def apply(self, value):
        return "WIDGET"


class SpecialWidgetConverter:
    def apply(self, value):
        return "SPECIAL"


class LabelConverter:
    def apply(self, value):
        return value.label


class FailingConverter:
    def apply(self, value):
        raise ValueError("cannot render widget")


class BrokenConverter:
    def __init__(self):
        raise RuntimeError("constructor exploded")


class NotAConverter:
    pass
'''


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def widget_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Write an importable module with widget types and converters.

    Returns the module name; it is unique per test so cached imports never
    leak between tests.
    """
    name = f"widgets_{uuid.uuid4().hex}"
    module_dir = tmp_path / "modules"
    module_dir.mkdir()
    (module_dir / f"{name}.py").write_text(WIDGET_MODULE_SOURCE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(module_dir))
    return name
