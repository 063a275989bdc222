"""Unit tests for the built-in Python scripting backend."""

from __future__ import annotations

from pathlib import Path
from xml.etree import ElementTree

import pytest

from filegen.engines.base import ScriptEngine
from filegen.engines.builtins import PythonScriptEngine

SCRIPT = Path("scripts/example.xml.py")


def test_engine_satisfies_protocol() -> None:
    """Expose the attributes and methods the runner relies on."""
    assert isinstance(PythonScriptEngine(), ScriptEngine)


def test_trailing_expression_is_the_result() -> None:
    """Return the value of the final expression statement."""
    engine = PythonScriptEngine()
    assert engine.evaluate("x = 2\nx * 21", SCRIPT) == 42


def test_script_without_trailing_expression_returns_none() -> None:
    """Produce None when the script ends with a statement."""
    engine = PythonScriptEngine()
    assert engine.evaluate("result = '<root/>'\n", SCRIPT) is None
    assert engine.evaluate("", SCRIPT) is None


def test_script_can_build_documents() -> None:
    """Allow scripts to import modules and return rich values."""
    source = (
        "from xml.etree.ElementTree import Element, SubElement\n"
        "root = Element('root')\n"
        "for i in range(3):\n"
        "    SubElement(root, 'item', {'n': str(i)})\n"
        "root\n"
    )
    result = PythonScriptEngine().evaluate(source, SCRIPT)
    assert isinstance(result, ElementTree.Element)
    assert [item.get("n") for item in result] == ["0", "1", "2"]


def test_scripts_get_fresh_namespaces() -> None:
    """Do not leak globals from one script to the next."""
    engine = PythonScriptEngine()
    engine.evaluate("leaked = 1\nleaked", SCRIPT)
    with pytest.raises(NameError):
        engine.evaluate("leaked", SCRIPT)
    assert engine.evaluated == 1


def test_script_sees_its_own_file_name() -> None:
    """Expose __file__ so scripts can locate sibling resources."""
    assert PythonScriptEngine().evaluate("__file__", SCRIPT) == str(SCRIPT)


def test_errors_propagate_with_script_file_name() -> None:
    """Raise script errors with tracebacks pointing at the script path."""
    with pytest.raises(ZeroDivisionError) as exc_info:
        PythonScriptEngine().evaluate("1 / 0", SCRIPT)
    tb = exc_info.value.__traceback__
    while tb.tb_next is not None:
        tb = tb.tb_next
    assert tb.tb_frame.f_code.co_filename == str(SCRIPT)


def test_close_is_safe_to_repeat() -> None:
    """Allow closing an engine more than once."""
    engine = PythonScriptEngine()
    engine.close()
    engine.close()


def test_leading_byte_order_mark_is_ignored() -> None:
    """Accept scripts saved with a UTF-8 BOM, as the interpreter does."""
    assert PythonScriptEngine().evaluate("\ufeff'<root/>'\n", SCRIPT) == "<root/>"
