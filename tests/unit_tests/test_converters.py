"""Unit tests for converter registry construction and lookup."""

from __future__ import annotations

import abc
import importlib
from collections import OrderedDict

import pytest

from filegen.converters import Converter, ConverterRegistry, resolve_name
from filegen.errors import ConfigurationError


class Base:
    pass


class Child(Base):
    pass


class GrandChild(Child):
    pass


class Marker(abc.ABC):
    pass


class Registered:
    pass


Marker.register(Registered)


class _Named:
    def __init__(self, name: str) -> None:
        self.name = name

    def apply(self, value: object) -> str:
        return self.name


def test_exact_type_wins_over_ancestors() -> None:
    """Prefer the entry registered for the exact runtime type."""
    registry = ConverterRegistry({Base: _Named("base"), Child: _Named("child")})
    assert registry.resolve(Child()).apply(None) == "child"


def test_nearest_ancestor_wins_regardless_of_registration_order() -> None:
    """Pick the most specific registered class along the MRO."""
    forward = ConverterRegistry({Base: _Named("base"), Child: _Named("child")})
    backward = ConverterRegistry({Child: _Named("child"), Base: _Named("base")})
    assert forward.resolve(GrandChild()).apply(None) == "child"
    assert backward.resolve(GrandChild()).apply(None) == "child"


def test_virtual_subclasses_match_abstract_keys() -> None:
    """Fall back to isinstance checks for ABC-registered classes."""
    registry = ConverterRegistry({Marker: _Named("marker")})
    assert registry.resolve(Registered()).apply(None) == "marker"


def test_virtual_fallback_uses_registration_order() -> None:
    """Resolve multiple virtual matches in registration order."""

    class Other(abc.ABC):
        pass

    Other.register(Registered)
    registry = ConverterRegistry(OrderedDict([(Other, _Named("other")), (Marker, _Named("marker"))]))
    assert registry.resolve(Registered()).apply(None) == "other"


def test_resolve_returns_none_without_match() -> None:
    """Return None when no key accepts the value."""
    assert ConverterRegistry({Child: _Named("child")}).resolve(Base()) is None


def test_object_key_matches_everything() -> None:
    """Treat object as the most general registrable type."""
    registry = ConverterRegistry({object: _Named("any")})
    assert registry.resolve(3.5).apply(None) == "any"


def test_registry_is_read_only() -> None:
    """Expose entries through a read-only mapping."""
    registry = ConverterRegistry({Base: _Named("base")})
    with pytest.raises(TypeError):
        registry.entries[Child] = _Named("child")  # type: ignore[index]
    assert Base in registry
    assert list(registry) == [Base]
    assert len(registry) == 1


def test_registry_copies_its_input() -> None:
    """Ignore later changes to the mapping used for construction."""
    source: dict[type, Converter] = {Base: _Named("base")}
    registry = ConverterRegistry(source)
    source[Child] = _Named("child")
    assert Child not in registry


def test_rejects_non_type_keys() -> None:
    """Require classes as registry keys."""
    with pytest.raises(ConfigurationError, match="is not a type"):
        ConverterRegistry({"Base": _Named("base")})  # type: ignore[dict-item]


@pytest.mark.parametrize("converter", [object(), _Named])
def test_rejects_values_without_apply(converter: object) -> None:
    """Require converter instances that provide apply."""
    with pytest.raises(ConfigurationError, match="does not provide apply"):
        ConverterRegistry({Base: converter})  # type: ignore[dict-item]


def test_from_names_builds_instances(widget_module: str) -> None:
    """Import types and converters by name and instantiate converters eagerly."""
    registry = ConverterRegistry.from_names(
        {
            f"{widget_module}:Widget": f"{widget_module}:WidgetConverter",
            f"{widget_module}.SpecialWidget": f"{widget_module}.SpecialWidgetConverter",
        }
    )
    module = importlib.import_module(widget_module)
    assert registry.resolve(module.Widget()).apply(None) == "WIDGET"
    assert registry.resolve(module.SpecialWidget()).apply(None) == "SPECIAL"


def test_from_names_logs_each_converter(
    widget_module: str, caplog: pytest.LogCaptureFixture
) -> None:
    """Log every converter found in the configuration."""
    caplog.set_level("INFO", logger="filegen.converters")
    ConverterRegistry.from_names({f"{widget_module}:Widget": f"{widget_module}:WidgetConverter"})
    assert "Found converter" in caplog.text


@pytest.mark.parametrize(
    ("type_attr", "converter_attr", "message"),
    [
        ("Missing", "WidgetConverter", "has no attribute"),
        ("Widget", "Missing", "has no attribute"),
        ("Widget", "BrokenConverter", "Unable to instantiate"),
        ("Widget", "NotAConverter", "does not provide apply"),
    ],
)
def test_from_names_fails_fast(
    widget_module: str, type_attr: str, converter_attr: str, message: str
) -> None:
    """Surface every misconfiguration as ConfigurationError."""
    with pytest.raises(ConfigurationError, match=message):
        ConverterRegistry.from_names(
            {f"{widget_module}:{type_attr}": f"{widget_module}:{converter_attr}"}
        )


def test_from_names_requires_a_class_key(widget_module: str) -> None:
    """Reject type names that resolve to non-class objects."""
    with pytest.raises(ConfigurationError, match="does not name a class"):
        ConverterRegistry.from_names({"os:sep": f"{widget_module}:WidgetConverter"})


def test_resolve_name_variants() -> None:
    """Accept both colon and dotted notations, including nested attributes."""
    assert resolve_name("collections:OrderedDict") is OrderedDict
    assert resolve_name("collections.OrderedDict") is OrderedDict
    assert resolve_name("collections:OrderedDict.fromkeys") == OrderedDict.fromkeys


@pytest.mark.parametrize("name", ["OrderedDict", ":OrderedDict", "collections:"])
def test_resolve_name_requires_qualified_names(name: str) -> None:
    """Reject names without both module and attribute parts."""
    with pytest.raises(ConfigurationError, match="not a qualified name"):
        resolve_name(name)


def test_resolve_name_unknown_module() -> None:
    """Wrap import failures as ConfigurationError."""
    with pytest.raises(ConfigurationError, match="Unable to import module"):
        resolve_name("module.that.does.not:Exist")
