"""Converter protocol and the run-scoped type-to-converter registry."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Protocol, runtime_checkable

from filegen.errors import ConfigurationError
from filegen.types import ConverterNameMap

logger = logging.getLogger(__name__)


@runtime_checkable
class Converter(Protocol):
    """Turn one value of a registered type into text."""

    def apply(self, value: object) -> str:
        """Return the textual rendering of ``value``."""


class ConverterRegistry:
    """Immutable mapping of value types to converter instances.

    Lookup order for a value of type ``T``:

    1. an entry registered for exactly ``T``;
    2. the entry for the nearest class in ``T.__mro__``;
    3. the first entry, in registration order, whose key accepts the value
       through ``isinstance`` (abstract base classes and virtual subclasses).
    """

    def __init__(self, entries: Mapping[type, Converter] | None = None) -> None:
        checked: dict[type, Converter] = {}
        for value_type, converter in (entries or {}).items():
            if not isinstance(value_type, type):
                raise ConfigurationError(f"Converter key {value_type!r} is not a type.")
            if isinstance(converter, type) or not isinstance(converter, Converter):
                raise ConfigurationError(
                    f"Converter registered for {_qualified_name(value_type)} "
                    "does not provide apply(value)."
                )
            checked[value_type] = converter
        self._entries = MappingProxyType(checked)

    @classmethod
    def from_names(cls, names: ConverterNameMap) -> ConverterRegistry:
        """Build a registry from ``type name -> converter class name`` pairs.

        Names use ``package.module:Attribute`` or ``package.module.Attribute``.
        Converter classes are instantiated with no arguments here, so any
        misconfiguration surfaces before a script runs.

        Raises
        ------
        ConfigurationError
            If a name cannot be imported, the converter cannot be constructed,
            or it does not provide ``apply``.
        """
        entries: dict[type, Converter] = {}
        for type_name, converter_name in names.items():
            value_type = resolve_name(type_name)
            if not isinstance(value_type, type):
                raise ConfigurationError(f"'{type_name}' does not name a class.")
            converter_type = resolve_name(converter_name)
            if not callable(converter_type):
                raise ConfigurationError(f"'{converter_name}' does not name a converter class.")
            try:
                converter = converter_type()
            except Exception as exc:
                raise ConfigurationError(
                    f"Unable to instantiate converter '{converter_name}': {exc}"
                ) from exc
            logger.info("Found converter: %s=%s", type_name, converter_name)
            entries[value_type] = converter
        return cls(entries)

    @property
    def entries(self) -> Mapping[type, Converter]:
        """Read-only view of the registered entries."""
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[type]:
        return iter(self._entries)

    def __contains__(self, value_type: object) -> bool:
        return value_type in self._entries

    def resolve(self, value: object) -> Converter | None:
        """Return the converter serving the runtime type of ``value``, if any."""
        value_type = type(value)
        converter = self._entries.get(value_type)
        if converter is not None:
            return converter
        for ancestor in value_type.__mro__[1:]:
            converter = self._entries.get(ancestor)
            if converter is not None:
                return converter
        for registered, converter in self._entries.items():
            if isinstance(value, registered):
                return converter
        return None


def resolve_name(name: str) -> object:
    """Import the object designated by a dotted or ``module:attr`` name.

    Raises
    ------
    ConfigurationError
        If the module cannot be imported or the attribute does not exist.
    """
    if ":" in name:
        module_name, _, attribute_path = name.partition(":")
    else:
        module_name, _, attribute_path = name.rpartition(".")
    if not module_name or not attribute_path:
        raise ConfigurationError(
            f"'{name}' is not a qualified name; use package.module:Attribute."
        )

    try:
        target: object = importlib.import_module(module_name)
    except Exception as exc:
        raise ConfigurationError(f"Unable to import module '{module_name}': {exc}") from exc

    for attribute in attribute_path.split("."):
        try:
            target = getattr(target, attribute)
        except AttributeError as exc:
            raise ConfigurationError(
                f"Module '{module_name}' has no attribute '{attribute_path}'."
            ) from exc
    return target


def _qualified_name(value_type: type) -> str:
    return f"{value_type.__module__}.{value_type.__qualname__}"
