"""Scripting backend registry and discovery helpers."""

from __future__ import annotations

import importlib
import importlib.util
from collections.abc import Callable, Iterable
from pathlib import Path
from types import ModuleType

from filegen.engines.base import ScriptEngine
from filegen.engines.builtins import PythonScriptEngine
from filegen.errors import ConfigurationError

EngineFactory = Callable[[], ScriptEngine]


class EngineRegistry:
    """Registry of scripting backend factories keyed by name and extension."""

    def __init__(self) -> None:
        self._factories: dict[str, EngineFactory] = {}
        self._extensions: dict[str, str] = {}

    def register(self, factory: EngineFactory) -> None:
        """Register an engine factory.

        Parameters
        ----------
        factory : EngineFactory
            Zero-argument callable (usually the engine class) exposing
            ``name`` and ``extensions`` attributes.

        Raises
        ------
        ConfigurationError
            If the factory does not provide a valid name.
        """
        name = getattr(factory, "name", "").strip()
        if not name:
            raise ConfigurationError("Script engine must define a non-empty 'name'.")
        self._factories[name] = factory
        for extension in getattr(factory, "extensions", ()):
            self._extensions[extension.lower().lstrip(".")] = name

    def names(self) -> list[str]:
        """Return registered engine names, sorted."""
        return sorted(self._factories.keys())

    def extensions(self) -> list[str]:
        """Return registered backend selectors, sorted."""
        return sorted(self._extensions.keys())

    def get(self, name: str) -> EngineFactory:
        """Get engine factory by name.

        Raises
        ------
        ConfigurationError
            If the name is not registered.
        """
        try:
            return self._factories[name]
        except KeyError as exc:
            raise ConfigurationError(
                f"Unknown script engine '{name}'. Available engines: {', '.join(self.names())}"
            ) from exc

    def for_extension(self, extension: str) -> EngineFactory:
        """Resolve an engine factory by backend selector (e.g. ``py``).

        Engine names are accepted as selectors too.

        Raises
        ------
        ConfigurationError
            If no engine is registered for ``extension``.
        """
        selector = extension.lower().lstrip(".")
        if selector in self._extensions:
            return self._factories[self._extensions[selector]]
        if extension in self._factories:
            return self._factories[extension]
        raise ConfigurationError(
            f"No script engine registered for extension '{extension}'. "
            f"Available extensions: {', '.join(self.extensions())}"
        )

    def create(self, extension: str) -> ScriptEngine:
        """Instantiate the engine selected by ``extension``."""
        factory = self.for_extension(extension)
        try:
            engine = factory()
        except Exception as exc:
            raise ConfigurationError(
                f"Unable to start script engine for '{extension}': {exc}"
            ) from exc
        if not isinstance(engine, ScriptEngine):
            raise ConfigurationError(
                f"Script engine for '{extension}' does not implement evaluate/close."
            )
        return engine

    def load_module(self, module_or_path: str) -> None:
        """Load engine providers from module name or file path.

        .. warning::
            This method executes code from the specified module. Only load
            engines from trusted sources.
        """
        module = _import_module_or_path(module_or_path)
        _register_from_module(module, self)


def _import_module_or_path(module_or_path: str) -> ModuleType:
    """Import module by import path or filesystem path.

    Parameters
    ----------
    module_or_path : str
        Python module path or local file path. Must be from a trusted source.

    Returns
    -------
    ModuleType
        Imported module object.

    Raises
    ------
    ConfigurationError
        If import cannot be completed.
    """
    candidate = Path(module_or_path)
    if candidate.exists():
        spec = importlib.util.spec_from_file_location(candidate.stem, candidate)
        if spec is None or spec.loader is None:
            raise ConfigurationError(f"Unable to load engine module from {candidate}.")
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    try:
        return importlib.import_module(module_or_path)
    except Exception as exc:
        raise ConfigurationError(
            f"Unable to import engine module '{module_or_path}': {exc}"
        ) from exc


def _register_from_module(module: ModuleType, registry: EngineRegistry) -> None:
    """Register engine factories found in module."""
    if hasattr(module, "register_engines"):
        module.register_engines(registry)
        return

    engines_obj = getattr(module, "ENGINES", None)
    if engines_obj is not None:
        for factory in engines_obj:
            registry.register(factory)
        return

    engine_obj = getattr(module, "ENGINE", None)
    if engine_obj is not None:
        registry.register(engine_obj)
        return

    raise ConfigurationError(
        "Engine module must expose register_engines(registry), ENGINES, or ENGINE."
    )


def create_default_registry(
    extra_modules: Iterable[str] | None = None,
) -> EngineRegistry:
    """Create the default engine registry.

    Parameters
    ----------
    extra_modules : Iterable[str] | None, optional
        Additional engine modules to load.

    Returns
    -------
    EngineRegistry
        Registry with the built-in Python engine and any external engines.
    """
    registry = EngineRegistry()
    registry.register(PythonScriptEngine)
    for module in extra_modules or []:
        registry.load_module(module)
    return registry
