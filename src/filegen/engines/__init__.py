"""Scripting backends and their registry."""

from .base import ScriptEngine
from .registry import EngineRegistry, create_default_registry

__all__ = ["ScriptEngine", "EngineRegistry", "create_default_registry"]
