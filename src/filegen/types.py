"""Shared type aliases for the generation pipeline."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeAlias

ScriptResult: TypeAlias = object | None
TypeName: TypeAlias = str
ConverterName: TypeAlias = str
ConverterNameMap: TypeAlias = Mapping[TypeName, ConverterName]
