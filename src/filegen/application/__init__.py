"""Application-layer use-cases and result objects."""

from __future__ import annotations

from typing import TYPE_CHECKING

from filegen.application.ports import OutputWriter, SourceLocator
from filegen.application.results import GenerationResult

if TYPE_CHECKING:
    from filegen.converters import ConverterRegistry
    from filegen.engines.registry import EngineRegistry
    from filegen.schemas import GenerationConfig


def generate_files(
    config: GenerationConfig,
    *,
    engines: EngineRegistry | None = None,
    converters: ConverterRegistry | None = None,
    locator: SourceLocator | None = None,
    writer: OutputWriter | None = None,
) -> GenerationResult:
    """Run a generation pass via lazy use-case import."""
    from filegen.application.use_cases import generate_files as _impl

    return _impl(
        config,
        engines=engines,
        converters=converters,
        locator=locator,
        writer=writer,
    )


__all__ = [
    "GenerationResult",
    "OutputWriter",
    "SourceLocator",
    "generate_files",
]
