"""Application use-cases orchestrating generation runs."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from enum import Enum
from pathlib import Path

from filegen.application.ports import OutputWriter, SourceLocator
from filegen.application.results import GenerationResult
from filegen.converters import ConverterRegistry
from filegen.engines.registry import EngineRegistry, create_default_registry
from filegen.errors import GenerationError
from filegen.infrastructure.filesystem import FileSystemOutputWriter, FileSystemSourceLocator
from filegen.rendering import render_result
from filegen.runner import ScriptRunner
from filegen.schemas import GenerationConfig
from filegen.writer import RenderedOutput, destination_path

logger = logging.getLogger(__name__)


class PipelineState(str, Enum):
    """Lifecycle of a generation run."""

    IDLE = "idle"
    SCANNING = "scanning"
    RUNNING = "running"
    DONE = "done"
    FAILED = "failed"


@contextmanager
def script_search_paths(paths: Sequence[Path]) -> Iterator[None]:
    """Make ``paths`` importable for the duration of a run."""
    added: list[str] = []
    for entry in reversed([str(path) for path in paths]):
        if entry not in sys.path:
            sys.path.insert(0, entry)
            added.append(entry)
    try:
        yield
    finally:
        for entry in added:
            if entry in sys.path:
                sys.path.remove(entry)


class FileGenerator:
    """Run every script under the source root and write its rendered result.

    Files are processed one at a time in scan order with a single engine
    instance. The first failure stops the run and is raised as
    ``GenerationError``; outputs already written stay on disk.
    """

    def __init__(
        self,
        config: GenerationConfig,
        *,
        engines: EngineRegistry | None = None,
        converters: ConverterRegistry | None = None,
        locator: SourceLocator | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self.config = config
        self.engines = engines
        self.converters = converters
        self.locator = locator or FileSystemSourceLocator()
        self.writer = writer or FileSystemOutputWriter()
        self.state = PipelineState.IDLE
        self.current_index: int | None = None

    def _transition(self, state: PipelineState) -> None:
        logger.debug("Generation state %s -> %s", self.state.value, state.value)
        self.state = state

    def run(self) -> GenerationResult:
        """Execute one generation run.

        Returns
        -------
        GenerationResult
            Processed sources and written outputs, in processing order.

        Raises
        ------
        ConfigurationError
            If converters, the engine or the source root cannot be resolved.
            Raised before any script runs.
        GenerationError
            If any file fails to run, render or write.
        """
        self.current_index = None
        self._transition(PipelineState.SCANNING)
        try:
            with script_search_paths(self.config.script_paths):
                result = self._run()
        except BaseException:
            self._transition(PipelineState.FAILED)
            raise
        self._transition(PipelineState.DONE)
        return result

    def _run(self) -> GenerationResult:
        config = self.config
        converters = self.converters
        if converters is None:
            converters = ConverterRegistry.from_names(config.converters)
        engines = self.engines or create_default_registry(config.engine_modules)
        engine = engines.create(config.engine)
        try:
            sources = self.locator.scan(config.source_root, config.include_pattern, config.excludes)
            runner = ScriptRunner(engine, config.source_root, config.encoding)
            outputs: list[Path] = []
            for index, relative_path in enumerate(sources):
                self.current_index = index
                self._transition(PipelineState.RUNNING)
                logger.info("Found file to convert at %s", relative_path)
                try:
                    outputs.append(self._process(runner, converters, relative_path))
                except Exception as exc:
                    raise GenerationError(config.source_root / relative_path, exc) from exc
        finally:
            engine.close()

        return GenerationResult(
            source_root=config.source_root,
            output_root=config.output_root,
            engine=engine.name,
            sources=tuple(sources),
            outputs=tuple(outputs),
        )

    def _process(
        self,
        runner: ScriptRunner,
        converters: ConverterRegistry,
        relative_path: str,
    ) -> Path:
        config = self.config
        value = runner.run(relative_path)
        text = render_result(value, converters)
        target = destination_path(relative_path, config.source_suffix, config.destination_suffix)
        return self.writer.write(
            RenderedOutput(text=text, destination=config.output_root / target),
            config.encoding,
        )


def generate_files(
    config: GenerationConfig,
    *,
    engines: EngineRegistry | None = None,
    converters: ConverterRegistry | None = None,
    locator: SourceLocator | None = None,
    writer: OutputWriter | None = None,
) -> GenerationResult:
    """Use-case: generate one output file per script under the source root."""
    return FileGenerator(
        config,
        engines=engines,
        converters=converters,
        locator=locator,
        writer=writer,
    ).run()
