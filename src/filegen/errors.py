"""Error taxonomy for file generation runs."""

from __future__ import annotations

from pathlib import Path


class FileGenError(Exception):
    """Base class for all file generation errors."""

    exit_code = 1


class ConfigurationError(FileGenError):
    """Raised when run configuration cannot be resolved.

    Covers invalid settings, unknown scripting backends and converter type
    names that cannot be imported or do not provide ``apply``.
    """

    exit_code = 2


class ExecutionError(FileGenError):
    """Raised when a script cannot be read, compiled or executed."""

    exit_code = 3

    def __init__(self, source_path: Path, cause: BaseException) -> None:
        self.source_path = source_path
        self.cause = cause
        super().__init__(f"An error occurred evaluating the script at {source_path}: {cause}")


class RenderError(FileGenError):
    """Raised when a script result cannot be turned into text."""

    exit_code = 4


class NullResultError(RenderError):
    """Raised when a script produced no value."""

    def __init__(self) -> None:
        super().__init__("Received a null result from the script.")


class UnrenderableResultError(RenderError):
    """Raised when no rendering strategy applies to a result."""

    def __init__(self, actual_type: type) -> None:
        self.actual_type = actual_type
        super().__init__(
            "Expected result of type str or an XML document, or a registered "
            f"converter, got {actual_type.__module__}.{actual_type.__qualname__}"
        )


class ConverterError(RenderError):
    """Raised by (or on behalf of) a registered converter."""


class WriteError(FileGenError):
    """Raised when rendered output cannot be written."""

    exit_code = 5

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Unable to write output file {path}: {cause}")


class GenerationError(FileGenError):
    """Run-level failure wrapping the first error raised for a source file."""

    def __init__(self, source_path: Path, cause: BaseException) -> None:
        self.source_path = source_path
        self.cause = cause
        self.exit_code = getattr(cause, "exit_code", FileGenError.exit_code)
        super().__init__(f"Failed to generate output for {source_path}: {cause}")
