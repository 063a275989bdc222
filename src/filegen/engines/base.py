"""Protocol for scripting backends."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class ScriptEngine(Protocol):
    """Protocol implemented by scripting backends.

    One engine instance serves every script of a run and is closed once the
    run finishes, whether it succeeded or not.
    """

    name: str
    extensions: tuple[str, ...]

    def evaluate(self, source: str, script_path: Path) -> object:
        """Execute a script and return the value it produced.

        Parameters
        ----------
        source : str
            Script source text.
        script_path : Path
            Location of the script, used for diagnostics.

        Returns
        -------
        object
            Value produced by the script, or ``None`` when it produced none.
        """

    def close(self) -> None:
        """Release resources held by the engine."""
