"""Script execution through a shared scripting backend."""

from __future__ import annotations

import logging
from pathlib import Path

from filegen.engines.base import ScriptEngine
from filegen.errors import ExecutionError
from filegen.types import ScriptResult

logger = logging.getLogger(__name__)


class ScriptRunner:
    """Run scripts located under a source root with one engine instance."""

    def __init__(self, engine: ScriptEngine, source_root: Path, encoding: str = "utf-8") -> None:
        self.engine = engine
        self.source_root = source_root
        self.encoding = encoding

    def run(self, relative_path: str) -> ScriptResult:
        """Evaluate the script at ``relative_path`` and return its raw result.

        Raises
        ------
        ExecutionError
            If the script cannot be read, or the engine fails to compile or
            execute it. A script calling ``sys.exit`` counts as a failure.
        """
        script_path = self.source_root / relative_path
        try:
            source = script_path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise ExecutionError(script_path, exc) from exc

        logger.debug("Evaluating %s with %s engine", script_path, self.engine.name)
        try:
            return self.engine.evaluate(source, script_path)
        except (Exception, SystemExit) as exc:
            raise ExecutionError(script_path, exc) from exc
