"""Built-in scripting backends."""

from __future__ import annotations

import ast
import builtins
from pathlib import Path


class PythonScriptEngine:
    """Evaluate Python scripts whose last expression is the result.

    A script such as::

        from xml.etree.ElementTree import Element
        root = Element("root")
        root

    produces the ``root`` element. Scripts that end with a statement other
    than an expression produce ``None``. Every script gets a fresh global
    namespace; the engine itself is shared across the run.
    """

    name = "python"
    extensions = ("py", "python")

    def __init__(self) -> None:
        self.evaluated = 0

    def evaluate(self, source: str, script_path: Path) -> object:
        """Execute ``source`` and return the value of its trailing expression.

        Parameters
        ----------
        source : str
            Python source text.
        script_path : Path
            Script location, used as the code object's file name.

        Returns
        -------
        object
            Value of the final expression statement, or ``None``.
        """
        filename = str(script_path)
        module = ast.parse(source.removeprefix("\ufeff"), filename=filename)
        trailing: ast.Expression | None = None
        if module.body and isinstance(module.body[-1], ast.Expr):
            last = module.body.pop()
            trailing = ast.Expression(body=last.value)

        namespace: dict[str, object] = {
            "__name__": "__filegen_script__",
            "__file__": filename,
            "__builtins__": builtins,
        }
        exec(compile(module, filename, "exec"), namespace)
        result = None
        if trailing is not None:
            result = eval(compile(trailing, filename, "eval"), namespace)
        self.evaluated += 1
        return result

    def close(self) -> None:
        """Nothing to release; scripts share no engine-level state."""
