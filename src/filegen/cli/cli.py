#!/usr/bin/env python3
"""
filegen.cli.cli

Typer-based CLI for generating files from scripts.

Examples
--------
Generate ``build/`` from every ``*.xml.py`` script under ``src/``:

    generate-files run src build

Register a converter for a custom result type:

    generate-files run src build --converter app.model:Widget=app.render:WidgetConverter

Read settings from the ``[tool.filegen]`` table of a pyproject file:

    generate-files run --config pyproject.toml
"""

from __future__ import annotations

import logging
import traceback
from pathlib import Path

import typer

from filegen.errors import FileGenError

app = typer.Typer(
    name="generate-files",
    help="Generate files by running scripts and writing their results.",
    no_args_is_help=True,
)


def _print_generation_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly generation error.

    Parameters
    ----------
    exc : Exception
        Exception raised during generation.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _parse_converters(converter_items: list[str] | None) -> dict[str, str]:
    """Parse repeated TYPE=CONVERTER entries."""
    parsed: dict[str, str] = {}
    for item in converter_items or []:
        if "=" not in item:
            raise typer.BadParameter(
                f"Invalid converter entry '{item}'. Use TYPE=CONVERTER format."
            )
        type_name, converter_name = item.split("=", 1)
        type_name = type_name.strip()
        converter_name = converter_name.strip()
        if not type_name or not converter_name:
            raise typer.BadParameter("Converter type and class names cannot be empty.")
        parsed[type_name] = converter_name
    return parsed


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each processed file."),
) -> None:
    """Initialize shared CLI state."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("run")
def run_cmd(
    ctx: typer.Context,
    source_root: Path | None = typer.Argument(
        None, help="Directory scanned for scripts (required without --config)."
    ),
    output_root: Path | None = typer.Argument(
        None, help="Directory receiving generated files (required without --config)."
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        exists=True,
        dir_okay=False,
        readable=True,
        help="pyproject.toml whose [tool.filegen] table provides settings.",
    ),
    source_suffix: str | None = typer.Option(
        None, "--source-suffix", help="Script file suffix (default: .xml.py)."
    ),
    destination_suffix: str | None = typer.Option(
        None, "--destination-suffix", help="Generated file suffix (default: .xml)."
    ),
    engine: str | None = typer.Option(
        None, "--engine", help="Scripting backend selector (default: py)."
    ),
    converter: list[str] | None = typer.Option(
        None, "--converter", help="Result converter TYPE=CONVERTER (repeatable)."
    ),
    encoding: str | None = typer.Option(
        None, "--encoding", help="Text encoding for scripts and outputs (default: utf-8)."
    ),
    exclude: list[str] | None = typer.Option(
        None, "--exclude", help="Glob of relative script paths to skip (repeatable)."
    ),
    script_path: list[Path] | None = typer.Option(
        None, "--script-path", help="Directory importable by scripts (repeatable)."
    ),
    engine_module: list[str] | None = typer.Option(
        None, "--engine-module", help="Module or file providing extra engines (repeatable)."
    ),
) -> None:
    """Run every script under SOURCE_ROOT and write outputs under OUTPUT_ROOT."""
    debug: bool = bool(ctx.obj.get("debug", False))

    if config is None and (source_root is None or output_root is None):
        raise typer.BadParameter("SOURCE_ROOT and OUTPUT_ROOT are required without --config.")

    converter_payload = _parse_converters(converter)
    settings: dict[str, object] = {
        "source_root": source_root,
        "output_root": output_root,
        "source_suffix": source_suffix,
        "destination_suffix": destination_suffix,
        "engine": engine,
        "encoding": encoding,
    }
    if converter_payload:
        settings["converters"] = converter_payload
    if exclude:
        settings["excludes"] = exclude
    if script_path:
        settings["script_paths"] = script_path
    if engine_module:
        settings["engine_modules"] = engine_module

    try:
        from filegen import api

        if config is not None:
            outputs = api.generate_files_from_pyproject(config, **settings)
        else:
            outputs = api.generate_files(
                **{key: value for key, value in settings.items() if value is not None}
            )
        for output in outputs:
            typer.echo(f"✓ Wrote: {output}")
        typer.echo(f"Generated {len(outputs)} file(s).")
    except FileGenError as exc:
        raise typer.Exit(code=_print_generation_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_generation_error(exc, debug))


@app.command("engines")
def engines_cmd(
    engine_module: list[str] | None = typer.Option(
        None, "--engine-module", help="Module or file providing extra engines (repeatable)."
    ),
) -> None:
    """List available scripting backends and their selectors."""
    from filegen.engines.registry import create_default_registry

    try:
        registry = create_default_registry(extra_modules=engine_module)
    except FileGenError as exc:
        raise typer.Exit(code=_print_generation_error(exc, False))

    for name in registry.names():
        extensions = getattr(registry.get(name), "extensions", ())
        typer.echo(f"{name}: {', '.join(extensions)}")


if __name__ == "__main__":
    app()
