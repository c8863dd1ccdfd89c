"""Shared utilities for CLI commands."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from modulith_audit.renderers.base import BaseRenderer, Renderable, RenderContext
from modulith_audit.utils.config import ModulithAuditConfig, load_config
from modulith_audit.utils.errors import ModulithAuditError, validate_project_root

# Exit code for configuration, catalog and root errors
USAGE_ERROR = 2

# Shared console instance
console = Console()
err_console = Console(stderr=True)


def fail(message: str, code: int = USAGE_ERROR) -> typer.Exit:
    """Print an error message and build the Exit to raise."""
    err_console.print(f"[red]Error:[/red] {message}")
    return typer.Exit(code)


def fail_error(error: ModulithAuditError, as_json: bool = False) -> typer.Exit:
    """Report a ModulithAuditError and build the Exit to raise.

    With as_json the error is also written to stdout as an AuditError
    JSON document.
    """
    if as_json:
        typer.echo(error.to_audit_error().model_dump_json(indent=2))
    return fail(error.message)


def load_settings(config_path: Path | None) -> ModulithAuditConfig:
    """Load the tool configuration, exiting on errors.

    Args:
        config_path: Explicit config file, or None to search default locations
    """
    try:
        return load_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        raise fail(str(e)) from e


def resolve_root(root: Path, as_json: bool = False) -> Path:
    """Validate the project root, exiting if it is not a directory."""
    try:
        return validate_project_root(root)
    except ModulithAuditError as e:
        raise fail_error(e, as_json=as_json) from e


def emit_text(text: str, output: Path | None = None) -> None:
    """Write rendered output to a file or stdout.

    Args:
        text: Rendered content
        output: Optional output file path; missing parent directories are created
    """
    if not output:
        typer.echo(text)
        return

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
    except OSError as e:
        raise fail(f"Cannot write {output}: {e}") from e
    err_console.print(f"Report written to {output}")


def write_rendered(renderer: BaseRenderer, data: Renderable, context: RenderContext) -> None:
    """Render to context.output_path, exiting on filesystem errors."""
    try:
        renderer.render_to_file(data, context)
    except OSError as e:
        raise fail(f"Cannot write {context.output_path}: {e}") from e
