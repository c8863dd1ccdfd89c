"""CLI command for the project audit."""

from pathlib import Path
from typing import Optional

import typer

from modulith_audit.cli.utils import (
    console,
    emit_text,
    fail,
    fail_error,
    load_settings,
    resolve_root,
    write_rendered,
)
from modulith_audit.renderers.base import OutputFormat, RenderContext


def audit_cmd(
    root: Path = typer.Option(
        Path("."),
        "--root",
        "-r",
        help="Project root to audit",
    ),
    format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format (terminal, json, markdown)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a modulith-audit YAML config file",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit with status 1 when any check fails",
    ),
    no_trace: bool = typer.Option(
        False,
        "--no-trace",
        help="Do not print per-check progress",
    ),
    details: bool = typer.Option(
        False,
        "--details",
        "-d",
        help="Include passing checks and details in the report",
    ),
) -> None:
    """
    Audit a project tree against the built-in checklist.

    Checks UI variant registration, theme/env/logger/module/manifest/build
    configuration and public assets, then prints a summary with the
    success rate and verdict.

    Example:
        modulith-audit audit --root ./frontend --format json -o audit.json
    """
    run_audit_command(
        root=root,
        format=format,
        output=output,
        config=config,
        strict=strict,
        no_trace=no_trace,
        details=details,
    )


def run_audit_command(
    root: Path = Path("."),
    format: Optional[str] = None,
    output: Optional[Path] = None,
    config: Optional[Path] = None,
    strict: bool = False,
    no_trace: bool = False,
    details: bool = False,
) -> None:
    """Run the audit command with plain Python arguments."""
    from modulith_audit.core.engine import ProjectAuditor
    from modulith_audit.core.trace import AuditTrace, console_emitter, plain_style, rich_style
    from modulith_audit.renderers import get_renderer
    from modulith_audit.utils.errors import CatalogError

    settings = load_settings(config)

    try:
        output_format = OutputFormat(format or settings.output.default_format)
    except ValueError:
        raise fail(f"Invalid format: {format or settings.output.default_format}")

    json_errors = output_format == OutputFormat.JSON and output is None
    project_root = resolve_root(root, as_json=json_errors)

    # Structured output on stdout must stay clean
    show_trace = (
        settings.output.trace
        and not no_trace
        and (output_format == OutputFormat.TERMINAL or output is not None)
    )
    trace = None
    if show_trace:
        color = settings.output.color
        trace = AuditTrace(
            emit=console_emitter(console, markup=color),
            style=rich_style if color else plain_style,
        )

    try:
        auditor = ProjectAuditor(config=settings.catalog, trace=trace)
    except CatalogError as e:
        raise fail_error(e, as_json=json_errors)

    report = auditor.audit(project_root)

    context = RenderContext(
        format=output_format,
        output_path=output,
        verbose=details,
        color=settings.output.color,
    )
    renderer = get_renderer(output_format, console)

    if output_format == OutputFormat.TERMINAL:
        if output:
            write_rendered(renderer, report, context)
            console.print(f"Report written to {output}")
        elif trace is None or details:
            renderer.render(report, context)
    else:
        emit_text(renderer.render(report, context), output)

    if strict and report.failed_checks:
        raise typer.Exit(1)
