"""CLI command for the deployment gate."""

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


def gate_cmd(
    root: Path = typer.Option(
        Path("."),
        "--root",
        "-r",
        help="Project root to gate",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a modulith-audit YAML config file",
    ),
    report: Optional[Path] = typer.Option(
        None,
        "--report",
        help="Write a Markdown deployment report to this path",
    ),
    format: str = typer.Option(
        "terminal",
        "--format",
        "-f",
        help="Output format (terminal, json)",
    ),
    fail_on_warning: bool = typer.Option(
        False,
        "--fail-on-warning",
        help="Treat warnings as blockers",
    ),
    skip_hygiene: bool = typer.Option(
        False,
        "--skip-hygiene",
        help="Do not scan sources for debug statements and markers",
    ),
    details: bool = typer.Option(
        False,
        "--details",
        "-d",
        help="List individual source findings",
    ),
) -> None:
    """
    Decide whether a project is ready to deploy.

    Runs the audit and a source hygiene scan. Failed checks and debug
    statements block; warnings, TODO markers, 'any' types and
    @ts-ignore comments are advisory unless --fail-on-warning is set.
    Exits with status 1 when the gate blocks.

    Example:
        modulith-audit gate --root . --report deployment-report.md
    """
    from modulith_audit.core.engine import ProjectAuditor
    from modulith_audit.core.gate import DeploymentGate
    from modulith_audit.core.hygiene import HygieneScanner
    from modulith_audit.renderers import MarkdownRenderer, get_renderer
    from modulith_audit.utils.errors import CatalogError

    settings = load_settings(config)

    if format not in (OutputFormat.TERMINAL.value, OutputFormat.JSON.value):
        raise fail(f"Invalid format: {format}")

    json_errors = format == OutputFormat.JSON.value
    project_root = resolve_root(root, as_json=json_errors)

    gate_config = settings.gate
    if fail_on_warning:
        gate_config = gate_config.model_copy(update={"fail_on_warning": True})

    try:
        auditor = ProjectAuditor(config=settings.catalog)
    except CatalogError as e:
        raise fail_error(e, as_json=json_errors)

    audit_report = auditor.audit(project_root)

    hygiene = None
    if gate_config.run_hygiene and not skip_hygiene:
        hygiene = HygieneScanner(settings.hygiene).scan(project_root)

    result = DeploymentGate(gate_config).evaluate(audit_report, hygiene)
    context = RenderContext(verbose=details, color=settings.output.color)

    rendered = get_renderer(format, console).render(result, context)
    if format == OutputFormat.JSON.value:
        emit_text(rendered)

    if report:
        write_rendered(
            MarkdownRenderer(),
            result,
            RenderContext(format=OutputFormat.MARKDOWN, output_path=report, verbose=details),
        )
        if format != OutputFormat.JSON.value:
            console.print(f"Deployment report written to {report}")

    if result.halt:
        raise typer.Exit(1)
