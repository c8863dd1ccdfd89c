"""Terminal renderer for modulith-audit output."""

from __future__ import annotations

import io
from contextlib import contextmanager
from typing import Iterator

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from modulith_audit.core.trace import STATUS_STYLES, VERDICT_STYLES
from modulith_audit.models.audit import AuditReport
from modulith_audit.models.gate import GateResult, Readiness
from modulith_audit.renderers.base import BaseRenderer, OutputFormat, Renderable, RenderContext

READINESS_STYLES = {
    Readiness.READY: "bold green",
    Readiness.READY_WITH_WARNINGS: "bold yellow",
    Readiness.BLOCKED: "bold red",
}


class TerminalRenderer(BaseRenderer):
    """Renderer for rich terminal output.

    Output is printed on the console and render returns an empty string.

    Example:
        renderer = TerminalRenderer()
        renderer.render(report, RenderContext())
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the terminal renderer.

        Args:
            console: Rich console to use. Creates a new one if None.
        """
        self._console = console or Console()

    @property
    def format(self) -> OutputFormat:
        """The output format this renderer produces."""
        return OutputFormat.TERMINAL

    def render(self, data: Renderable, context: RenderContext) -> str:
        """Print a report or gate result, without styling when context.color is off."""
        if context.color:
            return super().render(data, context)

        console = self._console
        with self._using(Console(file=console.file, color_system=None, width=console.width)):
            return super().render(data, context)

    def render_to_file(self, data: Renderable, context: RenderContext) -> None:
        """Render data to a file as plain text without styling."""
        path = self._require_output_path(context)

        buffer = io.StringIO()
        with self._using(Console(file=buffer, force_terminal=False, width=100)):
            super().render(data, context)

        path.write_text(buffer.getvalue(), encoding="utf-8")

    @contextmanager
    def _using(self, console: Console) -> Iterator[None]:
        original = self._console
        self._console = console
        try:
            yield
        finally:
            self._console = original

    def render_report(self, report: AuditReport, context: RenderContext) -> str:
        """Print the report panel, summary and issue table; returns an empty string."""
        verdict_style = VERDICT_STYLES[report.verdict]

        self._console.print()
        self._console.print(
            Panel(
                f"[bold]Generated:[/bold] {report.timestamp.isoformat()}\n"
                f"[bold]Digest:[/bold] {report.digest}\n"
                f"[bold]Verdict:[/bold] [{verdict_style}]{report.verdict.label}[/{verdict_style}]",
                title="Audit Report",
            )
        )

        self._console.print()
        table = Table(title="Summary", show_header=False)
        table.add_column("Metric", style="bold")
        table.add_column("Count")
        table.add_row("Total Checks", str(report.total_checks))
        table.add_row("Passed", f"[green]{report.passed_checks}[/green]")
        table.add_row("Failed", f"[red]{report.failed_checks}[/red]")
        table.add_row("Warnings", f"[yellow]{report.warning_checks}[/yellow]")
        table.add_row("Success Rate", f"[{verdict_style}]{report.success_rate}%[/{verdict_style}]")
        self._console.print(table)

        shown = [
            r for r in report.results if context.verbose or not r.passed
        ]
        if not shown:
            return ""

        self._console.print()
        table = Table(title="Checks" if context.verbose else "Issues")
        table.add_column("Category", style="dim")
        table.add_column("Item", style="bold")
        table.add_column("Status")
        table.add_column("Details", max_width=50)

        for record in shown:
            style = STATUS_STYLES[record.status]
            table.add_row(
                record.category.value,
                escape(record.item),
                f"[{style}]{record.status.value.upper()}[/{style}]",
                escape(record.details or record.message),
            )
        self._console.print(table)
        return ""

    def render_gate(self, result: GateResult, context: RenderContext) -> str:
        style = READINESS_STYLES[result.readiness]
        report = result.report

        self._console.print()
        self._console.print(
            Panel(
                f"[bold]Audit:[/bold] {report.passed_checks}/{report.total_checks} passed "
                f"({report.success_rate}%, {report.verdict.value})\n"
                f"[bold]Readiness:[/bold] [{style}]{result.readiness.value.upper()}[/{style}]",
                title="Deployment Gate",
            )
        )

        for blocker in result.blockers:
            self._console.print(f"  [red]✘[/red] {escape(blocker)}")
        for advisory in result.advisories:
            self._console.print(f"  [yellow]⚠[/yellow] {escape(advisory)}")

        if result.hygiene is not None and result.hygiene.findings and context.verbose:
            self._console.print()
            table = Table(title="Source Findings")
            table.add_column("Rule", style="bold")
            table.add_column("Location")
            table.add_column("Line", max_width=60)
            for finding in result.hygiene.findings:
                table.add_row(
                    finding.rule_id,
                    f"{finding.path}:{finding.line}",
                    escape(finding.text),
                )
            self._console.print(table)
        return ""
