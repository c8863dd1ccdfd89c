"""Incremental human-readable audit trace.

The trace is an observability side channel: it is written while checks
run and has no influence on the returned report. Styling goes through a
plain function of (style tag, text) handed to the trace, so there is no
process-wide formatter state.
"""

from __future__ import annotations

from typing import Callable

from rich.console import Console
from rich.markup import escape

from modulith_audit.models.audit import (
    AuditReport,
    CheckCategory,
    CheckStatus,
    OutcomeRecord,
    VerdictTier,
)

StyleFn = Callable[[str, str], str]
EmitFn = Callable[[str], None]

ITEM_WIDTH = 15

CATEGORY_ICONS = {
    CheckCategory.VARIANTS: "📦",
    CheckCategory.THEME: "🎨",
    CheckCategory.ENVIRONMENT: "⚙️",
    CheckCategory.LOGGER: "📝",
    CheckCategory.DOMAIN_MODULE: "📡",
    CheckCategory.MANIFEST: "📦",
    CheckCategory.BUILD_CONFIG: "⚙️",
    CheckCategory.PUBLIC_ASSETS: "🖼",
}

STATUS_STYLES = {
    CheckStatus.PASS: "green",
    CheckStatus.FAIL: "red",
    CheckStatus.WARNING: "yellow",
}

STATUS_GLYPHS = {
    CheckStatus.PASS: "✔",
    CheckStatus.FAIL: "✘",
    CheckStatus.WARNING: "⚠",
}

VERDICT_STYLES = {
    VerdictTier.EXCELLENT: "green",
    VerdictTier.NEEDS_ATTENTION: "yellow",
    VerdictTier.CRITICAL: "red",
}

VERDICT_GLYPHS = {
    VerdictTier.EXCELLENT: "✅",
    VerdictTier.NEEDS_ATTENTION: "⚠️",
    VerdictTier.CRITICAL: "❌",
}


def rich_style(tag: str, text: str) -> str:
    """Wrap text in rich markup for the given style tag."""
    return f"[{tag}]{escape(text)}[/{tag}]"


def plain_style(tag: str, text: str) -> str:
    """Ignore the style tag and return the text unchanged."""
    return text


def console_emitter(console: Console | None = None, markup: bool = True) -> EmitFn:
    """Build an emit function printing lines on a rich console."""
    target = console or Console()

    def emit(line: str) -> None:
        target.print(line, markup=markup, highlight=False)

    return emit


class AuditTrace:
    """Writes the per-check trace and the closing summary block.

    Example:
        lines = []
        trace = AuditTrace(emit=lines.append, style=plain_style)
        run_audit(".", trace=trace)
    """

    def __init__(self, emit: EmitFn | None = None, style: StyleFn = rich_style) -> None:
        self._style = style
        self._emit = emit or console_emitter(markup=style is not plain_style)

    def start(self, title: str = "Running ModulithCertivox UI Audit...") -> None:
        self._emit(self._style("blue", f"\n🔍 {title}\n"))

    def category(self, category: CheckCategory) -> None:
        icon = CATEGORY_ICONS.get(category, "•")
        self._emit(self._style("yellow", f"\n{icon} {category.value}:"))

    def outcome(self, record: OutcomeRecord) -> None:
        glyph = STATUS_GLYPHS[record.status]
        status_text = self._style(STATUS_STYLES[record.status], f"{glyph} {record.message}")
        self._emit(f"{self._style('default', record.item.ljust(ITEM_WIDTH))} {status_text}")

    def summary(self, report: AuditReport) -> None:
        style = self._style
        self._emit(style("blue", "\n📊 Audit Summary:"))
        self._emit(f"Total Checks: {report.total_checks}")
        self._emit(
            f"{style('green', f'Passed: {report.passed_checks}')} | "
            f"{style('red', f'Failed: {report.failed_checks}')} | "
            f"{style('yellow', f'Warnings: {report.warning_checks}')}"
        )
        self._emit(f"Success Rate: {report.success_rate}%")
        self._emit(f"Digest: {report.digest}")

        verdict = report.verdict
        self._emit(
            style(VERDICT_STYLES[verdict], f"\n{VERDICT_GLYPHS[verdict]} {verdict.label}")
        )
