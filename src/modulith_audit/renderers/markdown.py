"""Markdown renderer for modulith-audit output."""

from __future__ import annotations

from modulith_audit.models.audit import AuditReport, CheckStatus
from modulith_audit.models.gate import GateResult, HygieneSeverity, Readiness
from modulith_audit.renderers.base import BaseRenderer, OutputFormat, RenderContext

STATUS_MARKS = {
    CheckStatus.PASS: "✅",
    CheckStatus.FAIL: "❌",
    CheckStatus.WARNING: "⚠️",
}

READINESS_LINES = {
    Readiness.READY: "🟢 READY FOR DEPLOYMENT",
    Readiness.READY_WITH_WARNINGS: "🟡 READY WITH WARNINGS",
    Readiness.BLOCKED: "🔴 BLOCKED",
}


class MarkdownRenderer(BaseRenderer):
    """Renderer for Markdown output format.

    Renders an AuditReport as an audit document and a GateResult as a
    deployment readiness report.

    Example:
        renderer = MarkdownRenderer()
        md_str = renderer.render(report, context)
    """

    @property
    def format(self) -> OutputFormat:
        """The output format this renderer produces."""
        return OutputFormat.MARKDOWN

    def render_report(self, report: AuditReport, context: RenderContext) -> str:
        lines = [
            "# Project Audit Report",
            "",
            f"**Generated:** {report.timestamp.isoformat()}",
            f"**Digest:** `{report.digest}`",
            "",
            "## Summary",
            "",
            f"- Total Checks: **{report.total_checks}**",
            f"- Passed: {report.passed_checks}",
            f"- Failed: {report.failed_checks}",
            f"- Warnings: {report.warning_checks}",
            f"- Success Rate: **{report.success_rate}%**",
            f"- Verdict: **{report.verdict.value}** ({report.verdict.label})",
            "",
        ]

        if report.results:
            lines.extend(
                [
                    "## Checks",
                    "",
                    "| Category | Item | Status | Message |",
                    "|----------|------|--------|---------|",
                ]
            )
            for record in report.results:
                lines.append(
                    f"| {record.category.value} | `{self._escape_md(record.item)}` | "
                    f"{STATUS_MARKS[record.status]} {record.status.value} | "
                    f"{self._escape_md(record.message)} |"
                )
            lines.append("")

        problems = [r for r in report.results if not r.passed]
        if problems and context.verbose:
            lines.extend(["## Details", ""])
            for record in problems:
                lines.append(f"- **{record.category.value} / {record.item}:** {record.details or '-'}")
            lines.append("")

        return "\n".join(lines)

    def render_gate(self, result: GateResult, context: RenderContext) -> str:
        report = result.report
        hygiene = result.hygiene

        def gate_line(name: str, passed: bool, advisory: bool = False) -> str:
            if passed:
                return f"- ✅ {name}: PASSED"
            return f"- ⚠️ {name}: WARNINGS" if advisory else f"- ❌ {name}: FAILED"

        lines = [
            "# Deployment Report",
            "",
            f"**Generated:** {report.timestamp.isoformat()}",
            f"**Audit Digest:** `{report.digest}`",
            "",
            "## Quality Gates Status",
            "",
            gate_line("Project Audit", not report.failed_checks),
            f"- Audit Success Rate: {report.success_rate}% ({report.verdict.value})",
            f"- Audit Warnings: {report.warning_checks} found",
        ]

        if hygiene is not None:
            for rule in hygiene.rules:
                count = hygiene.count(rule.id)
                if rule.severity == HygieneSeverity.ERROR:
                    lines.append(gate_line(f"{rule.description} check", count == 0))
                else:
                    lines.append(f"- {'⚠️' if count else '✅'} {rule.description}: {count} found")

        lines.extend(
            [
                "",
                "## Deployment Readiness",
                "",
                READINESS_LINES[result.readiness],
                "",
            ]
        )

        if result.blockers:
            lines.extend(["### Blockers", ""])
            lines.extend(f"- {b}" for b in result.blockers)
            lines.append("")

        if result.advisories:
            lines.extend(["### Warnings", ""])
            lines.extend(f"- {a}" for a in result.advisories)
            lines.append("")

        if hygiene is not None and hygiene.findings and context.verbose:
            lines.extend(["## Findings", ""])
            for rule in hygiene.rules:
                findings = hygiene.findings_for(rule.id)
                if not findings:
                    continue
                lines.extend([f"### {rule.description}", ""])
                lines.extend(f"- `{f.path}:{f.line}`" for f in findings)
                lines.append("")

        lines.extend(
            [
                "## Next Steps",
                "",
                "1. Review any warnings above",
                "2. Configure production environment variables",
                "3. Deploy to staging environment",
                "4. Run E2E tests in staging",
                "5. Deploy to production",
                "6. Monitor application health",
                "",
            ]
        )

        return "\n".join(lines)

    @staticmethod
    def _escape_md(text: str) -> str:
        """Escape Markdown table delimiters."""
        return text.replace("|", "\\|")
