"""Unit tests for the audit trace."""

from io import StringIO

from rich.console import Console

from modulith_audit.core.report import aggregate
from modulith_audit.core.trace import AuditTrace, console_emitter, plain_style, rich_style
from modulith_audit.models.audit import CheckCategory, CheckStatus, OutcomeRecord


def _record(status: CheckStatus, item: str = "classic", message: str = "Registered"):
    return OutcomeRecord(
        category=CheckCategory.VARIANTS,
        item=item,
        status=status,
        message=message,
    )


class TestStyleFunctions:
    """Tests for the style functions."""

    def test_plain_style(self):
        assert plain_style("red", "text") == "text"

    def test_rich_style_wraps_and_escapes(self):
        """Test markup wrapping with escaped content."""
        assert rich_style("green", "ok") == "[green]ok[/green]"
        assert rich_style("red", "[x]") == "[red]\\[x][/red]"


class TestAuditTrace:
    """Tests for AuditTrace."""

    def test_outcome_line(self):
        """Test item padding and status glyph."""
        lines: list[str] = []
        AuditTrace(emit=lines.append, style=plain_style).outcome(_record(CheckStatus.PASS))

        assert lines == ["classic         ✔ Registered"]

    def test_failure_glyph(self):
        lines: list[str] = []
        trace = AuditTrace(emit=lines.append, style=plain_style)
        trace.outcome(_record(CheckStatus.FAIL, message="Missing or Unregistered"))
        trace.outcome(_record(CheckStatus.WARNING, item="logo.svg", message="Missing"))

        assert lines[0].endswith("✘ Missing or Unregistered")
        assert lines[1].endswith("⚠ Missing")

    def test_category_header(self):
        lines: list[str] = []
        AuditTrace(emit=lines.append, style=plain_style).category(CheckCategory.PUBLIC_ASSETS)

        assert lines == ["\n🖼 Public Assets:"]

    def test_summary_block(self, fixed_clock):
        """Test the summary lists counts, rate and verdict."""
        report = aggregate(
            [_record(CheckStatus.PASS), _record(CheckStatus.FAIL, item="neuro")],
            clock=fixed_clock,
        )
        lines: list[str] = []
        AuditTrace(emit=lines.append, style=plain_style).summary(report)
        text = "\n".join(lines)

        assert "Total Checks: 2" in text
        assert "Passed: 1 | Failed: 1 | Warnings: 0" in text
        assert "Success Rate: 50%" in text
        assert "Critical issues found" in text
        assert report.digest in text

    def test_style_is_injected(self):
        """Test the trace uses the given style function."""
        calls: list[tuple[str, str]] = []

        def recording_style(tag: str, text: str) -> str:
            calls.append((tag, text))
            return text

        AuditTrace(emit=lambda line: None, style=recording_style).outcome(
            _record(CheckStatus.FAIL)
        )
        assert ("red", "✘ Registered") in calls

    def test_console_emitter(self):
        """Test printing through a rich console."""
        buffer = StringIO()
        console = Console(file=buffer, force_terminal=False, width=120)
        trace = AuditTrace(emit=console_emitter(console), style=rich_style)
        trace.outcome(_record(CheckStatus.PASS))

        assert "classic" in buffer.getvalue()
        assert "✔ Registered" in buffer.getvalue()
        assert "[green]" not in buffer.getvalue()
