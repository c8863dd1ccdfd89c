"""Unit tests for output renderers."""

import io
import json

import pytest
from rich.console import Console

from modulith_audit.core.engine import ProjectAuditor
from modulith_audit.core.gate import DeploymentGate
from modulith_audit.core.hygiene import HygieneScanner
from modulith_audit.renderers import (
    JSONRenderer,
    MarkdownRenderer,
    OutputFormat,
    RenderContext,
    TerminalRenderer,
    get_renderer,
)


@pytest.fixture
def passing_report(memory_project, fixed_clock):
    return ProjectAuditor(clock=fixed_clock).audit(memory_project)


@pytest.fixture
def failing_report(project_files, fixed_clock):
    from modulith_audit.core.project import MemoryProjectView

    files = dict(project_files)
    del files["src/components/variants/NeuroUI.tsx"]
    del files["public/favicon.ico"]
    return ProjectAuditor(clock=fixed_clock).audit(MemoryProjectView(files))


class TestJSONRenderer:
    """Tests for JSONRenderer."""

    def test_report_fields(self, passing_report):
        """Test the JSON document carries counts, derived fields and digest."""
        output = JSONRenderer().render(passing_report, RenderContext(format=OutputFormat.JSON))
        data = json.loads(output)

        assert data["total_checks"] == 17
        assert data["passed_checks"] == 17
        assert data["success_rate"] == 100
        assert data["verdict"] == "excellent"
        assert data["digest"] == passing_report.digest
        assert data["timestamp"].startswith("2024-01-15T12:00:00")
        assert len(data["results"]) == 17
        assert data["results"][0]["status"] == "pass"

    def test_gate_result(self, failing_report):
        """Test gate results include the halt flag."""
        result = DeploymentGate().evaluate(failing_report)
        data = json.loads(JSONRenderer().render(result, RenderContext(format=OutputFormat.JSON)))

        assert data["halt"] is True
        assert data["readiness"] == "blocked"
        assert data["report"]["digest"] == failing_report.digest

    def test_compact_output(self, passing_report):
        output = JSONRenderer().render(passing_report, RenderContext(indent=0))
        assert "\n" not in output


class TestMarkdownRenderer:
    """Tests for MarkdownRenderer."""

    def test_audit_report(self, failing_report):
        """Test sections and check table rows."""
        output = MarkdownRenderer().render(failing_report, RenderContext(verbose=True))

        assert output.startswith("# Project Audit Report")
        assert "## Summary" in output
        assert "## Checks" in output
        assert "| UI Variants | `neuro` | ❌ fail |" in output
        assert "| Public Assets | `favicon.ico` | ⚠️ warning |" in output
        assert "## Details" in output

    def test_details_only_when_verbose(self, failing_report):
        output = MarkdownRenderer().render(failing_report, RenderContext())
        assert "## Details" not in output

    def test_gate_report(self, failing_report, tmp_path):
        """Test the deployment report lists blockers and readiness."""
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "a.ts").write_text("// TODO\n", encoding="utf-8")
        hygiene = HygieneScanner().scan(tmp_path)
        result = DeploymentGate().evaluate(failing_report, hygiene)

        output = MarkdownRenderer().render(result, RenderContext())

        assert output.startswith("# Deployment Report")
        assert "## Quality Gates Status" in output
        assert "- ❌ Project Audit: FAILED" in output
        assert "🔴 BLOCKED" in output
        assert "1 audit check(s) failed" in output
        assert "TODO/FIXME/HACK/XXX comments: 1 found" in output
        assert "## Next Steps" in output

    def test_gate_findings_grouped_by_rule(self, passing_report, tmp_path):
        """Test verbose gate reports list findings under their rule."""
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "a.ts").write_text(
            "// TODO one\nconsole.log(1);\n// TODO two\n", encoding="utf-8"
        )
        result = DeploymentGate().evaluate(passing_report, HygieneScanner().scan(tmp_path))

        output = MarkdownRenderer().render(result, RenderContext(verbose=True))
        findings = output.split("## Findings")[1].split("## Next Steps")[0]

        assert "### console.* statements\n\n- `src/a.ts:2`" in findings
        assert "### TODO/FIXME/HACK/XXX comments\n\n- `src/a.ts:1`\n- `src/a.ts:3`" in findings
        assert "any' types" not in findings

    def test_ready_gate_report(self, passing_report):
        result = DeploymentGate().evaluate(passing_report)
        output = MarkdownRenderer().render(result, RenderContext())

        assert "🟢 READY FOR DEPLOYMENT" in output
        assert "### Blockers" not in output

    def test_unsupported_data(self):
        with pytest.raises(TypeError):
            MarkdownRenderer().render({"a": 1}, RenderContext())


class TestTerminalRenderer:
    """Tests for TerminalRenderer."""

    def test_render_to_file(self, failing_report, tmp_path):
        """Test plain text file output lists issues only."""
        path = tmp_path / "report.txt"
        TerminalRenderer().render_to_file(failing_report, RenderContext(output_path=path))
        content = path.read_text(encoding="utf-8")

        assert "Audit Report" in content
        assert failing_report.digest in content
        assert "neuro" in content
        assert "favicon.ico" in content
        assert "classic" not in content

    def test_color_follows_context(self, failing_report):
        """Test color=False prints without ANSI styling."""
        colored = io.StringIO()
        plain = io.StringIO()
        TerminalRenderer(
            Console(file=colored, force_terminal=True, color_system="standard", width=120)
        ).render(failing_report, RenderContext(color=True))
        TerminalRenderer(
            Console(file=plain, force_terminal=True, color_system="standard", width=120)
        ).render(failing_report, RenderContext(color=False))

        assert "\x1b[" in colored.getvalue()
        assert "\x1b[" not in plain.getvalue()
        assert "neuro" in plain.getvalue()

    def test_render_to_file_requires_path(self, passing_report):
        with pytest.raises(ValueError):
            TerminalRenderer().render_to_file(passing_report, RenderContext())

    def test_gate_result_to_file(self, failing_report, tmp_path):
        path = tmp_path / "gate.txt"
        result = DeploymentGate().evaluate(failing_report)
        TerminalRenderer().render_to_file(result, RenderContext(output_path=path))

        content = path.read_text(encoding="utf-8")
        assert "Deployment Gate" in content
        assert "BLOCKED" in content


class TestGetRenderer:
    """Tests for get_renderer."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("json", JSONRenderer),
            ("markdown", MarkdownRenderer),
            ("terminal", TerminalRenderer),
            (OutputFormat.JSON, JSONRenderer),
        ],
    )
    def test_known_formats(self, name, expected):
        assert isinstance(get_renderer(name), expected)

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            get_renderer("html")
