"""Integration tests for end-to-end workflows."""

import pytest

from modulith_audit.core.engine import ProjectAuditor, main, run_audit
from modulith_audit.core.gate import DeploymentGate
from modulith_audit.core.hygiene import HygieneScanner
from modulith_audit.core.trace import AuditTrace, plain_style
from modulith_audit.models.audit import CheckCategory, CheckStatus, VerdictTier
from modulith_audit.models.gate import Readiness
from modulith_audit.renderers import MarkdownRenderer, RenderContext
from modulith_audit.utils.config import load_config


class TestAuditWorkflow:
    """Integration tests for the audit workflow on disk."""

    @pytest.fixture
    def seven_variant_config(self, tmp_path):
        config_path = tmp_path / "modulith-audit.yaml"
        config_path.write_text(
            "catalog:\n"
            "  variants: [classic, minimal, hardware, neuro, satellite, transceiver, groundstation]\n",
            encoding="utf-8",
        )
        return load_config(config_path)

    def test_critical_project(self, write_project, project_files, seven_variant_config):
        """Test a project with missing components, env file and assets.

        Five variants pass and two lack components, the env file is
        absent and two of three assets are missing: 16 checks, 11 passed,
        2 failed, 3 warnings.
        """
        files = dict(project_files)
        for name in (
            "src/components/variants/NeuroUI.tsx",
            "src/components/variants/SatelliteUI.tsx",
            ".env.local",
            "public/logo.svg",
            "public/manifest.json",
        ):
            del files[name]
        root = write_project(files)

        lines: list[str] = []
        report = run_audit(
            root,
            config=seven_variant_config.catalog,
            trace=AuditTrace(emit=lines.append, style=plain_style),
        )

        assert report.total_checks == 16
        assert report.passed_checks == 11
        assert report.failed_checks == 2
        assert report.warning_checks == 3
        assert report.success_rate == 69
        assert report.verdict == VerdictTier.CRITICAL

        failed = [r.item for r in report.results_by_status(CheckStatus.FAIL)]
        assert failed == ["neuro", "satellite"]

        env = report.results_by_category(CheckCategory.ENVIRONMENT)[0]
        assert env.status == CheckStatus.WARNING
        assert env.message == "Missing NEXT_PUBLIC_UI_MODE or NEXT_PUBLIC_THEME"

        text = "\n".join(lines)
        assert "Success Rate: 69%" in text
        assert "Audit Complete - Critical issues found" in text

    def test_needs_attention_project(self, write_project, project_files):
        """Test 13 of 17 passing rounds to 76 percent."""
        files = dict(project_files)
        for name in (
            "src/components/variants/HardwareUI.tsx",
            "src/components/variants/TransceiverUI.tsx",
            ".env.local",
            "public/favicon.ico",
        ):
            del files[name]
        root = write_project(files)

        report = run_audit(root)

        assert (report.total_checks, report.passed_checks) == (17, 13)
        assert (report.failed_checks, report.warning_checks) == (2, 2)
        assert report.success_rate == 76
        assert report.verdict == VerdictTier.NEEDS_ATTENTION

    def test_unregistered_variant(self, write_project, project_files):
        """Test a component file alone does not satisfy a variant check."""
        files = dict(project_files)
        files["src/stores/uiStore.ts"] = files["src/stores/uiStore.ts"].replace(
            " | 'funkcore'", ""
        )
        report = run_audit(write_project(files))

        assert [r.item for r in report.results_by_status(CheckStatus.FAIL)] == ["funkcore"]

    def test_empty_directory(self, tmp_path):
        """Test an empty project completes with every check non-passing."""
        report = run_audit(tmp_path)

        assert report.total_checks == 17
        assert report.passed_checks == 0
        assert report.failed_checks == 13
        assert report.warning_checks == 4
        assert report.verdict == VerdictTier.CRITICAL

    def test_idempotent(self, local_project, fixed_clock):
        """Test repeated audits of an unchanged tree agree."""
        auditor = ProjectAuditor(clock=fixed_clock)

        first = auditor.audit(local_project)
        second = auditor.audit(local_project)

        assert first.results == second.results
        assert first.digest == second.digest
        assert first == second

    def test_digest_ignores_timestamp(self, local_project):
        first = run_audit(local_project)
        second = ProjectAuditor(clock=lambda: first.timestamp.replace(year=2030)).audit(
            local_project
        )

        assert first.timestamp != second.timestamp
        assert first.digest == second.digest

    def test_digest_changes_with_results(self, write_project, project_files, tmp_path):
        before = run_audit(write_project(project_files))
        (tmp_path / "project" / "public" / "logo.svg").unlink()
        after = run_audit(tmp_path / "project")

        assert before.digest != after.digest


class TestGateWorkflow:
    """Integration tests for the deployment gate workflow."""

    def test_full_gate(self, local_project, tmp_path):
        """Test audit, hygiene scan, gate and Markdown report together."""
        (local_project / "src" / "lib" / "legacy.ts").write_text(
            "// TODO: remove\nexport const x: any = 1;\n",
            encoding="utf-8",
        )

        report = run_audit(local_project)
        hygiene = HygieneScanner().scan(local_project)
        result = DeploymentGate().evaluate(report, hygiene)

        assert report.verdict == VerdictTier.EXCELLENT
        assert result.readiness == Readiness.READY_WITH_WARNINGS
        assert not result.halt

        output = tmp_path / "deployment-report.md"
        MarkdownRenderer().render_to_file(result, RenderContext(output_path=output))
        content = output.read_text(encoding="utf-8")

        assert "🟡 READY WITH WARNINGS" in content
        assert "'any' types: 1 found" in content
        assert report.digest in content

    def test_blocked_gate(self, local_project):
        (local_project / "src" / "lib" / "debug.ts").write_text(
            "console.log('x');\n", encoding="utf-8"
        )
        (local_project / "package.json").write_text("{}", encoding="utf-8")

        report = run_audit(local_project)
        result = DeploymentGate().evaluate(report, HygieneScanner().scan(local_project))

        assert result.halt
        assert "1 audit check(s) failed" in result.blockers
        assert "Found 1 console.* statements" in result.blockers


class TestMainEntry:
    """Tests for the library entry point."""

    def test_main_audits_working_directory(self, local_project, monkeypatch, capsys):
        """Test main() prints the trace and returns the report."""
        monkeypatch.chdir(local_project)

        report = main()
        out = capsys.readouterr().out

        assert report.success_rate == 100
        assert "Running ModulithCertivox UI Audit" in out
        assert "Audit Complete - Excellent!" in out
