"""Audit engine facade."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable

from modulith_audit.core.catalog import RuleCatalog
from modulith_audit.core.evaluator import AuditEvaluator
from modulith_audit.core.project import LocalProjectView, ProjectView
from modulith_audit.core.report import aggregate
from modulith_audit.core.trace import AuditTrace
from modulith_audit.models.audit import AuditReport
from modulith_audit.models.catalog import CatalogConfig
from modulith_audit.utils.logging import get_logger_with_context


class ProjectAuditor:
    """Runs the full catalog against a project and aggregates a report.

    Each call to audit() is independent: the report depends only on the
    project contents and the time it was aggregated.

    Example:
        auditor = ProjectAuditor()
        report = auditor.audit("path/to/project")

        if report.failed_checks:
            for record in report.results_by_status(CheckStatus.FAIL):
                print(record.item, record.message)
    """

    def __init__(
        self,
        config: CatalogConfig | dict | None = None,
        trace: AuditTrace | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the auditor.

        Args:
            config: Catalog configuration (defaults to the built-in checklist)
            trace: Optional trace that receives per-check progress
            clock: Optional timestamp source for reports

        Raises:
            CatalogError: If the catalog cannot be built from the config
        """
        self._catalog = RuleCatalog(config)
        self._trace = trace
        self._clock = clock

    @property
    def catalog(self) -> RuleCatalog:
        return self._catalog

    def audit(self, project: ProjectView | Path | str) -> AuditReport:
        """Audit a project.

        Args:
            project: Project root path or a ProjectView

        Returns:
            Complete AuditReport covering every catalog check
        """
        if not isinstance(project, ProjectView):
            project = LocalProjectView(project)

        log = get_logger_with_context("engine", project=project.label)
        log.debug(f"Running {len(self._catalog)} checks")

        if self._trace:
            self._trace.start()

        results = AuditEvaluator(self._catalog, trace=self._trace).evaluate(project)
        report = aggregate(results, clock=self._clock)

        if self._trace:
            self._trace.summary(report)

        log.info(
            f"Audit finished: {report.passed_checks}/{report.total_checks} passed, "
            f"{report.failed_checks} failed, {report.warning_checks} warnings "
            f"({report.success_rate}%, {report.verdict.value})"
        )
        return report


def run_audit(
    root: Path | str = ".",
    config: CatalogConfig | dict | None = None,
    trace: AuditTrace | None = None,
) -> AuditReport:
    """Audit a project directory and return the report.

    Args:
        root: Project root, defaults to the current directory
        config: Catalog configuration
        trace: Optional trace; the run is silent without one

    Returns:
        The AuditReport
    """
    return ProjectAuditor(config=config, trace=trace).audit(root)


def main() -> AuditReport:
    """Audit the current directory, printing the trace and summary."""
    return run_audit(".", trace=AuditTrace())
