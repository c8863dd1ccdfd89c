"""Deployment gate: decides whether a pipeline may proceed."""

from __future__ import annotations

from modulith_audit.models.audit import AuditReport, VerdictTier
from modulith_audit.models.gate import (
    GateConfig,
    GateResult,
    HygieneReport,
    HygieneSeverity,
    Readiness,
)
from modulith_audit.utils.logging import get_logger

logger = get_logger("gate")


class DeploymentGate:
    """Turns an audit report and hygiene findings into a go/no-go decision.

    Failed checks and error-severity hygiene findings always block.
    Warnings are advisory unless the gate is configured to fail on them.

    Example:
        gate = DeploymentGate()
        result = gate.evaluate(report, hygiene)
        if result.halt:
            sys.exit(1)
    """

    def __init__(self, config: GateConfig | None = None) -> None:
        self._config = config or GateConfig()

    @property
    def config(self) -> GateConfig:
        return self._config

    def evaluate(self, report: AuditReport, hygiene: HygieneReport | None = None) -> GateResult:
        """Evaluate the gate.

        Args:
            report: Audit report to gate on
            hygiene: Optional hygiene scan results

        Returns:
            GateResult with readiness, blockers and advisories
        """
        blockers: list[str] = []
        advisories: list[str] = []

        if report.failed_checks:
            blockers.append(f"{report.failed_checks} audit check(s) failed")

        if report.verdict == VerdictTier.CRITICAL and self._config.halt_on_critical:
            blockers.append(f"Audit verdict is critical ({report.success_rate}%)")

        if report.warning_checks:
            message = f"{report.warning_checks} audit check(s) raised warnings"
            (blockers if self._config.fail_on_warning else advisories).append(message)

        if hygiene is not None:
            for rule in hygiene.rules:
                count = hygiene.count(rule.id)
                if not count:
                    continue
                message = f"Found {count} {rule.description}"
                if rule.severity == HygieneSeverity.ERROR or self._config.fail_on_warning:
                    blockers.append(message)
                else:
                    advisories.append(message)

        if blockers:
            readiness = Readiness.BLOCKED
        elif advisories:
            readiness = Readiness.READY_WITH_WARNINGS
        else:
            readiness = Readiness.READY

        logger.info(
            f"Gate decision: {readiness.value} "
            f"({len(blockers)} blockers, {len(advisories)} advisories)"
        )

        return GateResult(
            readiness=readiness,
            blockers=blockers,
            advisories=advisories,
            report=report,
            hygiene=hygiene,
        )
