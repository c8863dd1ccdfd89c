"""Evaluator: runs catalog checks against a project snapshot."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modulith_audit.models.audit import CheckDefinition, CheckStatus, OutcomeRecord
from modulith_audit.utils.logging import get_logger

if TYPE_CHECKING:
    from modulith_audit.core.catalog import RuleCatalog
    from modulith_audit.core.project import ProjectView
    from modulith_audit.core.trace import AuditTrace

logger = get_logger("evaluator")


class AuditEvaluator:
    """Evaluates every check of a catalog, in order, one at a time.

    A check whose predicate does not hold is recorded with the check's
    failure status (fail or warning). Nothing a single check does can
    abort the run: unexpected predicate errors are recorded the same way.

    Example:
        evaluator = AuditEvaluator(RuleCatalog())
        results = evaluator.evaluate(LocalProjectView("."))
    """

    def __init__(self, catalog: "RuleCatalog", trace: "AuditTrace | None" = None) -> None:
        self._catalog = catalog
        self._trace = trace

    @property
    def catalog(self) -> "RuleCatalog":
        return self._catalog

    def evaluate(self, project: "ProjectView") -> tuple[OutcomeRecord, ...]:
        """Evaluate the catalog against a project.

        Args:
            project: Read-only view of the project tree

        Returns:
            One OutcomeRecord per check, in catalog order
        """
        results: list[OutcomeRecord] = []
        current_category = None

        for check in self._catalog:
            if self._trace and check.category != current_category:
                self._trace.category(check.category)
            current_category = check.category

            record = self.evaluate_check(check, project)
            results.append(record)

            if self._trace:
                self._trace.outcome(record)

        return tuple(results)

    def evaluate_check(self, check: CheckDefinition, project: "ProjectView") -> OutcomeRecord:
        """Evaluate a single check.

        A predicate may answer with a bool or with a CheckStatus. A bool
        maps to pass or the check's failure status; a status is recorded
        as returned.
        """
        try:
            outcome = check.predicate(project)
        except Exception as e:
            logger.warning(f"Check {check.category.value}/{check.item} raised: {e}")
            outcome = False

        if isinstance(outcome, CheckStatus):
            status = outcome
        else:
            status = CheckStatus.PASS if outcome else check.failure_status
        ok = status == CheckStatus.PASS
        logger.debug(f"{check.category.value}/{check.item}: {status.value}")

        return OutcomeRecord(
            category=check.category,
            item=check.item,
            status=status,
            message=check.pass_message if ok else check.fail_message,
            details=check.pass_details if ok else check.fail_details,
        )
