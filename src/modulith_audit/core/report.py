"""Report aggregation."""

from __future__ import annotations

from collections import Counter
from datetime import datetime, timezone
from typing import Callable, Iterable

from modulith_audit.models.audit import AuditReport, CheckStatus, OutcomeRecord

# A run with no checks has nothing that passed.
EMPTY_SUCCESS_RATE = 0


def success_rate(passed: int, total: int) -> int:
    """Percentage of passed checks, rounded half up to an integer.

    Args:
        passed: Number of passed checks
        total: Number of evaluated checks

    Returns:
        Integer in 0..100; EMPTY_SUCCESS_RATE when total is zero
    """
    if total <= 0:
        return EMPTY_SUCCESS_RATE
    passed = min(max(passed, 0), total)
    # floor(100 * passed / total + 1/2) in integer arithmetic
    return (200 * passed + total) // (2 * total)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def aggregate(
    results: Iterable[OutcomeRecord],
    clock: Callable[[], datetime] | None = None,
) -> AuditReport:
    """Build an audit report from outcome records.

    Records keep the order they were given in and are not modified.

    Args:
        results: Outcome records in catalog order
        clock: Timestamp source, defaults to the current UTC time

    Returns:
        The aggregated AuditReport
    """
    records = tuple(results)
    counts = Counter(r.status for r in records)

    return AuditReport(
        timestamp=(clock or utc_now)(),
        total_checks=len(records),
        passed_checks=counts[CheckStatus.PASS],
        failed_checks=counts[CheckStatus.FAIL],
        warning_checks=counts[CheckStatus.WARNING],
        results=records,
    )
