"""Check, outcome and report data models."""

from __future__ import annotations

from collections import Counter
from datetime import datetime
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, Field, computed_field, model_validator


class CheckStatus(str, Enum):
    """Outcome of a single check."""

    PASS = "pass"
    FAIL = "fail"
    WARNING = "warning"


class CheckCategory(str, Enum):
    """Grouping label of a check. The value doubles as the display name."""

    VARIANTS = "UI Variants"
    THEME = "Theme Configuration"
    ENVIRONMENT = "Environment Variables"
    LOGGER = "Logger Implementation"
    DOMAIN_MODULE = "RF Core Implementation"
    MANIFEST = "Package Configuration"
    BUILD_CONFIG = "Next.js Configuration"
    PUBLIC_ASSETS = "Public Assets"


class VerdictTier(str, Enum):
    """Readiness tier derived from the success rate."""

    EXCELLENT = "excellent"
    NEEDS_ATTENTION = "needs-attention"
    CRITICAL = "critical"

    @property
    def label(self) -> str:
        """Human summary line for the tier."""
        return {
            VerdictTier.EXCELLENT: "Audit Complete - Excellent!",
            VerdictTier.NEEDS_ATTENTION: "Audit Complete - Good, but needs attention",
            VerdictTier.CRITICAL: "Audit Complete - Critical issues found",
        }[self]


class CheckDefinition(BaseModel):
    """A single catalog entry: what to check and how to report it."""

    model_config = {"frozen": True}

    category: CheckCategory = Field(description="Category the check belongs to")
    item: str = Field(description="Subject of the check, e.g. a variant or file name")
    predicate: Callable[[Any], bool | CheckStatus] = Field(
        description="Predicate evaluated against the project snapshot",
        exclude=True,
    )
    failure_status: CheckStatus = Field(
        default=CheckStatus.FAIL,
        description="Status recorded when the predicate does not hold",
    )

    pass_message: str = Field(default="OK", description="Summary on success")
    fail_message: str = Field(default="Missing", description="Summary on failure")
    pass_details: str | None = Field(default=None, description="Explanation on success")
    fail_details: str | None = Field(default=None, description="Explanation on failure")

    @model_validator(mode="after")
    def _check_failure_status(self) -> "CheckDefinition":
        if self.failure_status == CheckStatus.PASS:
            raise ValueError("failure_status cannot be 'pass'")
        return self


class OutcomeRecord(BaseModel):
    """Result of evaluating one check."""

    model_config = {"frozen": True}

    category: CheckCategory = Field(description="Category of the evaluated check")
    item: str = Field(description="Subject of the evaluated check")
    status: CheckStatus = Field(description="Outcome status")
    message: str = Field(description="Short human summary")
    details: str | None = Field(default=None, description="Longer explanation")

    @property
    def passed(self) -> bool:
        return self.status == CheckStatus.PASS


class AuditReport(BaseModel):
    """Aggregated result of one full catalog evaluation."""

    model_config = {"frozen": True}

    timestamp: datetime = Field(description="When the report was aggregated")
    total_checks: int = Field(ge=0, description="Number of evaluated checks")
    passed_checks: int = Field(ge=0, description="Checks with status pass")
    failed_checks: int = Field(ge=0, description="Checks with status fail")
    warning_checks: int = Field(ge=0, description="Checks with status warning")
    results: tuple[OutcomeRecord, ...] = Field(
        default=(),
        description="Outcome records in catalog order",
    )

    @model_validator(mode="after")
    def _check_counts(self) -> "AuditReport":
        if self.total_checks != len(self.results):
            raise ValueError(
                f"inconsistent counts: total={self.total_checks}, results={len(self.results)}"
            )
        statuses = Counter(r.status for r in self.results)
        for status, declared in (
            (CheckStatus.PASS, self.passed_checks),
            (CheckStatus.FAIL, self.failed_checks),
            (CheckStatus.WARNING, self.warning_checks),
        ):
            if statuses[status] != declared:
                raise ValueError(
                    f"inconsistent counts: {declared} {status.value} declared, "
                    f"{statuses[status]} in results"
                )
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def success_rate(self) -> int:
        """Percentage of passed checks, rounded half up."""
        from modulith_audit.core.report import success_rate

        return success_rate(self.passed_checks, self.total_checks)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def verdict(self) -> VerdictTier:
        """Readiness tier for the success rate."""
        from modulith_audit.core.verdict import classify_verdict

        return classify_verdict(self.success_rate)

    @property
    def digest(self) -> str:
        """Short certification identifier over every non-time field."""
        from modulith_audit.utils.hashing import report_digest

        return report_digest(self)

    @property
    def has_failures(self) -> bool:
        return self.failed_checks > 0

    @property
    def has_warnings(self) -> bool:
        return self.warning_checks > 0

    def results_by_status(self, status: CheckStatus) -> list[OutcomeRecord]:
        """Get outcome records with the given status, in catalog order."""
        return [r for r in self.results if r.status == status]

    def results_by_category(self, category: CheckCategory) -> list[OutcomeRecord]:
        """Get outcome records for a category, in catalog order."""
        return [r for r in self.results if r.category == category]
