"""Data models for modulith-audit."""

from modulith_audit.models.common import AuditError
from modulith_audit.models.audit import (
    AuditReport,
    CheckCategory,
    CheckDefinition,
    CheckStatus,
    OutcomeRecord,
    VerdictTier,
)
from modulith_audit.models.catalog import CatalogConfig
from modulith_audit.models.gate import (
    DEFAULT_HYGIENE_RULES,
    GateConfig,
    GateResult,
    HygieneConfig,
    HygieneFinding,
    HygieneReport,
    HygieneRule,
    HygieneSeverity,
    Readiness,
)

__all__ = [
    # Common
    "AuditError",
    # Audit
    "AuditReport",
    "CheckCategory",
    "CheckDefinition",
    "CheckStatus",
    "OutcomeRecord",
    "VerdictTier",
    # Catalog
    "CatalogConfig",
    # Gate
    "DEFAULT_HYGIENE_RULES",
    "GateConfig",
    "GateResult",
    "HygieneConfig",
    "HygieneFinding",
    "HygieneReport",
    "HygieneRule",
    "HygieneSeverity",
    "Readiness",
]
