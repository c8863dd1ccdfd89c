"""modulith-audit: project audit engine and deployment gate.

This package audits a front-end project tree against a fixed checklist
and turns the outcome into a readiness verdict:

- **Rule Catalog**: ordered checks built from explicit configuration data
- **Evaluator**: runs each check and records pass, fail or warning
- **Report Aggregator**: counts outcomes and computes the success rate
- **Verdict Classifier**: excellent, needs-attention or critical
- **Deployment Gate**: combines the report with a source hygiene scan

Usage:
    # Library API
    from modulith_audit import run_audit, DeploymentGate, HygieneScanner

    report = run_audit("path/to/project")
    print(report.success_rate, report.verdict.value)

    gate = DeploymentGate().evaluate(report, HygieneScanner().scan("path/to/project"))
    if gate.halt:
        ...

CLI:
    modulith-audit                 # audit the current directory
    modulith-audit audit --root <path> --format json
    modulith-audit gate --root <path> --report deployment-report.md
"""

__version__ = "0.1.0"

# Core classes
from modulith_audit.core.catalog import RuleCatalog
from modulith_audit.core.engine import ProjectAuditor, run_audit
from modulith_audit.core.evaluator import AuditEvaluator
from modulith_audit.core.gate import DeploymentGate
from modulith_audit.core.hygiene import HygieneScanner
from modulith_audit.core.project import LocalProjectView, MemoryProjectView, ProjectView
from modulith_audit.core.report import aggregate, success_rate
from modulith_audit.core.trace import AuditTrace, plain_style, rich_style
from modulith_audit.core.verdict import classify_verdict

# Models (commonly used)
from modulith_audit.models.audit import (
    AuditReport,
    CheckCategory,
    CheckDefinition,
    CheckStatus,
    OutcomeRecord,
    VerdictTier,
)
from modulith_audit.models.catalog import CatalogConfig
from modulith_audit.models.gate import GateConfig, GateResult, HygieneConfig, HygieneReport, Readiness

# Renderers
from modulith_audit.renderers.base import Renderer, RenderContext, OutputFormat

__all__ = [
    # Version
    "__version__",
    # Core
    "RuleCatalog",
    "ProjectAuditor",
    "run_audit",
    "AuditEvaluator",
    "DeploymentGate",
    "HygieneScanner",
    "LocalProjectView",
    "MemoryProjectView",
    "ProjectView",
    "aggregate",
    "success_rate",
    "AuditTrace",
    "plain_style",
    "rich_style",
    "classify_verdict",
    # Models - Audit
    "AuditReport",
    "CheckCategory",
    "CheckDefinition",
    "CheckStatus",
    "OutcomeRecord",
    "VerdictTier",
    # Models - Catalog
    "CatalogConfig",
    # Models - Gate
    "GateConfig",
    "GateResult",
    "HygieneConfig",
    "HygieneReport",
    "Readiness",
    # Renderers
    "Renderer",
    "RenderContext",
    "OutputFormat",
]
