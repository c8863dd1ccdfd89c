"""Core domain logic for modulith-audit.

This module provides the main library API for auditing a project tree.
"""

from modulith_audit.core.catalog import RuleCatalog
from modulith_audit.core.engine import ProjectAuditor, main, run_audit
from modulith_audit.core.evaluator import AuditEvaluator
from modulith_audit.core.gate import DeploymentGate
from modulith_audit.core.hygiene import HygieneScanner
from modulith_audit.core.project import LocalProjectView, MemoryProjectView, ProjectView
from modulith_audit.core.report import aggregate, success_rate
from modulith_audit.core.trace import AuditTrace, plain_style, rich_style
from modulith_audit.core.verdict import classify_verdict

__all__ = [
    "RuleCatalog",
    "ProjectAuditor",
    "main",
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
]
