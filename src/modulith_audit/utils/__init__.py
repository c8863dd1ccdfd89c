"""Utility functions for modulith-audit."""

from modulith_audit.utils.hashing import compute_hash, hash_dict, report_digest
from modulith_audit.utils.logging import configure_logging, get_logger, get_logger_with_context
from modulith_audit.utils.errors import (
    ModulithAuditError,
    CatalogError,
    ProjectRootError,
    validate_project_root,
)
from modulith_audit.utils.config import (
    ModulithAuditConfig,
    OutputConfig,
    load_config,
)

__all__ = [
    # Hashing
    "compute_hash",
    "hash_dict",
    "report_digest",
    # Logging
    "configure_logging",
    "get_logger",
    "get_logger_with_context",
    # Errors
    "ModulithAuditError",
    "CatalogError",
    "ProjectRootError",
    "validate_project_root",
    # Config
    "ModulithAuditConfig",
    "OutputConfig",
    "load_config",
]
