"""Error handling utilities for modulith-audit."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from modulith_audit.models.common import AuditError


class ModulithAuditError(Exception):
    """Base exception for modulith-audit."""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR", details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_audit_error(self) -> AuditError:
        """Convert to AuditError model."""
        return AuditError(code=self.code, message=self.message, details=self.details)


class CatalogError(ModulithAuditError):
    """The rule catalog could not be constructed.

    This is the only error that aborts an audit run.
    """

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="CATALOG_ERROR", details=details)


class ProjectRootError(ModulithAuditError):
    """The project root to audit is not a usable directory."""

    def __init__(self, root: Path | str):
        super().__init__(
            f"Project root is not a directory: {root}",
            code="PROJECT_ROOT_ERROR",
            details={"root": str(root)},
        )


def validate_project_root(root: Path | str) -> Path:
    """Validate that a project root exists and is a directory.

    Args:
        root: Path to the project root

    Returns:
        The root as a resolved Path

    Raises:
        ProjectRootError: If the root is missing or not a directory
    """
    path = Path(root)
    if not path.is_dir():
        raise ProjectRootError(root)
    return path.resolve()
