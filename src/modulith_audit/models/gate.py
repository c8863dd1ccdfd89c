"""Source hygiene and deployment gate data models."""

from enum import Enum

from pydantic import BaseModel, Field

from modulith_audit.models.audit import AuditReport


class HygieneSeverity(str, Enum):
    """Severity of a hygiene rule."""

    ERROR = "error"
    WARNING = "warning"


class HygieneRule(BaseModel):
    """A line-based text pattern searched for in project sources."""

    model_config = {"frozen": True}

    id: str = Field(description="Unique rule identifier")
    description: str = Field(description="What the rule looks for")
    pattern: str = Field(description="Regular expression matched against each line")
    severity: HygieneSeverity = Field(default=HygieneSeverity.WARNING)
    exclude: str | None = Field(
        default=None,
        description="Lines containing this substring are ignored",
    )
    remediation: str | None = Field(default=None, description="How to fix findings")


DEFAULT_HYGIENE_RULES = [
    HygieneRule(
        id="debug-statement",
        description="console.* statements",
        pattern=r"console\.",
        severity=HygieneSeverity.ERROR,
        exclude="// console",
        remediation="Use the logger instead of console output",
    ),
    HygieneRule(
        id="todo-marker",
        description="TODO/FIXME/HACK/XXX comments",
        pattern=r"TODO|FIXME|HACK|XXX",
        remediation="Consider addressing these before deployment",
    ),
    HygieneRule(
        id="any-type",
        description="'any' types",
        pattern=r": any|any\[\]",
        remediation="Consider using more specific types",
    ),
    HygieneRule(
        id="ts-ignore",
        description="@ts-ignore statements",
        pattern=r"@ts-ignore",
        remediation="Consider fixing the underlying type errors",
    ),
]


class HygieneConfig(BaseModel):
    """Hygiene scan configuration."""

    src_dir: str = Field(default="src", description="Directory scanned, relative to the root")
    extensions: list[str] = Field(default_factory=lambda: [".ts", ".tsx"])
    rules: list[HygieneRule] = Field(default_factory=lambda: list(DEFAULT_HYGIENE_RULES))


class HygieneFinding(BaseModel):
    """A single matching source line."""

    model_config = {"frozen": True}

    rule_id: str
    severity: HygieneSeverity
    path: str = Field(description="Path relative to the project root")
    line: int = Field(ge=1)
    text: str

    def __str__(self) -> str:
        return f"{self.path}:{self.line}: {self.text}"


class HygieneReport(BaseModel):
    """Findings of one hygiene scan, in path and line order."""

    model_config = {"frozen": True}

    rules: list[HygieneRule] = Field(default_factory=list)
    files_scanned: int = Field(default=0, ge=0)
    findings: list[HygieneFinding] = Field(default_factory=list)

    def count(self, rule_id: str) -> int:
        """Number of findings for a rule."""
        return len(self.findings_for(rule_id))

    def findings_for(self, rule_id: str) -> list[HygieneFinding]:
        """Findings of one rule, in path and line order."""
        return [f for f in self.findings if f.rule_id == rule_id]

    @property
    def error_count(self) -> int:
        return sum(1 for f in self.findings if f.severity == HygieneSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for f in self.findings if f.severity == HygieneSeverity.WARNING)


class GateConfig(BaseModel):
    """Deployment gate configuration."""

    fail_on_warning: bool = Field(default=False, description="Treat warnings as blockers")
    halt_on_critical: bool = Field(
        default=True,
        description="Halt when the audit verdict is critical",
    )
    run_hygiene: bool = Field(default=True, description="Run the source hygiene scan")


class Readiness(str, Enum):
    """Deployment readiness."""

    READY = "ready"
    READY_WITH_WARNINGS = "ready-with-warnings"
    BLOCKED = "blocked"


class GateResult(BaseModel):
    """Decision of the deployment gate."""

    model_config = {"frozen": True}

    readiness: Readiness
    blockers: list[str] = Field(default_factory=list, description="Reasons to halt")
    advisories: list[str] = Field(default_factory=list, description="Non-fatal findings")
    report: AuditReport
    hygiene: HygieneReport | None = None

    @property
    def halt(self) -> bool:
        """Whether the pipeline should stop."""
        return self.readiness == Readiness.BLOCKED
