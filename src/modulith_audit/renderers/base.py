"""Base renderer protocol and types."""

from enum import Enum
from pathlib import Path
from typing import Protocol, Union, runtime_checkable

from pydantic import BaseModel, Field

from modulith_audit.models.audit import AuditReport
from modulith_audit.models.gate import GateResult

Renderable = Union[AuditReport, GateResult]


class OutputFormat(str, Enum):
    """Supported output formats."""

    JSON = "json"
    MARKDOWN = "markdown"
    TERMINAL = "terminal"


class RenderContext(BaseModel):
    """Context for rendering operations."""

    model_config = {"frozen": True}

    format: OutputFormat = Field(default=OutputFormat.TERMINAL, description="Output format")
    output_path: Path | None = Field(default=None, description="Output file path")
    verbose: bool = Field(
        default=False,
        description="Include passing checks, details and individual findings",
    )
    color: bool = Field(default=True, description="Enable color output (terminal only)")
    indent: int = Field(default=2, description="JSON indentation, 0 for compact output")


@runtime_checkable
class Renderer(Protocol):
    """Protocol for output renderers of audit reports and gate results."""

    @property
    def format(self) -> OutputFormat:
        """The output format this renderer produces."""
        ...

    def render(self, data: Renderable, context: RenderContext) -> str:
        """Render a report or gate result to a string."""
        ...

    def render_to_file(self, data: Renderable, context: RenderContext) -> None:
        """Render directly to context.output_path.

        Raises:
            ValueError: If context.output_path is not set
        """
        ...


class BaseRenderer:
    """Dispatches on the rendered type.

    Subclasses implement the format property, render_report and
    render_gate.
    """

    def render(self, data: Renderable, context: RenderContext) -> str:
        """Render a report or gate result.

        Raises:
            TypeError: If data is neither an AuditReport nor a GateResult
        """
        if isinstance(data, GateResult):
            return self.render_gate(data, context)
        if isinstance(data, AuditReport):
            return self.render_report(data, context)
        raise TypeError(f"Cannot render {type(data).__name__}")

    def render_report(self, report: AuditReport, context: RenderContext) -> str:
        raise NotImplementedError

    def render_gate(self, result: GateResult, context: RenderContext) -> str:
        raise NotImplementedError

    def render_to_file(self, data: Renderable, context: RenderContext) -> None:
        """Render data to context.output_path, creating parent directories.

        Raises:
            ValueError: If context.output_path is not set
        """
        path = self._require_output_path(context)
        path.write_text(self.render(data, context), encoding="utf-8")

    @staticmethod
    def _require_output_path(context: RenderContext) -> Path:
        if context.output_path is None:
            raise ValueError("output_path must be set in context for file rendering")
        context.output_path.parent.mkdir(parents=True, exist_ok=True)
        return context.output_path
