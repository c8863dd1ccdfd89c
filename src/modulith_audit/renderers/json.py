"""JSON renderer for modulith-audit output."""

from __future__ import annotations

import json
from typing import Any

from modulith_audit.models.audit import AuditReport
from modulith_audit.models.gate import GateResult
from modulith_audit.renderers.base import BaseRenderer, OutputFormat, RenderContext


class JSONRenderer(BaseRenderer):
    """Renderer for JSON output format.

    Reports carry their derived fields (success rate, verdict) and the
    certification digest; gate results add the halt flag.

    Example:
        renderer = JSONRenderer()
        json_str = renderer.render(report, RenderContext(format=OutputFormat.JSON))
    """

    @property
    def format(self) -> OutputFormat:
        """The output format this renderer produces."""
        return OutputFormat.JSON

    def render_report(self, report: AuditReport, context: RenderContext) -> str:
        return self._dumps(self.report_dict(report), context)

    def render_gate(self, result: GateResult, context: RenderContext) -> str:
        data = result.model_dump(mode="json")
        data["halt"] = result.halt
        data["report"] = self.report_dict(result.report)
        return self._dumps(data, context)

    @staticmethod
    def report_dict(report: AuditReport) -> dict[str, Any]:
        """Plain JSON-compatible view of a report, digest included."""
        data = report.model_dump(mode="json")
        data["digest"] = report.digest
        return data

    @staticmethod
    def _dumps(data: dict[str, Any], context: RenderContext) -> str:
        return json.dumps(data, indent=context.indent or None, ensure_ascii=False)
