"""Output format renderers."""

from __future__ import annotations

from rich.console import Console

from modulith_audit.renderers.base import (
    BaseRenderer,
    OutputFormat,
    Renderable,
    RenderContext,
    Renderer,
)
from modulith_audit.renderers.json import JSONRenderer
from modulith_audit.renderers.markdown import MarkdownRenderer
from modulith_audit.renderers.terminal import TerminalRenderer

__all__ = [
    "BaseRenderer",
    "OutputFormat",
    "Renderable",
    "RenderContext",
    "Renderer",
    "JSONRenderer",
    "MarkdownRenderer",
    "TerminalRenderer",
    "get_renderer",
]


def get_renderer(format: OutputFormat | str, console: Console | None = None) -> BaseRenderer:
    """Get a renderer for the specified format.

    Args:
        format: Output format (OutputFormat enum or string)
        console: Console for terminal output; ignored by the text formats

    Returns:
        Appropriate renderer instance

    Raises:
        ValueError: If format is not supported
    """
    format = OutputFormat(format)
    if format == OutputFormat.TERMINAL:
        return TerminalRenderer(console)
    if format == OutputFormat.MARKDOWN:
        return MarkdownRenderer()
    return JSONRenderer()
