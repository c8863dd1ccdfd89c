"""Logging setup for modulith-audit.

Diagnostics always go to stderr. The audit trace and JSON reports own
stdout, and a log line there would corrupt piped output.
"""

import logging
import os
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "modulith_audit"
LEVEL_ENV_VAR = "MODULITH_AUDIT_LOG_LEVEL"
DEFAULT_LEVEL = "WARNING"


def resolve_level(verbose: bool = False, quiet: bool = False) -> str:
    """Pick a log level from CLI flags, falling back to the environment.

    Args:
        verbose: --verbose was given
        quiet: --quiet was given

    Returns:
        Level name understood by the logging module
    """
    if verbose:
        return "DEBUG"
    if quiet:
        return "ERROR"
    return os.environ.get(LEVEL_ENV_VAR, DEFAULT_LEVEL).upper()


def configure_logging(level: str = DEFAULT_LEVEL, plain: bool = False) -> None:
    """Install the modulith-audit log handler.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        plain: Use a timestamped single-line format instead of rich output,
            for CI logs that are read as text
    """
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")

    if plain:
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
        )
    else:
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(numeric)
    logger.handlers = [handler]
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the package root logger."""
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


class ContextAdapter(logging.LoggerAdapter):
    """Appends key=value context to every message."""

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        if not self.extra:
            return msg, kwargs
        context = " ".join(f"{k}={v}" for k, v in self.extra.items())
        return f"{msg} [{context}]", kwargs


def get_logger_with_context(name: str, **context: Any) -> ContextAdapter:
    """Get a logger that tags messages with fixed context fields.

    Example:
        log = get_logger_with_context("engine", project="/srv/app")
        log.info("Audit complete")  # Audit complete [project=/srv/app]
    """
    return ContextAdapter(get_logger(name), context)
