"""Read-only views over the project tree being audited."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path, PurePosixPath
from typing import Any, Sequence

from modulith_audit.utils.logging import get_logger

logger = get_logger("project")


def _normalize(path: str) -> str:
    return PurePosixPath(path.replace("\\", "/")).as_posix()


class ProjectView(ABC):
    """Abstract read-only view of a project tree.

    Paths are POSIX-style and relative to the project root. Reads never
    raise: a missing file and an unreadable file both come back as None.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check whether a file exists."""
        ...

    @abstractmethod
    def read_text(self, path: str) -> str | None:
        """Read a file as UTF-8 text, or None if it cannot be read."""
        ...

    @property
    def label(self) -> str:
        """Description of the view for log messages."""
        return type(self).__name__

    def contains_all(self, path: str, tokens: Sequence[str]) -> bool:
        """Check that a file exists and its text contains every token."""
        text = self.read_text(path)
        if text is None:
            return False
        return all(token in text for token in tokens)

    def read_json(self, path: str) -> Any | None:
        """Read and parse a JSON file, or None if it is missing or malformed."""
        text = self.read_text(path)
        if text is None:
            return None
        try:
            return json.loads(text)
        except ValueError as e:
            logger.debug(f"Malformed JSON in {path}: {e}")
            return None


class LocalProjectView(ProjectView):
    """Project view backed by a directory on the local filesystem."""

    def __init__(self, root: Path | str):
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    @property
    def label(self) -> str:
        return str(self._root)

    def _resolve(self, path: str) -> Path:
        return self._root.joinpath(*PurePosixPath(_normalize(path)).parts)

    def exists(self, path: str) -> bool:
        try:
            return self._resolve(path).is_file()
        except OSError:
            return False

    def read_text(self, path: str) -> str | None:
        target = self._resolve(path)
        try:
            return target.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Cannot read {target}: {e}")
            return None


class MemoryProjectView(ProjectView):
    """In-memory project view for testing.

    Files map relative paths to text or bytes. A value of None marks a
    file that exists but cannot be read.
    """

    def __init__(self, files: dict[str, str | bytes | None] | None = None):
        self._files = {_normalize(p): content for p, content in (files or {}).items()}

    @property
    def label(self) -> str:
        return f"memory ({len(self._files)} files)"

    def exists(self, path: str) -> bool:
        return _normalize(path) in self._files

    def read_text(self, path: str) -> str | None:
        content = self._files.get(_normalize(path))
        if content is None:
            return None
        if isinstance(content, bytes):
            try:
                return content.decode("utf-8")
            except UnicodeDecodeError:
                return None
        return content
