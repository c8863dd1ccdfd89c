"""Static source hygiene scan used by the deployment gate."""

from __future__ import annotations

import re
from pathlib import Path

from modulith_audit.models.gate import (
    HygieneConfig,
    HygieneFinding,
    HygieneReport,
    HygieneRule,
)
from modulith_audit.utils.logging import get_logger

logger = get_logger("hygiene")


class HygieneScanner:
    """Greps project sources for statements that should not ship.

    Files are visited in sorted path order and lines in file order, so a
    scan of an unchanged tree always yields the same findings.

    Example:
        report = HygieneScanner().scan("path/to/project")
        print(report.count("debug-statement"))
    """

    def __init__(self, config: HygieneConfig | None = None) -> None:
        self._config = config or HygieneConfig()
        self._compiled = [
            (rule, re.compile(rule.pattern)) for rule in self._config.rules
        ]

    @property
    def rules(self) -> list[HygieneRule]:
        return list(self._config.rules)

    def scan(self, root: Path | str) -> HygieneReport:
        """Scan the configured source directory under a project root.

        Args:
            root: Project root

        Returns:
            HygieneReport with all findings; empty if the source directory is absent
        """
        root = Path(root)
        src = root / self._config.src_dir
        findings: list[HygieneFinding] = []
        files_scanned = 0

        if not src.is_dir():
            logger.debug(f"No source directory at {src}")
            return HygieneReport(rules=self.rules)

        for path in self._source_files(src):
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Skipping unreadable file {path}: {e}")
                continue

            files_scanned += 1
            relative = path.relative_to(root).as_posix()
            findings.extend(self.scan_text(text, relative))

        logger.debug(f"Scanned {files_scanned} files, {len(findings)} findings")
        return HygieneReport(rules=self.rules, files_scanned=files_scanned, findings=findings)

    def scan_text(self, text: str, path: str) -> list[HygieneFinding]:
        """Match every rule against each line of a single file."""
        findings = []
        for number, line in enumerate(text.splitlines(), start=1):
            for rule, regex in self._compiled:
                if rule.exclude and rule.exclude in line:
                    continue
                if regex.search(line):
                    findings.append(
                        HygieneFinding(
                            rule_id=rule.id,
                            severity=rule.severity,
                            path=path,
                            line=number,
                            text=line.strip(),
                        )
                    )
        return findings

    def _source_files(self, src: Path) -> list[Path]:
        extensions = tuple(self._config.extensions)
        return sorted(
            p for p in src.rglob("*") if p.is_file() and p.name.endswith(extensions)
        )
