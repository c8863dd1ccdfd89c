"""Shared test fixtures for modulith-audit tests."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

import pytest

from modulith_audit.core.project import MemoryProjectView

VARIANT_STORE = """import { create } from 'zustand';

export interface UIState {
  mode: 'classic' | 'minimal' | 'hardware' | 'neuro' | 'satellite' | 'transceiver' | 'groundstation' | 'funkcore';
}
"""

PACKAGE_JSON = """{
  "name": "modulith-certivox",
  "version": "1.0.0",
  "scripts": {
    "dev": "next dev",
    "build": "next build",
    "lint": "next lint"
  }
}
"""


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """A clock that always returns the same instant."""
    instant = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
    return lambda: instant


@pytest.fixture
def project_files() -> dict[str, str]:
    """Files of a project that passes every default check."""
    files = {
        "src/components/variants/ClassicUI.tsx": "export default function ClassicUI() {}",
        "src/components/variants/MinimalUI.tsx": "export default function MinimalUI() {}",
        "src/components/variants/HardwareUI.tsx": "export default function HardwareUI() {}",
        "src/components/variants/NeuroUI.tsx": "export default function NeuroUI() {}",
        "src/components/variants/SatelliteUI.tsx": "export default function SatelliteUI() {}",
        "src/components/variants/TransceiverUI.tsx": "export default function TransceiverUI() {}",
        "src/components/variants/GroundstationUI.tsx": "export default function GroundstationUI() {}",
        # Second recognized suffix
        "src/components/variants/Funkcore.tsx": "export default function Funkcore() {}",
        "src/stores/uiStore.ts": VARIANT_STORE,
        "tailwind.config.js": "module.exports = {\n  theme: {\n    extend: {},\n  },\n};\n",
        ".env.local": "NEXT_PUBLIC_UI_MODE=classic\nNEXT_PUBLIC_THEME=dark\n",
        "src/lib/logger.ts": (
            "export const rfLogger = {\n  info: () => {},\n  debug: () => {},\n"
            "  warn: () => {},\n  error: () => {},\n};\n"
        ),
        "src/lib/rfCore.ts": (
            "export const FREQUENCY_BANDS = {};\n"
            "export const detectHardware = async () => 'Unknown';\n"
        ),
        "package.json": PACKAGE_JSON,
        "next.config.js": "module.exports = {\n  output: 'export',\n};\n",
        "public/favicon.ico": "",
        "public/logo.svg": "<svg></svg>",
        "public/manifest.json": "{}",
    }
    return files


@pytest.fixture
def memory_project(project_files: dict[str, str]) -> MemoryProjectView:
    """An in-memory project that passes every default check."""
    return MemoryProjectView(project_files)


@pytest.fixture
def write_project(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Factory writing a file mapping below tmp_path and returning the root."""

    def _write(files: dict[str, str]) -> Path:
        root = tmp_path / "project"
        root.mkdir(exist_ok=True)
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return _write


@pytest.fixture
def local_project(write_project, project_files: dict[str, str]) -> Path:
    """A project directory on disk that passes every default check."""
    return write_project(project_files)
