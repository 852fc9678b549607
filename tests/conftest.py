"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

WORKSPACE_ENV_VARS = (
    "ST_WORKSPACE_ROOT",
    "ST_WORKSPACE_TYPES_URL",
    "ST_WORKSPACE_ESBUILD_BIN",
    "ST_WORKSPACE_HTTP_TIMEOUT",
)


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _isolate_workspace_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer ST_WORKSPACE_* settings out of test runs."""
    for name in WORKSPACE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
