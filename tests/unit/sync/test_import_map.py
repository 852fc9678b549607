"""Unit tests for the import map sync action."""

from __future__ import annotations

from dataclasses import replace
import json
from pathlib import Path

from core.config import WorkspaceConfig
from core.constants import IMPORT_MAP_OUTPUT_PATH
from sync.import_map import render_import_map, update_import_map

EXPECTED_IMPORTS = {
    "react": "https://esm.sh/react@18.3.1",
    "react/jsx-runtime": "https://esm.sh/react@18.3.1/jsx-runtime",
    "react-dom": "https://esm.sh/react-dom",
    "react-dom/client": "https://esm.sh/react-dom/client",
    "jquery": "https://esm.sh/jquery@latest",
    "sillytavern/global": "./types/sillytavern_global.d.ts",
    "sillytavern/script": (
        "https://raw.githubusercontent.com/SillyTavern/SillyTavern/release/public/script.js"
    ),
}


def _config(workspace_root: Path) -> WorkspaceConfig:
    return replace(WorkspaceConfig.from_env(), workspace_root=workspace_root)


def test_update_import_map_writes_fixed_table(tmp_path: Path) -> None:
    """Written import map should hold exactly the fixed specifier table."""
    result = update_import_map(_config(tmp_path))
    payload = json.loads(result.output_path.read_text(encoding="utf-8"))

    assert list(payload) == ["imports"] and payload["imports"] == EXPECTED_IMPORTS


def test_render_import_map_uses_two_space_indent() -> None:
    """Rendered JSON should be pretty-printed with two spaces."""
    lines = render_import_map().splitlines()

    assert lines[0] == "{" and lines[1] == '  "imports": {'
    assert lines[2] == '    "react": "https://esm.sh/react@18.3.1",'


def test_update_import_map_overwrites_and_is_idempotent(tmp_path: Path) -> None:
    """Repeated runs should replace stale content with identical bytes."""
    output_path = tmp_path / IMPORT_MAP_OUTPUT_PATH
    output_path.write_text('{"imports": {"stale": "./old.js"}}', encoding="utf-8")

    update_import_map(_config(tmp_path))
    first = output_path.read_bytes()
    update_import_map(_config(tmp_path))

    assert output_path.read_bytes() == first and b"stale" not in first
