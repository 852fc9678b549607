"""Import-Map-Sync action.

This module writes the static import map the Deno toolchain uses to
resolve bare specifiers. The table is fixed; URLs are not checked.
"""

from __future__ import annotations

import json
from types import MappingProxyType
from typing import Mapping

from core.config import WorkspaceConfig
from core.constants import (
    GLOBAL_TYPES_OUTPUT_PATH,
    IMPORT_MAP_INDENT,
    IMPORT_MAP_OUTPUT_PATH,
    SILLYTAVERN_GLOBAL_SPECIFIER,
    SILLYTAVERN_SCRIPT_SPECIFIER,
    SILLYTAVERN_SCRIPT_URL,
)
from core.types import SyncResult
from sync.file_io import write_text_file

IMPORT_MAP_ENTRIES: Mapping[str, str] = MappingProxyType(
    {
        "react": "https://esm.sh/react@18.3.1",
        "react/jsx-runtime": "https://esm.sh/react@18.3.1/jsx-runtime",
        "react-dom": "https://esm.sh/react-dom",
        "react-dom/client": "https://esm.sh/react-dom/client",
        "jquery": "https://esm.sh/jquery@latest",
        SILLYTAVERN_GLOBAL_SPECIFIER: f"./{GLOBAL_TYPES_OUTPUT_PATH.as_posix()}",
        SILLYTAVERN_SCRIPT_SPECIFIER: SILLYTAVERN_SCRIPT_URL,
    }
)


def render_import_map(entries: Mapping[str, str] = IMPORT_MAP_ENTRIES) -> str:
    """Render the import map document.

    Args:
        entries: Specifier to URL or path mapping.

    Returns:
        JSON text with a single ``imports`` key.
    """
    return json.dumps({"imports": dict(entries)}, indent=IMPORT_MAP_INDENT)


def update_import_map(config: WorkspaceConfig) -> SyncResult:
    """Write the import map into the workspace root.

    Args:
        config: Runtime configuration.

    Returns:
        Written file details.

    Raises:
        WorkspaceWriteError: If the output file cannot be written.
    """
    output_path = config.workspace_root / IMPORT_MAP_OUTPUT_PATH
    return write_text_file(output_path, render_import_map())
