"""CLI command for the sync:importMap task."""

from __future__ import annotations

import sys

from core.config import WorkspaceConfig
from core.errors import WorkspaceError
from sync.import_map import update_import_map


def run_sync_import_map_command(config: WorkspaceConfig) -> int:
    """Rewrite the workspace import map.

    Failures are reported but keep a zero exit code.
    """
    print("Updating import map...")
    try:
        result = update_import_map(config)
    except WorkspaceError as error:
        print(f"Error updating import map: {error}", file=sys.stderr)
        return 0
    print(f"Import map updated successfully: {result.output_path}")
    return 0
