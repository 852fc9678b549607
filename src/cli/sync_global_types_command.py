"""CLI command for the sync:globalTypes task."""

from __future__ import annotations

import sys

from core.config import WorkspaceConfig
from core.errors import WorkspaceError
from sync.global_types import update_global_types


def run_sync_global_types_command(config: WorkspaceConfig) -> int:
    """Refresh the global declaration file.

    Failures are reported but keep a zero exit code.
    """
    print("Fetching the latest type definitions from SillyTavern...")
    try:
        result = update_global_types(config)
    except WorkspaceError as error:
        print(f"Error updating type definitions: {error}", file=sys.stderr)
        return 0
    print(f"Updated type definition file saved at {result.output_path}")
    return 0
