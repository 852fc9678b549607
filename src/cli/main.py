"""Workspace utility CLI entry points.

This module maps a single task name onto one workspace action.
Unknown or missing task names are reported without running anything.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
import sys
from typing import Sequence

from cli.build_command import run_build_command
from cli.sync_global_types_command import run_sync_global_types_command
from cli.sync_import_map_command import run_sync_import_map_command
from core.config import WorkspaceConfig
from core.constants import (
    SUPPORTED_TASKS,
    TASK_BUILD,
    TASK_SYNC_GLOBAL_TYPES,
    TASK_SYNC_IMPORT_MAP,
)
from core.errors import WorkspaceConfigError, WorkspaceTaskError


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="st-workspace",
        description="SillyTavern extension workspace utilities",
    )
    parser.add_argument(
        "task",
        nargs="?",
        help=f"Task to run, one of: {', '.join(SUPPORTED_TASKS)}",
    )
    parser.add_argument(
        "--workspace-root",
        help="Override ST_WORKSPACE_ROOT for this command",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the workspace CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code. Only a failed build returns non-zero.
        Arguments after the task name are ignored.
    """
    parser = build_parser()
    args, extra_args = parser.parse_known_args(argv)
    raw_task = args.task if args.task is not None or not extra_args else extra_args[0]
    try:
        task = resolve_task(raw_task)
    except WorkspaceTaskError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 0
    try:
        config = _build_config(args.workspace_root)
    except WorkspaceConfigError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1 if task == TASK_BUILD else 0
    if task == TASK_SYNC_GLOBAL_TYPES:
        return run_sync_global_types_command(config)
    if task == TASK_SYNC_IMPORT_MAP:
        return run_sync_import_map_command(config)
    return run_build_command(config)


def resolve_task(task: str | None) -> str:
    """Validate a task name.

    Args:
        task: Raw task argument, possibly missing.

    Returns:
        The task name when it is supported.

    Raises:
        WorkspaceTaskError: If the task is missing or unknown.
    """
    available = ", ".join(SUPPORTED_TASKS)
    if not task:
        raise WorkspaceTaskError(
            f"No task provided. Please specify a task to run. Available tasks are: {available}"
        )
    if task not in SUPPORTED_TASKS:
        raise WorkspaceTaskError(f"Unknown task: {task}. Available tasks are: {available}")
    return task


def _build_config(workspace_root: str | None) -> WorkspaceConfig:
    """Build runtime config with optional workspace-root override.

    Args:
        workspace_root: Optional override path.

    Returns:
        Configured runtime config.

    Raises:
        WorkspaceConfigError: If environment values are invalid.
    """
    config = WorkspaceConfig.from_env()
    if workspace_root:
        config = replace(config, workspace_root=Path(workspace_root).expanduser().resolve())
    return config
