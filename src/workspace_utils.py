"""Public surface for the workspace utilities.

This module provides a stable import path for scripted use.
It re-exports the task actions and their typed models.
"""

from __future__ import annotations

from bundle.esbuild_runner import DEFAULT_BUILD_CONFIG, build_esbuild_command, build_extension
from core.config import WorkspaceConfig
from core.constants import SUPPORTED_TASKS
from core.types import BuildConfig, SyncResult, TransformationRule
from sync.global_types import fetch_global_types, update_global_types
from sync.import_map import IMPORT_MAP_ENTRIES, render_import_map, update_import_map
from sync.type_transforms import GLOBAL_TYPE_TRANSFORMATIONS, fix_global_types

__all__ = [
    "BuildConfig",
    "DEFAULT_BUILD_CONFIG",
    "GLOBAL_TYPE_TRANSFORMATIONS",
    "IMPORT_MAP_ENTRIES",
    "SUPPORTED_TASKS",
    "SyncResult",
    "TransformationRule",
    "WorkspaceConfig",
    "build_esbuild_command",
    "build_extension",
    "fetch_global_types",
    "fix_global_types",
    "render_import_map",
    "update_global_types",
    "update_import_map",
]
