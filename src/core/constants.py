"""Core constants used across workspace utility modules.

This module centralizes task names, remote URLs and output paths.
Keeping values here avoids magic literals in task actions.
"""

from __future__ import annotations

from pathlib import Path

TASK_SYNC_GLOBAL_TYPES = "sync:globalTypes"
TASK_SYNC_IMPORT_MAP = "sync:importMap"
TASK_BUILD = "build"
SUPPORTED_TASKS = (TASK_SYNC_GLOBAL_TYPES, TASK_SYNC_IMPORT_MAP, TASK_BUILD)

DEFAULT_WORKSPACE_ROOT = Path(".")
GLOBAL_TYPES_URL = (
    "https://raw.githubusercontent.com/SillyTavern/SillyTavern/release/public/global.d.ts"
)
SILLYTAVERN_SCRIPT_URL = (
    "https://raw.githubusercontent.com/SillyTavern/SillyTavern/release/public/script.js"
)
GLOBAL_TYPES_OUTPUT_PATH = Path("types") / "sillytavern_global.d.ts"
IMPORT_MAP_OUTPUT_PATH = Path("import_map.json")
IMPORT_MAP_INDENT = 2
TYPES_FILE_HEADER = (
    "// @ts-nocheck This file is automatically generated by workspace-utils.\n"
    "// deno-lint-ignore-file\n"
)

DEFAULT_ESBUILD_BINARY = "esbuild"
BUILD_ENTRY_POINT = "src/index.ts"
BUILD_OUTFILE = "dist/extension.js"
BUILD_MODULE_FORMAT = "esm"
BUILD_PLATFORM = "browser"
SILLYTAVERN_GLOBAL_SPECIFIER = "sillytavern/global"
SILLYTAVERN_SCRIPT_SPECIFIER = "sillytavern/script"

DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0
TEXT_ENCODING = "utf-8"
