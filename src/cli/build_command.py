"""CLI command for the build task."""

from __future__ import annotations

import sys

from bundle.esbuild_runner import build_extension
from core.config import WorkspaceConfig
from core.errors import WorkspaceBuildError


def run_build_command(config: WorkspaceConfig) -> int:
    """Bundle the extension; a failed build exits with status 1."""
    print("Building the project with esbuild...")
    try:
        output_path = build_extension(config)
    except WorkspaceBuildError as error:
        print(f"Build failed: {error}", file=sys.stderr)
        return 1
    print(f"Build succeeded: {output_path}")
    return 0
