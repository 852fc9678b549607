"""Build action backed by the esbuild CLI.

This module turns a build config into an esbuild command line and
runs it inside the workspace root. Failures surface esbuild's own
diagnostics.
"""

from __future__ import annotations

from pathlib import Path
import subprocess

from core.config import WorkspaceConfig
from core.constants import (
    BUILD_ENTRY_POINT,
    BUILD_OUTFILE,
    SILLYTAVERN_GLOBAL_SPECIFIER,
    SILLYTAVERN_SCRIPT_SPECIFIER,
)
from core.errors import WorkspaceBuildError
from core.logging_config import get_logger
from core.types import BuildConfig

logger = get_logger(__name__)

DEFAULT_BUILD_CONFIG = BuildConfig(
    entry_point=BUILD_ENTRY_POINT,
    outfile=BUILD_OUTFILE,
    external=(SILLYTAVERN_GLOBAL_SPECIFIER, SILLYTAVERN_SCRIPT_SPECIFIER),
)


def build_esbuild_command(esbuild_binary: str, build_config: BuildConfig) -> list[str]:
    """Translate a build config into esbuild CLI arguments.

    Args:
        esbuild_binary: Executable name or path.
        build_config: Bundler settings.

    Returns:
        Argument vector for ``subprocess.run``.
    """
    command = [esbuild_binary, build_config.entry_point]
    if build_config.bundle:
        command.append("--bundle")
    command.extend(
        [
            f"--outfile={build_config.outfile}",
            f"--format={build_config.module_format}",
            f"--platform={build_config.platform}",
        ]
    )
    if build_config.sourcemap:
        command.append("--sourcemap")
    command.extend(f"--external:{specifier}" for specifier in build_config.external)
    return command


def build_extension(
    config: WorkspaceConfig,
    build_config: BuildConfig = DEFAULT_BUILD_CONFIG,
) -> Path:
    """Bundle the extension with esbuild.

    Args:
        config: Runtime configuration.
        build_config: Bundler settings.

    Returns:
        Absolute path of the written bundle.

    Raises:
        WorkspaceBuildError: If esbuild cannot be started or exits with an error.
    """
    command = build_esbuild_command(config.esbuild_binary, build_config)
    logger.info("build_started", command=command, cwd=str(config.workspace_root))
    try:
        completed = subprocess.run(
            command,
            cwd=config.workspace_root,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as error:
        logger.error("build_failed", error=str(error))
        raise WorkspaceBuildError(
            f"Could not run esbuild '{config.esbuild_binary}': {error}. "
            "Install esbuild or set ST_WORKSPACE_ESBUILD_BIN."
        ) from error
    if completed.returncode != 0:
        diagnostics = (completed.stderr or completed.stdout or "").strip()
        logger.error("build_failed", exit_code=completed.returncode, diagnostics=diagnostics)
        raise WorkspaceBuildError(
            f"esbuild exited with status {completed.returncode}: {diagnostics}"
        )
    output_path = config.workspace_root / build_config.outfile
    logger.info("build_succeeded", outfile=str(output_path))
    return output_path
