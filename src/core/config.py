"""Runtime configuration model for workspace utilities.

This module owns all environment variable parsing and validation.
Task actions consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_ESBUILD_BINARY,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    DEFAULT_WORKSPACE_ROOT,
    GLOBAL_TYPES_URL,
)
from core.errors import WorkspaceConfigError


@dataclass(frozen=True)
class WorkspaceConfig:
    """Validated runtime configuration.

    Attributes:
        workspace_root: Extension workspace directory all outputs resolve against.
        global_types_url: Remote URL of the upstream global declaration file.
        esbuild_binary: Executable name or path used for builds.
        http_timeout_seconds: Timeout applied to the declaration download.
    """

    workspace_root: Path
    global_types_url: str
    esbuild_binary: str
    http_timeout_seconds: float

    @classmethod
    def from_env(cls) -> "WorkspaceConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            WorkspaceConfigError: If environment values are invalid.
        """
        workspace_root_value = os.getenv("ST_WORKSPACE_ROOT", str(DEFAULT_WORKSPACE_ROOT))
        global_types_url = os.getenv("ST_WORKSPACE_TYPES_URL", GLOBAL_TYPES_URL)
        esbuild_binary = os.getenv("ST_WORKSPACE_ESBUILD_BIN", DEFAULT_ESBUILD_BINARY)
        timeout_value = os.getenv("ST_WORKSPACE_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT_SECONDS))
        return cls(
            workspace_root=Path(workspace_root_value).expanduser().resolve(),
            global_types_url=global_types_url,
            esbuild_binary=esbuild_binary,
            http_timeout_seconds=_parse_http_timeout(timeout_value),
        )


def _parse_http_timeout(raw_value: str) -> float:
    """Parse the HTTP timeout environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed positive timeout in seconds.

    Raises:
        WorkspaceConfigError: If value is not a positive number.
    """
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise WorkspaceConfigError(
            "Invalid ST_WORKSPACE_HTTP_TIMEOUT value: "
            f"expected number of seconds, got '{raw_value}'. "
            "Set ST_WORKSPACE_HTTP_TIMEOUT to a numeric value."
        ) from error
    if timeout <= 0:
        raise WorkspaceConfigError(
            "Invalid ST_WORKSPACE_HTTP_TIMEOUT value: "
            f"expected a positive number, got '{raw_value}'."
        )
    return timeout
