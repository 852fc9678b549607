"""Type-Sync action for the SillyTavern global declarations.

This module downloads the upstream declaration file, patches it
for Deno and writes it into the workspace types directory.
"""

from __future__ import annotations

import requests

from core.config import WorkspaceConfig
from core.constants import GLOBAL_TYPES_OUTPUT_PATH
from core.errors import WorkspaceFetchError
from core.logging_config import get_logger
from core.types import SyncResult
from sync.file_io import write_text_file
from sync.type_transforms import prepare_global_types

logger = get_logger(__name__)


def fetch_global_types(url: str, timeout_seconds: float) -> str:
    """Download the upstream declaration text.

    Args:
        url: Remote declaration URL.
        timeout_seconds: Request timeout.

    Returns:
        Response body text.

    Raises:
        WorkspaceFetchError: If the host is unreachable or the status is not a success.
    """
    logger.info("global_types_fetch_started", url=url)
    try:
        response = requests.get(url, timeout=timeout_seconds)
    except requests.RequestException as error:
        raise WorkspaceFetchError(f"Failed to fetch global types from {url}: {error}") from error
    if not response.ok:
        raise WorkspaceFetchError(
            f"Failed to fetch global types: {response.status_code} {response.reason}"
        )
    logger.info("global_types_fetched", url=url, status=response.status_code)
    return response.text


def update_global_types(config: WorkspaceConfig) -> SyncResult:
    """Fetch, patch and write the workspace global declaration file.

    Args:
        config: Runtime configuration.

    Returns:
        Written file details.

    Raises:
        WorkspaceFetchError: If the download fails. Nothing is written.
        WorkspaceWriteError: If the output file cannot be written.
    """
    upstream_text = fetch_global_types(config.global_types_url, config.http_timeout_seconds)
    content = prepare_global_types(upstream_text)
    output_path = config.workspace_root / GLOBAL_TYPES_OUTPUT_PATH
    return write_text_file(output_path, content)
