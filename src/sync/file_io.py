"""Output file writing shared by sync actions.

Every sync action prepares its full payload in memory first and
writes it in one call, so a failed fetch never leaves a partial file.
"""

from __future__ import annotations

from pathlib import Path

from core.constants import TEXT_ENCODING
from core.errors import WorkspaceWriteError
from core.logging_config import get_logger
from core.types import SyncResult

logger = get_logger(__name__)


def write_text_file(output_path: Path, content: str) -> SyncResult:
    """Write text content to a file, replacing any existing file.

    Args:
        output_path: Destination file path.
        content: Full text payload.

    Returns:
        Written path and byte count.

    Raises:
        WorkspaceWriteError: If the directory or file cannot be written.
    """
    payload = content.encode(TEXT_ENCODING)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(payload)
    except OSError as error:
        logger.error("file_write_failed", path=str(output_path), error=str(error))
        raise WorkspaceWriteError(
            f"Failed to write file {output_path}: {error}. "
            "Check that the workspace directory is writable."
        ) from error
    logger.info("file_written", path=str(output_path), bytes=len(payload))
    return SyncResult(output_path=output_path, byte_count=len(payload))
