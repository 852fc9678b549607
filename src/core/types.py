"""Shared typed models.

This module defines immutable data models used by the sync and
bundle actions to keep task inputs explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import re

from core.constants import BUILD_MODULE_FORMAT, BUILD_PLATFORM


@dataclass(frozen=True)
class TransformationRule:
    """Ordered text fixup applied to a fetched declaration file.

    Attributes:
        pattern: Compiled expression substituted globally.
        replacement: Literal replacement text.
    """

    pattern: re.Pattern[str]
    replacement: str

    def apply(self, content: str) -> str:
        """Replace every match of the rule pattern in content."""
        return self.pattern.sub(lambda _match: self.replacement, content)


@dataclass(frozen=True)
class BuildConfig:
    """Bundler invocation settings.

    Attributes:
        entry_point: Entry module path relative to the workspace root.
        outfile: Bundle output path relative to the workspace root.
        bundle: Whether imports are inlined into the output.
        module_format: Output module format.
        platform: Target platform.
        sourcemap: Whether a companion source map is emitted.
        external: Specifiers left unresolved for the host to provide.
    """

    entry_point: str
    outfile: str
    bundle: bool = True
    module_format: str = BUILD_MODULE_FORMAT
    platform: str = BUILD_PLATFORM
    sourcemap: bool = True
    external: tuple[str, ...] = ()


@dataclass(frozen=True)
class SyncResult:
    """Outcome of a file-producing sync action.

    Attributes:
        output_path: Absolute path of the written file.
        byte_count: Number of bytes written.
    """

    output_path: Path
    byte_count: int
