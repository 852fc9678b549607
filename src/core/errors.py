"""Workspace utility exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each task action raises a specific error type for debuggability.
"""

from __future__ import annotations


class WorkspaceError(Exception):
    """Base exception for all workspace utility failures."""


class WorkspaceConfigError(WorkspaceError):
    """Raised for invalid runtime configuration."""


class WorkspaceTaskError(WorkspaceError):
    """Raised for a missing or unknown task name."""


class WorkspaceFetchError(WorkspaceError):
    """Raised when a remote document cannot be fetched."""


class WorkspaceWriteError(WorkspaceError):
    """Raised when an output file cannot be written."""


class WorkspaceBuildError(WorkspaceError):
    """Raised when the bundler is missing or reports a failure."""
