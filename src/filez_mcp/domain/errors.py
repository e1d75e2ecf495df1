from __future__ import annotations

"""
Directory Walk Error Taxonomy.

Defines the exception hierarchy shared by the resolution and traversal
services. Request-level failures derive from WalkError so that boundary
layers (MCP tool, CLI) can translate them with a single except clause,
while ConfigurationError is reserved for fatal startup problems.
"""

# -----------------------------------------------------------------------------
# BASE CLASSES
# -----------------------------------------------------------------------------

class FilezError(Exception):
    """Base exception for every error raised by the filez_mcp package."""


class ConfigurationError(FilezError):
    """
    Raised when the configured root directory is missing or not a directory.

    Fatal at startup: the server must not begin serving requests.
    """


class WalkError(FilezError):
    """Base class for request-level failures of a single walk invocation."""

# -----------------------------------------------------------------------------
# RESOLUTION FAILURES
# -----------------------------------------------------------------------------

class PathOutsideRoot(WalkError):
    """Raised when a requested path resolves outside the configured root."""

    def __init__(self, requested_path: str) -> None:
        super().__init__("path is outside of allowed root directory")
        self.requested_path = requested_path


class PathNotFound(WalkError):
    """Raised when the resolved target does not exist on the filesystem."""

    def __init__(self, target_path: str) -> None:
        super().__init__(f"path does not exist: {target_path}")
        self.target_path = target_path


class ResolutionError(WalkError):
    """Raised when the absolute form of the target cannot be computed."""

# -----------------------------------------------------------------------------
# TRAVERSAL FAILURES
# -----------------------------------------------------------------------------

class WalkRootUnreadable(WalkError):
    """Raised when the walk cannot stat or open its starting entry."""


class RootVanished(WalkError):
    """Raised when the starting entry disappeared before traversal began."""


class WalkCancelled(WalkError):
    """Raised when a cancellation hook requested an early abort of the walk."""
