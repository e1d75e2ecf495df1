from __future__ import annotations

"""
Directory Walk Service.

Composes PathResolver and TreeWalker behind the single operation exposed
to external collaborators. The service owns nothing but the immutable
root directory, so one instance can serve concurrent requests.
"""

import logging
import os
from typing import List, Optional

from filez_mcp.core.services.resolver import ROOT_ALIAS, PathResolver
from filez_mcp.core.services.walker import StopCheck, TreeWalker
from filez_mcp.domain.errors import RootVanished
from filez_mcp.domain.walk_models import WalkResult
from filez_mcp.infra.fs import validate_root_directory

logger = logging.getLogger(__name__)


class DirectoryWalkService:
    """
    Sandboxed recursive listing rooted at a configured directory.

    Args:
        root_directory: Traversal boundary. Must exist as a directory.

    Raises:
        ConfigurationError: If the root is missing or not a directory.
    """

    def __init__(self, root_directory: str) -> None:
        self._root_directory = validate_root_directory(root_directory)
        self._resolver = PathResolver(self._root_directory)
        logger.debug(f"Directory walk service rooted at {self._root_directory}")

    @property
    def root_directory(self) -> str:
        return self._root_directory

    def walk_directory(self, path: Optional[str] = ROOT_ALIAS) -> List[str]:
        """
        Recursively list every entry at or below a logical path.

        Args:
            path: Logical path; None, '' and '/' denote the root.

        Returns:
            List[str]: Absolute forward-slash paths in pre-order.

        Raises:
            WalkError: Any request-level failure (outside root, not found,
                       unreadable or vanished root).
        """
        return self.walk(path).paths

    def walk(self, path: Optional[str] = ROOT_ALIAS, should_stop: Optional[StopCheck] = None) -> WalkResult:
        """
        Same as walk_directory but returns the full result with diagnostics.

        Args:
            path: Logical path; None, '' and '/' denote the root.
            should_stop: Optional cancellation check polled between entries.

        Returns:
            WalkResult: Visited paths and skipped entries.
        """
        self._ensure_root_present()
        resolved = self._resolver.resolve(path or ROOT_ALIAS)
        return TreeWalker(should_stop=should_stop).walk(resolved)

    def _ensure_root_present(self) -> None:
        """Fail closed if the root was removed after startup."""
        if not os.path.isdir(self._root_directory):
            raise RootVanished(f"root directory no longer exists: {self._root_directory}")
