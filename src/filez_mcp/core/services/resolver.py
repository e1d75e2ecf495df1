from __future__ import annotations

"""
Request Path Resolution Service.

Maps a caller-supplied logical path (rooted at '/', which stands for the
configured root directory) onto an absolute filesystem path, and refuses
any resolution that would leave the root. Resolution is purely lexical:
'..' segments are collapsed by path joining and symlinks are not followed,
so the containment decision is made on the same path the walker will open.
"""

import logging
import os

from filez_mcp.domain.errors import (
    ConfigurationError,
    PathNotFound,
    PathOutsideRoot,
    ResolutionError,
)
from filez_mcp.infra.fs import find_symlinked_parent, is_within_root, lexical_abspath

logger = logging.getLogger(__name__)

ROOT_ALIAS = "/"


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

class PathResolver:
    """
    Resolve logical request paths against a fixed root directory.

    The root is injected at construction and never mutated, so a single
    instance can serve concurrent requests.
    """

    def __init__(self, root_directory: str) -> None:
        self._root_directory = root_directory

    @property
    def root_directory(self) -> str:
        return self._root_directory

    def resolve(self, requested_path: str = ROOT_ALIAS) -> str:
        """
        Translate a logical path into a validated absolute path.

        Args:
            requested_path: Path relative to the root; '' and '/' denote the
                            root itself. A single leading '/' is ignored.

        Returns:
            str: Absolute target path, guaranteed to lie inside the root.

        Raises:
            ConfigurationError: The root is missing or not a directory.
            ResolutionError: An absolute form could not be computed.
            PathOutsideRoot: The target escapes the root.
            PathNotFound: The target does not exist.
        """
        target = self._join(requested_path or "")

        try:
            abs_target = lexical_abspath(target)
        except (OSError, ValueError) as e:
            raise ResolutionError(f"failed to resolve absolute path: {e}") from e

        try:
            abs_root = lexical_abspath(self._root_directory)
        except (OSError, ValueError) as e:
            raise ResolutionError(f"failed to resolve root directory: {e}") from e

        if not os.path.isdir(abs_root):
            raise ConfigurationError(f"Root directory '{self._root_directory}' is not an existing directory")

        if not is_within_root(abs_root, abs_target):
            logger.warning(f"Rejected path outside root: {requested_path!r}")
            raise PathOutsideRoot(requested_path)

        link = find_symlinked_parent(abs_root, abs_target)
        if link is not None:
            logger.warning(f"Rejected path through symlink {link}: {requested_path!r}")
            raise PathOutsideRoot(requested_path)

        if not os.path.exists(abs_target):
            raise PathNotFound(target)

        logger.debug(f"Resolved {requested_path!r} -> {abs_target}")
        return abs_target

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _join(self, requested_path: str) -> str:
        """Join the logical path onto the root, honouring the root alias."""
        if requested_path in ("", ROOT_ALIAS):
            return self._root_directory

        relative = requested_path[1:] if requested_path.startswith("/") else requested_path
        # A remainder that still starts with "/" stays under the root
        return os.path.normpath(self._root_directory + os.sep + relative)


def resolve(root_directory: str, requested_path: str = ROOT_ALIAS) -> str:
    """Functional shortcut for PathResolver(root_directory).resolve(requested_path)."""
    return PathResolver(root_directory).resolve(requested_path)
