from __future__ import annotations

"""
Directory Traversal Service.

Performs a depth-first, pre-order walk of a validated path. A directory is
reported before its children and siblings are visited in ascending name
order, so two walks of an unchanged tree yield identical sequences.

Per-entry failures (permission denied, entries removed mid-walk, a failing
visitor hook) are recorded as SkippedEntry diagnostics and never abort the
walk. Only failing to start at the root is fatal for the call.

Symbolic links are reported as entries but never followed.
"""

import logging
import os
import stat
from typing import Callable, Iterator, List, Optional

from filez_mcp.domain.errors import RootVanished, WalkCancelled, WalkRootUnreadable
from filez_mcp.domain.walk_models import SkippedEntry, WalkResult
from filez_mcp.infra.fs import lexical_abspath, to_slash

logger = logging.getLogger(__name__)

EntryVisitor = Callable[[str], None]
StopCheck = Callable[[], bool]


# ==============================================================================
# PUBLIC API
# ==============================================================================

class TreeWalker:
    """
    Stateless recursive lister.

    Args:
        visitor: Optional hook invoked with each normalized path before it is
                 recorded. An exception raised by the hook skips that entry.
        should_stop: Optional cancellation check polled between entries.
    """

    def __init__(
            self,
            visitor: Optional[EntryVisitor] = None,
            should_stop: Optional[StopCheck] = None,
    ) -> None:
        self._visitor = visitor
        self._should_stop = should_stop

    def walk(self, resolved_path: str) -> WalkResult:
        """
        List the entry at resolved_path and everything beneath it.

        Args:
            resolved_path: Absolute path already validated by PathResolver.

        Returns:
            WalkResult: Visited paths plus diagnostics for skipped entries.

        Raises:
            RootVanished: The starting entry no longer exists.
            WalkRootUnreadable: The starting entry cannot be stat'ed or listed.
            WalkCancelled: The cancellation check requested an abort.
        """
        root_path = self._start_path(resolved_path)
        root_stat = self._stat_root(root_path)

        paths: List[str] = []
        skipped: List[SkippedEntry] = []

        self._visit(root_path, paths, skipped)
        if not paths:
            raise WalkRootUnreadable(f"failed to walk directory: cannot visit {to_slash(root_path)}")

        # Regular files and symlinks are reported alone
        if stat.S_ISDIR(root_stat.st_mode):
            self._walk_children(root_path, paths, skipped)

        if skipped:
            logger.info(f"Walk of {to_slash(root_path)} finished with {len(skipped)} skipped entries")
        logger.debug(f"Walk of {to_slash(root_path)} produced {len(paths)} entries")

        return WalkResult(root=to_slash(root_path), paths=paths, skipped=skipped)

    # ==========================================================================
    # TRAVERSAL
    # ==========================================================================

    def _walk_children(self, root_path: str, paths: List[str], skipped: List[SkippedEntry]) -> None:
        """Iterative pre-order descent below an already visited root directory."""
        try:
            stack: List[Iterator[os.DirEntry]] = [iter(_sorted_entries(root_path))]
        except FileNotFoundError as e:
            raise RootVanished(f"root directory disappeared before traversal: {e}") from e
        except OSError as e:
            raise WalkRootUnreadable(f"failed to walk directory: {e}") from e

        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue

            self._check_cancelled()

            try:
                descend = entry.is_dir(follow_symlinks=False)
            except OSError as e:
                self._skip(entry.path, e, skipped)
                continue

            if not self._visit(entry.path, paths, skipped):
                continue

            if not descend:
                continue

            try:
                stack.append(iter(_sorted_entries(entry.path)))
            except OSError as e:
                self._skip(entry.path, e, skipped)

    def _visit(self, path: str, paths: List[str], skipped: List[SkippedEntry]) -> bool:
        """
        Normalize and record a single entry.

        Returns:
            bool: False if the entry was skipped.
        """
        try:
            normalized = to_slash(lexical_abspath(path))
            if self._visitor is not None:
                self._visitor(normalized)
        except Exception as e:
            self._skip(path, e, skipped)
            return False

        paths.append(normalized)
        return True

    # ==========================================================================
    # PRIVATE HELPERS
    # ==========================================================================

    @staticmethod
    def _start_path(resolved_path: str) -> str:
        try:
            return lexical_abspath(resolved_path)
        except (OSError, ValueError) as e:
            raise WalkRootUnreadable(f"failed to resolve walk root: {e}") from e

    @staticmethod
    def _stat_root(root_path: str) -> os.stat_result:
        try:
            return os.lstat(root_path)
        except FileNotFoundError as e:
            raise RootVanished(f"path vanished before traversal: {to_slash(root_path)}") from e
        except OSError as e:
            raise WalkRootUnreadable(f"failed to walk directory: {e}") from e

    def _check_cancelled(self) -> None:
        if self._should_stop is not None and self._should_stop():
            raise WalkCancelled("walk cancelled before completion")

    @staticmethod
    def _skip(path: str, error: BaseException, skipped: List[SkippedEntry]) -> None:
        logger.warning(f"Error accessing {path}: {error}")
        skipped.append(SkippedEntry(path=to_slash(path), error=str(error)))


def _sorted_entries(directory: str) -> List[os.DirEntry]:
    """Materialize a directory listing sorted by entry name."""
    with os.scandir(directory) as it:
        return sorted(it, key=lambda e: e.name)


def walk(resolved_path: str) -> WalkResult:
    """Functional shortcut for TreeWalker().walk(resolved_path)."""
    return TreeWalker().walk(resolved_path)
