from __future__ import annotations

"""
Walk Domain Data Models.

Defines the Data Transfer Objects exchanged between the traversal service
and the interface layers (MCP tool and CLI).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

# -----------------------------------------------------------------------------
# DIAGNOSTIC MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SkippedEntry:
    """
    Encapsulates an entry the walker could not read and therefore skipped.

    Attributes:
        path: Forward-slash absolute path of the unreadable entry.
        error: Descriptive exception or error message.
    """
    path: str
    error: str

# -----------------------------------------------------------------------------
# RESULT MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class WalkResult:
    """
    Outcome of a successful traversal.

    Attributes:
        root: Forward-slash absolute path the walk started from.
        paths: Visited entries in pre-order, siblings sorted by name.
        skipped: Entries tolerated under the partial-failure policy.
    """
    root: str
    paths: List[str] = field(default_factory=list)
    skipped: List[SkippedEntry] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when no entry had to be skipped."""
        return not self.skipped

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the result for JSON rendering."""
        return {
            "root": self.root,
            "paths": list(self.paths),
            "skipped": [{"path": s.path, "error": s.error} for s in self.skipped],
        }
