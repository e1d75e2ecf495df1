from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path manipulation and filesystem validation
utilities. Every helper here is lexical unless stated otherwise: symlinks
are never resolved, so containment decisions match what path joining
produced.
"""

import os
from typing import Optional

from filez_mcp.domain.errors import ConfigurationError

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def lexical_abspath(path: str) -> str:
    """
    Compute the absolute form of a path without following symlinks.

    Raises:
        OSError: If the current working directory cannot be determined.
        ValueError: If the path contains an embedded NUL byte.
    """
    if "\x00" in path:
        raise ValueError("embedded null byte in path")
    return os.path.abspath(path)


def to_slash(path: str) -> str:
    """Convert host separators to forward slashes."""
    if os.sep != "/":
        path = path.replace(os.sep, "/")
    if os.altsep and os.altsep != "/":
        path = path.replace(os.altsep, "/")
    return path

# -----------------------------------------------------------------------------
# CONTAINMENT API
# -----------------------------------------------------------------------------

def is_within_root(abs_root: str, abs_target: str) -> bool:
    """
    Check whether a target lies at or below a root, segment by segment.

    Both arguments must already be absolute and normalized. A sibling such
    as '/tmp/root2' is never considered inside '/tmp/root'.

    Args:
        abs_root: Absolute root directory.
        abs_target: Absolute candidate path.

    Returns:
        bool: True if the target equals the root or descends from it.
    """
    root = os.path.normcase(abs_root)
    target = os.path.normcase(abs_target)
    if root == target:
        return True
    try:
        return os.path.commonpath([root, target]) == root
    except ValueError:
        # Different drives on Windows
        return False


def find_symlinked_parent(abs_root: str, abs_target: str) -> Optional[str]:
    """
    Return the first intermediate component below the root that is a symlink.

    The root itself and the final component are not inspected: the root is
    trusted configuration and a final symlink is listed, never followed.
    Components that do not exist end the scan.

    Args:
        abs_root: Absolute root directory.
        abs_target: Absolute path already known to lie within the root.

    Returns:
        Optional[str]: Offending component path, or None.
    """
    rel = os.path.relpath(abs_target, abs_root)
    if rel == os.curdir:
        return None

    current = abs_root
    for part in rel.split(os.sep)[:-1]:
        current = os.path.join(current, part)
        if os.path.islink(current):
            return current
        if not os.path.lexists(current):
            return None
    return None

# -----------------------------------------------------------------------------
# FILESYSTEM VALIDATION API
# -----------------------------------------------------------------------------

def validate_root_directory(path: str) -> str:
    """
    Ensure the configured root exists and is a directory.

    Args:
        path: Candidate root directory.

    Returns:
        str: Absolute, normalized root directory.

    Raises:
        ConfigurationError: If the root is empty, missing or not a directory.
    """
    if not path or not path.strip():
        raise ConfigurationError("Root directory is not configured")

    try:
        abs_root = lexical_abspath(path)
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Cannot resolve root directory '{path}': {e}") from e

    if not os.path.exists(abs_root):
        raise ConfigurationError(f"Root directory '{path}' does not exist")
    if not os.path.isdir(abs_root):
        raise ConfigurationError(f"Root directory '{path}' is not a directory")

    return abs_root
