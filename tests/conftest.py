from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared filesystem fixtures used across unit and integration tests.
"""

import os
import sys
from pathlib import Path
from typing import List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

SAMPLE_DIRS: List[str] = [
    "subdir1",
    "subdir1/subsubdir",
    "subdir2",
]
SAMPLE_FILES: List[str] = [
    "file1.txt",
    "subdir1/file2.go",
    "subdir1/subsubdir/file3.json",
    "subdir2/file4.py",
]


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_root(tmp_path: Path) -> Path:
    """
    Create the reference directory structure used by walk tests.

    Structure:
    /root
      file1.txt
      /subdir1
        file2.go
        /subsubdir
          file3.json
      /subdir2
        file4.py
    """
    root = tmp_path / "root"
    root.mkdir()
    for d in SAMPLE_DIRS:
        (root / d).mkdir(parents=True, exist_ok=True)
    for f in SAMPLE_FILES:
        (root / f).write_text("test content", encoding="utf-8")
    return root

