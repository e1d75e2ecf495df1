from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script via subprocess and validates exit codes and
stream output of the one-shot walk mode and startup validation.
"""

import os
import subprocess
import sys
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "filez_mcp" / "main.py"


def run_cli(args: List[str]) -> subprocess.CompletedProcess[str]:
    """Execute the CLI in a separate process with 'src' on PYTHONPATH."""
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    return subprocess.run(
        [sys.executable, str(ENTRY_POINT)] + args,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
        timeout=60,
    )


def test_missing_root_argument_is_usage_error() -> None:
    result = run_cli([])
    assert result.returncode == 2
    assert "usage" in result.stderr.lower()


def test_nonexistent_root_is_fatal(tmp_path: Path) -> None:
    result = run_cli([str(tmp_path / "missing")])
    assert result.returncode == 1
    assert "does not exist" in result.stderr


def test_walk_once_stdout_is_clean(sample_root: Path) -> None:
    """Logs go to stderr; stdout carries only the listing."""
    result = run_cli(["--debug", "--walk", "/", str(sample_root)])

    assert result.returncode == 0, result.stderr
    lines = result.stdout.splitlines()
    assert len(lines) == 8
    assert all(line.startswith("/") or ":/" in line for line in lines)
    assert all("\\" not in line for line in lines)


def test_walk_once_nonexistent(sample_root: Path) -> None:
    result = run_cli(["--walk", "/nonexistent", str(sample_root)])
    assert result.returncode == 1
    assert "path does not exist" in result.stderr
    assert result.stdout == ""
