from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. Required positional root directory.
3. One-shot walk options.
"""

import pytest

from filez_mcp.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    return build_parser().parse_args(arg_list)


def test_root_is_required(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        parse_args([])
    assert exc.value.code == 2
    assert "root_directory" in capsys.readouterr().err


def test_stdio_flag_mapping() -> None:
    overrides = args_to_overrides(parse_args(["-s", "/srv/data"]))

    assert overrides["root_directory"] == "/srv/data"
    assert overrides["use_stdio"] is True


def test_http_options_mapping() -> None:
    overrides = args_to_overrides(parse_args(["--host", "127.0.0.1", "--port", "8081", "/srv/data"]))

    assert overrides["host"] == "127.0.0.1"
    assert overrides["port"] == "8081"
    assert "use_stdio" not in overrides


def test_debug_and_log_file_mapping() -> None:
    overrides = args_to_overrides(parse_args(["--debug", "--log-file", "/tmp/f.log", "/srv"]))

    assert overrides["log_level"] == "DEBUG"
    assert overrides["log_file"] == "/tmp/f.log"


def test_defaults_are_explicit_none() -> None:
    """Unset options map to None so the merge keeps environment defaults."""
    args = parse_args(["/srv"])
    overrides = args_to_overrides(args)

    assert overrides["host"] is None
    assert overrides["port"] is None
    assert overrides["log_file"] is None
    assert args.walk_path is None
    assert args.json_output is False


def test_walk_options() -> None:
    args = parse_args(["--walk", "/subdir1", "--json", "/srv"])
    assert args.walk_path == "/subdir1"
    assert args.json_output is True
