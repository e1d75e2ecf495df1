from __future__ import annotations

"""
Unit tests for the Configuration Validation Service.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from filez_mcp.core.services.validator import validate_config
from filez_mcp.domain.config import DEFAULT_HOST, DEFAULT_PORT
from filez_mcp.domain.errors import ConfigurationError


def test_minimal_config_uses_defaults(tmp_path: Path) -> None:
    with patch.dict(os.environ, {}, clear=True):
        cfg, warnings = validate_config({"root_directory": str(tmp_path)})

    assert cfg.root_directory == os.path.abspath(str(tmp_path))
    assert cfg.use_stdio is False
    assert cfg.transport == "http"
    assert cfg.host == DEFAULT_HOST
    assert cfg.port == DEFAULT_PORT
    assert cfg.log_level == "INFO"
    assert cfg.log_file is None
    assert warnings == []


def test_port_from_environment(tmp_path: Path) -> None:
    with patch.dict(os.environ, {"PORT": "8080"}):
        cfg, _ = validate_config({"root_directory": str(tmp_path)})
    assert cfg.port == 8080


def test_explicit_port_wins_over_environment(tmp_path: Path) -> None:
    with patch.dict(os.environ, {"PORT": "8080"}):
        cfg, _ = validate_config({"root_directory": str(tmp_path), "port": "9090"})
    assert cfg.port == 9090


@pytest.mark.parametrize("bad_port", ["abc", "0", "70000", -1])
def test_invalid_port_falls_back_with_warning(tmp_path: Path, bad_port) -> None:
    cfg, warnings = validate_config({"root_directory": str(tmp_path), "port": bad_port})
    assert cfg.port == DEFAULT_PORT
    assert any("port" in w for w in warnings)


def test_invalid_port_strict_raises(tmp_path: Path) -> None:
    with pytest.raises(TypeError):
        validate_config({"root_directory": str(tmp_path), "port": "abc"}, strict=True)


def test_bool_coercion(tmp_path: Path) -> None:
    cfg, warnings = validate_config({"root_directory": str(tmp_path), "use_stdio": "yes"})
    assert cfg.use_stdio is True
    assert cfg.transport == "stdio"
    assert any("use_stdio" in w for w in warnings)


def test_unknown_log_level(tmp_path: Path) -> None:
    cfg, warnings = validate_config({"root_directory": str(tmp_path), "log_level": "chatty"})
    assert cfg.log_level == "INFO"
    assert warnings


def test_log_level_normalized(tmp_path: Path) -> None:
    cfg, _ = validate_config({"root_directory": str(tmp_path), "log_level": "debug"})
    assert cfg.log_level == "DEBUG"


@pytest.mark.parametrize("root", ["", None])
def test_missing_root_is_fatal(root) -> None:
    with pytest.raises(ConfigurationError):
        validate_config({"root_directory": root})


def test_nonexistent_root_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError) as exc:
        validate_config({"root_directory": str(tmp_path / "missing")})
    assert "does not exist" in str(exc.value)


def test_file_root_is_fatal(tmp_path: Path) -> None:
    f = tmp_path / "plain.txt"
    f.write_text("x", encoding="utf-8")
    with pytest.raises(ConfigurationError) as exc:
        validate_config({"root_directory": str(f)})
    assert "not a directory" in str(exc.value)


def test_non_dict_config() -> None:
    """A non-dict config degrades to defaults, whose empty root is fatal."""
    with pytest.raises(ConfigurationError):
        validate_config(["not", "a", "dict"])
    with pytest.raises(TypeError):
        validate_config("nope", strict=True)
