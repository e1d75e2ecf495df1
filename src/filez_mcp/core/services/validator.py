from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between raw configuration sources (CLI overrides merged over
environment defaults) and the immutable ServerConfig. Coerces types,
injects defaults, collects warnings, and fails closed on an invalid root
directory.
"""

import logging
from typing import Any, Dict, List, Tuple

from filez_mcp.domain.config import DEFAULT_PORT, ServerConfig, get_default_config
from filez_mcp.infra.fs import normalize_path, validate_root_directory
from filez_mcp.infra.logging.config import _LEVEL_MAP

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[ServerConfig, List[str]]:
    """
    Validate and normalize a raw configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise on type mismatch instead of coercing.

    Returns:
        Tuple[ServerConfig, List[str]]: The validated configuration and a
                                        list of warnings.

    Raises:
        ConfigurationError: The root directory is missing or not a directory.
        TypeError: A field has the wrong type and strict is set.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        config = {}

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if v is not None})

    raw_root = _as_str(merged.get("root_directory"), "", "root_directory", warnings, strict)
    root_directory = validate_root_directory(normalize_path(raw_root, "") if raw_root else "")

    log_file = merged.get("log_file")
    if log_file is not None:
        log_file = _as_str(log_file, "", "log_file", warnings, strict) or None

    cfg = ServerConfig(
        root_directory=root_directory,
        use_stdio=_as_bool(merged.get("use_stdio"), False, "use_stdio", warnings, strict),
        host=_as_str(merged.get("host"), defaults["host"], "host", warnings, strict),
        port=_as_port(merged.get("port"), warnings, strict),
        log_level=_as_level(merged.get("log_level"), warnings, strict),
        log_file=log_file,
    )

    for w in warnings:
        logger.debug(f"Config warning: {w}")

    return cfg, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_port(value: Any, warnings: List[str], strict: bool) -> int:
    """Coerce a port given as int or numeric string into the 1-65535 range."""
    if value is None or value == "":
        return DEFAULT_PORT

    port: Any = value
    if isinstance(value, str):
        try:
            port = int(value.strip())
        except ValueError:
            port = None

    if isinstance(port, int) and not isinstance(port, bool) and 0 < port < 65536:
        return port

    msg = f"Invalid field 'port': {value!r} is not a TCP port."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using {DEFAULT_PORT}.")
    return DEFAULT_PORT


def _as_level(value: Any, warnings: List[str], strict: bool) -> str:
    """Normalize a logging level name."""
    level = _as_str(value, "INFO", "log_level", warnings, strict).upper()
    if level in _LEVEL_MAP:
        return level

    msg = f"Invalid field 'log_level': unknown level '{level}'."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using INFO.")
    return "INFO"
