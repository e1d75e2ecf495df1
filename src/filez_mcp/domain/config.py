from __future__ import annotations

"""
Server Configuration Domain.

Holds the immutable runtime configuration of the directory walker server
and the defaults used to build it. Environment lookups happen once, when
the default configuration dictionary is generated at startup.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
SERVER_NAME = "filez-mcp"
SERVER_TITLE = "Directory Walker MCP Server"
SERVER_VERSION = "1.0.0"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5001
MCP_ENDPOINT_PATH = "/mcp"
PORT_ENV_VAR = "PORT"


# -----------------------------------------------------------------------------
# Configuration Model
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ServerConfig:
    """
    Validated process-wide configuration.

    Attributes:
        root_directory: Absolute path of the traversal boundary.
        use_stdio: Serve over stdio instead of streamable HTTP.
        host: Interface bound by the HTTP transport.
        port: TCP port bound by the HTTP transport.
        log_level: Minimum logging severity.
        log_file: Optional path for persistent logs.
    """
    root_directory: str
    use_stdio: bool = False
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @property
    def transport(self) -> str:
        """Transport identifier understood by the MCP runtime."""
        return "stdio" if self.use_stdio else "http"


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    The port is taken from the PORT environment variable when present; it is
    left as a raw string here and coerced during validation.

    Args:
        environ: Environment mapping to read. Defaults to os.environ.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    env = os.environ if environ is None else environ
    port: Any = env.get(PORT_ENV_VAR) or DEFAULT_PORT
    if env.get(PORT_ENV_VAR):
        logger.debug(f"Port taken from ${PORT_ENV_VAR}: {port}")

    return {
        "root_directory": "",
        "use_stdio": False,
        "host": DEFAULT_HOST,
        "port": port,
        "log_level": "INFO",
        "log_file": None,
    }
