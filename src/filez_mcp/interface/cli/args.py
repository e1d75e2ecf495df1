from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of the server and translates the parsed
namespace into configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

from filez_mcp.domain.config import DEFAULT_PORT, MCP_ENDPOINT_PATH, PORT_ENV_VAR, SERVER_NAME, SERVER_TITLE

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the filez-mcp CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=SERVER_NAME,
        description=f"{SERVER_TITLE}: recursive, root-confined directory listing over MCP.",
    )

    p.add_argument(
        "root_directory",
        help="Directory exposed as '/' to clients. Walks never leave it.",
    )

    # --- Transport Selection ---
    p.add_argument(
        "-s", "--stdio",
        dest="use_stdio",
        action="store_true",
        help="Use stdio transport instead of HTTP.",
    )
    p.add_argument(
        "--host",
        default=None,
        help="Interface bound by the HTTP transport.",
    )
    p.add_argument(
        "--port",
        default=None,
        help=f"HTTP port (default: ${PORT_ENV_VAR} or {DEFAULT_PORT}). "
             f"The endpoint is served at {MCP_ENDPOINT_PATH}.",
    )

    # --- One-shot Mode ---
    p.add_argument(
        "--walk",
        dest="walk_path",
        metavar="PATH",
        default=None,
        help="Print the listing of PATH (relative to the root) and exit without serving.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="With --walk, print a JSON document including skipped entries.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this file (rotated).",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Overrides; None values mean "keep the default".
    """
    overrides: Dict[str, Any] = {
        "root_directory": args.root_directory,
        "host": args.host,
        "port": args.port,
        "log_file": args.log_file,
    }

    if args.use_stdio:
        overrides["use_stdio"] = True
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
