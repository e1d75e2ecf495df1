from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the process lifecycle: argument parsing, logging bootstrap,
configuration validation (fatal on an invalid root directory), and then
either a one-shot walk or a long-running MCP server.
"""

import json
import sys
from typing import List, Optional

from filez_mcp.core.services.directory_service import DirectoryWalkService
from filez_mcp.core.services.validator import validate_config
from filez_mcp.domain.config import ServerConfig, get_default_config
from filez_mcp.domain.errors import ConfigurationError, WalkError
from filez_mcp.infra.logging import LoggingConfig, configure_logging, get_logger
from filez_mcp.interface.cli import args as cli_args
from filez_mcp.interface.mcp.server import build_server, run_server

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 130 interrupted).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # Console-only bootstrap until the configuration is validated
    configure_logging(LoggingConfig(level="DEBUG" if args.debug else "INFO", console=True))

    overrides = cli_args.args_to_overrides(args)
    raw_conf = get_default_config()
    raw_conf.update({k: v for k, v in overrides.items() if v is not None})

    try:
        cfg, warnings = validate_config(raw_conf, strict=False)
    except ConfigurationError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Console logs go to stderr; stdout is reserved for the stdio transport
    configure_logging(
        LoggingConfig(level=cfg.log_level, console=True, log_file=cfg.log_file),
        force=True,
    )

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    service = DirectoryWalkService(cfg.root_directory)

    if args.walk_path is not None:
        return _run_walk_once(service, args.walk_path, json_output=bool(args.json_output))

    return _serve(service, cfg)

# -----------------------------------------------------------------------------
# EXECUTION MODES
# -----------------------------------------------------------------------------

def _run_walk_once(service: DirectoryWalkService, path: str, *, json_output: bool) -> int:
    """Walk a single path and print the listing to stdout."""
    try:
        result = service.walk(path)
    except WalkError as e:
        logger.warning(f"Walk of {path!r} failed: {e}")
        print(f"ERROR: Error walking directory: {e}", file=sys.stderr)
        return 1

    if json_output:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        for p in result.paths:
            print(p)
    return 0


def _serve(service: DirectoryWalkService, cfg: ServerConfig) -> int:
    """Run the MCP server until shutdown."""
    server = build_server(service)
    try:
        run_server(server, cfg)
    except KeyboardInterrupt:
        logger.warning("Server interrupted by user.")
        return 130
    return 0

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
