#!/usr/bin/env python3
"""
Yuno MCP Server

FastMCP server exposing the Yuno payments API (customers, payment methods,
checkout sessions, payments, payment links, subscriptions, recipients,
installment plans, routing) plus a documentation reader.

Usage:
    # Run with STDIO transport (for agent integration)
    python yuno_server.py --stdio

    # Run with HTTP transport
    python yuno_server.py --port 4010

    # Structured object output instead of pretty JSON text
    python yuno_server.py --stdio --output-format object

    # Verify the API keys and exit
    python yuno_server.py --check-credentials
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

logger = logging.getLogger("yuno_mcp")


def setup_logger() -> None:
    """Configure the package logger for the Yuno server."""
    if not logger.handlers:
        stream = sys.stderr if "--stdio" in sys.argv else sys.stdout
        handler = logging.StreamHandler(stream)
        formatter = logging.Formatter("[YUNO] %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(os.getenv("YUNO_LOG_LEVEL", "INFO").upper())


setup_logger()

# Suppress FastMCP banner in STDIO mode
if "--stdio" in sys.argv:
    import rich.console

    _original_console_init = rich.console.Console.__init__

    def _patched_console_init(self, *args, **kwargs):
        kwargs["file"] = sys.stderr
        _original_console_init(self, *args, **kwargs)

    rich.console.Console.__init__ = _patched_console_init

from fastmcp import FastMCP  # noqa: E402

from yuno_mcp.config import OutputFormat, parse_output_format  # noqa: E402
from yuno_mcp.credentials import CredentialStoreAdapter, YunoHealthChecker  # noqa: E402
from yuno_mcp.errors import ConfigError  # noqa: E402
from yuno_mcp.tools import register_all_tools  # noqa: E402


def check_credentials(credentials: CredentialStoreAdapter) -> int:
    """Run the health check and return a process exit code."""
    missing = credentials.missing()
    if missing:
        logger.error(f"Missing Yuno credentials: {', '.join(missing)}")
        return 1
    result = YunoHealthChecker().check(
        credentials.get("yuno_public_api_key"),
        credentials.get("yuno_private_secret_key"),
        base_url=os.getenv("YUNO_API_URL") or None,
    )
    logger.info(result.message)
    return 0 if result.valid else 1


def build_server(credentials: CredentialStoreAdapter, output_format: OutputFormat) -> FastMCP:
    mcp = FastMCP("yuno-mcp")
    tools = register_all_tools(mcp, credentials=credentials, output_format=output_format)
    logger.info(f"Registered {len(tools)} Yuno tools ({output_format.value} output)")
    missing = credentials.missing()
    if missing:
        logger.warning(
            f"Yuno credentials not set ({', '.join(missing)}); "
            "API tools will report that the client is not initialized"
        )
    return mcp


# ── Entry point ───────────────────────────────────────────────────────────


def main() -> None:
    """Entry point for the Yuno MCP server."""
    parser = argparse.ArgumentParser(description="Yuno MCP Server")
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("YUNO_MCP_PORT", "4010")),
        help="HTTP server port (default: 4010)",
    )
    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="HTTP server host (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--stdio",
        action="store_true",
        help="Use STDIO transport instead of HTTP",
    )
    parser.add_argument(
        "--output-format",
        choices=[f.value for f in OutputFormat],
        default=os.getenv("YUNO_OUTPUT_FORMAT") or OutputFormat.TEXT.value,
        help="Tool output: pretty JSON text or structured objects (default: text)",
    )
    parser.add_argument(
        "--check-credentials",
        action="store_true",
        help="Validate the Yuno API keys and exit",
    )
    args = parser.parse_args()

    credentials = CredentialStoreAdapter.default()
    if args.check_credentials:
        sys.exit(check_credentials(credentials))

    try:
        output_format = parse_output_format(args.output_format)
    except ConfigError as e:
        parser.error(str(e))

    mcp = build_server(credentials, output_format)

    if args.stdio:
        mcp.run(transport="stdio")
    else:
        logger.info(f"Starting Yuno MCP server on {args.host}:{args.port}")
        mcp.run(transport="http", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
