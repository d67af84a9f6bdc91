#!/usr/bin/env python3
"""
Entry point for the CHUK Jam MCP Server.

Parses the command line, points the session at its directories and MIDI
port, then serves the jam tools over stdio or http.
"""

import argparse
import asyncio
import logging
import os

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Flags handed to async_server through its environment overrides
_ENV_FLAGS = {
    "output_dir": "JAM_OUTPUT_DIR",
    "skeletons_dir": "JAM_SKELETONS_DIR",
    "midi_port": "JAM_MIDI_PORT",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CHUK Jam MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--output-dir",
        help="Where jam<N>.mid and tempjam<N>.mid are written (default: current directory)",
    )
    parser.add_argument(
        "--skeletons-dir",
        help="Project skeleton templates, overriding built-ins (default: ./skeletons)",
    )
    parser.add_argument(
        "--midi-port",
        help="MIDI output port for playback (default: the backend's default port)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main() -> None:
    """Main entry point with transport detection."""
    args = build_parser().parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    for option, variable in _ENV_FLAGS.items():
        value = getattr(args, option)
        if value:
            os.environ[variable] = value

    # The session is built at import time from the environment set above
    from chuk_mcp_jam.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Jam MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Jam MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
