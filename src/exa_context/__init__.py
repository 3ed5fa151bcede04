"""exa-context: MCP server exposing Exa /context library and code search tools."""

import logging
import sys

from exa_context import config
from exa_context.catalog import get_profile
from exa_context.server import create_server


def main() -> None:
    """CLI entry point — starts the MCP server over stdio."""
    server_config = config.load_config()
    # stdout carries the stdio transport, so logs go to stderr.
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if server_config.debug else logging.INFO,
        format="[EXA-CONTEXT] %(levelname)s %(message)s",
    )
    server, _ = create_server(server_config, get_profile(config.profile_name()))
    server.run(transport="stdio")
