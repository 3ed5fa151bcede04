"""MCP Server definition — builds a FastMCP server for one profile."""

from __future__ import annotations

import logging

from mcp.server.fastmcp import FastMCP

from exa_context import config as config_mod
from exa_context.catalog import CONTEXT_PROFILE, ServerProfile
from exa_context.config import ServerConfig
from exa_context.exa_client import ExaClient
from exa_context.registry import ToolRegistry

log = logging.getLogger("exa-context")


def create_server(
    config: ServerConfig,
    profile: ServerProfile = CONTEXT_PROFILE,
    client: ExaClient | None = None,
) -> tuple[FastMCP, ToolRegistry]:
    """Create a FastMCP server with the tools *config* activates.

    *client* defaults to an ExaClient using the configured key, with the
    EXA_API_KEY environment variable as fallback.
    """
    if config.debug:
        log.debug("Starting %s in debug mode", profile.name)

    if client is None:
        client = ExaClient(
            api_key=config.exa_api_key,
            fallback_api_key=config_mod.fallback_api_key(),
            base_url=config_mod.base_url(),
        )

    server = FastMCP(name=profile.name, instructions=profile.instructions)
    registry = ToolRegistry(server)
    registry.activate(config, profile, client)
    log.info("%s initialized with tools: %s", profile.name, ", ".join(registry.registered))
    return server, registry
