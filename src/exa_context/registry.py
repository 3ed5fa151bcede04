"""Tool activation and registration against a FastMCP server."""

from __future__ import annotations

import logging

from mcp.server.fastmcp import FastMCP

from exa_context.catalog import ServerProfile, ToolDescriptor
from exa_context.config import ServerConfig
from exa_context.exa_client import ExaClient
from exa_context.tools import HANDLER_FACTORIES

log = logging.getLogger("exa-context")


def should_activate(descriptor: ToolDescriptor, config: ServerConfig) -> bool:
    """An explicit, non-empty allow-list wins; otherwise the static default applies."""
    if config.enabled_tools:
        return descriptor.id.value in config.enabled_tools
    return descriptor.enabled_by_default


def active_tools(config: ServerConfig, profile: ServerProfile) -> list[ToolDescriptor]:
    """Return the profile's descriptors that *config* activates, in table order."""
    if config.enabled_tools:
        unknown = [t for t in config.enabled_tools if profile.get(t) is None]
        if unknown:
            log.warning("Ignoring unknown tools for %s: %s", profile.name, ", ".join(unknown))
    return [d for d in profile.tools if should_activate(d, config)]


class ToolRegistry:
    """Binds active tools into a FastMCP server's dispatch table.

    Registering a tool id that is already bound is a no-op.
    """

    def __init__(self, server: FastMCP) -> None:
        self.server = server
        self._registered: dict[str, ToolDescriptor] = {}

    @property
    def registered(self) -> list[str]:
        return list(self._registered)

    def register(self, descriptor: ToolDescriptor, client: ExaClient) -> bool:
        """Register one tool. Returns False if its id was already registered."""
        tool_id = descriptor.id.value
        if tool_id in self._registered:
            log.debug("Tool %s already registered, skipping", tool_id)
            return False
        handler = HANDLER_FACTORIES[descriptor.id](client)
        self.server.add_tool(
            handler,
            name=tool_id,
            title=descriptor.display_name,
            description=descriptor.description,
            structured_output=False,
        )
        self._registered[tool_id] = descriptor
        return True

    def activate(
        self,
        config: ServerConfig,
        profile: ServerProfile,
        client: ExaClient,
    ) -> list[str]:
        """Register every tool *config* activates and return all registered ids."""
        for descriptor in active_tools(config, profile):
            self.register(descriptor, client)
        if config.debug:
            log.debug(
                "Registered %d tools: %s", len(self._registered), ", ".join(self._registered)
            )
        return self.registered
