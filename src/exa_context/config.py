"""Server configuration read from environment variables.

Variables:
    EXA_API_KEY         fallback API key, used when no key is configured
    EXA_API_URL         upstream base URL (default https://api.exa.ai)
    EXA_ENABLED_TOOLS   comma-separated list of tool ids to enable
    EXA_DEBUG           enable debug logging (1/true/yes/on)
    EXA_SERVER_PROFILE  server profile name (default exa-context)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.exa.ai"
CONTEXT_ENDPOINT = "/context"
DEFAULT_TIMEOUT = 30.0  # seconds

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Configuration supplied once at server construction."""

    exa_api_key: str | None = None
    enabled_tools: tuple[str, ...] | None = None
    debug: bool = False


def base_url() -> str:
    return os.environ.get("EXA_API_URL") or DEFAULT_BASE_URL


def fallback_api_key() -> str | None:
    return os.environ.get("EXA_API_KEY") or None


def _parse_tool_list(raw: str | None) -> tuple[str, ...] | None:
    if not raw:
        return None
    tools = tuple(t.strip() for t in raw.split(",") if t.strip())
    return tools or None


def load_config() -> ServerConfig:
    """Build a ServerConfig from the process environment."""
    return ServerConfig(
        enabled_tools=_parse_tool_list(os.environ.get("EXA_ENABLED_TOOLS")),
        debug=os.environ.get("EXA_DEBUG", "").strip().lower() in _TRUTHY,
    )


def profile_name() -> str:
    return os.environ.get("EXA_SERVER_PROFILE") or "exa-context"
