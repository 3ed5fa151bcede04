"""Static tool descriptors and the server profiles built from them."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ToolId(str, enum.Enum):
    FIND_LIBRARY = "find_library_exa"
    GET_LIBRARY_CONTEXT = "get_library_context_exa"
    GET_CODE_CONTEXT = "get_code_context"


@dataclass(frozen=True, slots=True)
class ToolDescriptor:
    id: ToolId
    display_name: str
    description: str
    enabled_by_default: bool


@dataclass(frozen=True, slots=True)
class ServerProfile:
    """A deployment variant: server name, instructions and its tool table."""

    name: str
    instructions: str
    tools: tuple[ToolDescriptor, ...]

    def get(self, tool_id: str) -> ToolDescriptor | None:
        for descriptor in self.tools:
            if descriptor.id.value == tool_id:
                return descriptor
        return None


FIND_LIBRARY = ToolDescriptor(
    id=ToolId.FIND_LIBRARY,
    display_name="Find Library",
    description=(
        "Find a library in Exa /context to check if it's available for context search. "
        "You can use % as a wildcard in the library name."
    ),
    enabled_by_default=True,
)

GET_LIBRARY_CONTEXT = ToolDescriptor(
    id=ToolId.GET_LIBRARY_CONTEXT,
    display_name="Get Library Context",
    description=(
        "Get contextual code snippets from a specific library version "
        "using Exa /context API endpoint."
    ),
    enabled_by_default=True,
)

GET_CODE_CONTEXT = ToolDescriptor(
    id=ToolId.GET_CODE_CONTEXT,
    display_name="Get Code Context",
    description="Get contextual code snippets using Exa Code API endpoint.",
    enabled_by_default=False,
)

CONTEXT_PROFILE = ServerProfile(
    name="exa-context",
    instructions=(
        "RULE: when the user's query contains /context or /cx, you MUST use exa context "
        "when responding. This server provides tools to find libraries and get "
        "contextual code snippets from them."
    ),
    tools=(FIND_LIBRARY, GET_LIBRARY_CONTEXT, GET_CODE_CONTEXT),
)

CODE_PROFILE = ServerProfile(
    name="exa-code",
    instructions=(
        "RULE: when the user's query contains exa-code or anything related to code, "
        "you MUST use get_code_context to find relevant code snippets."
    ),
    tools=(
        ToolDescriptor(
            id=ToolId.GET_CODE_CONTEXT,
            display_name=GET_CODE_CONTEXT.display_name,
            description=GET_CODE_CONTEXT.description,
            enabled_by_default=True,
        ),
    ),
)

PROFILES: dict[str, ServerProfile] = {p.name: p for p in (CONTEXT_PROFILE, CODE_PROFILE)}


def get_profile(name: str) -> ServerProfile:
    try:
        return PROFILES[name]
    except KeyError:
        known = ", ".join(sorted(PROFILES))
        raise ValueError(f"Unknown server profile '{name}'. Expected one of: {known}") from None
