"""MCP tool implementations: find_library_exa, get_library_context_exa, get_code_context.

Each handler is built by a factory closing over the ExaClient, so the
FastMCP input schema is derived from the handler signature alone. Argument
names are the camelCase names of the wire contract.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Annotated, Any

from mcp.types import CallToolResult
from pydantic import Field

from exa_context import payloads, results
from exa_context.catalog import ToolId
from exa_context.exa_client import ExaClient
from exa_context.request_log import RequestLogger

Handler = Callable[..., Awaitable[CallToolResult]]

LibraryName = Annotated[
    str,
    Field(
        description=(
            "GitHub library name (e.g., 'facebook/react'). "
            "Use % as wildcard (e.g., 'facebook/%' or '%/react')"
        )
    ),
]
LibraryVersion = Annotated[str | None, Field(description="Optional version of the library")]
Query = Annotated[
    str,
    Field(min_length=1, max_length=2000, description="Search query to find relevant code context"),
]
TokensNum = Annotated[
    float,
    Field(ge=50, le=500000, description="Maximum number of tokens to return in the context"),
]


# ---------------------------------------------------------------------------
# Shared invocation flow
# ---------------------------------------------------------------------------


async def run_tool(
    tool_id: ToolId | str,
    arguments: dict[str, Any],
    client: ExaClient,
) -> CallToolResult:
    """Build the request, call the upstream once and normalize the outcome.

    Never raises: every failure becomes an ``isError`` result.
    """
    tool = ToolId(tool_id)
    logger = RequestLogger.for_tool(tool.value)
    try:
        request = payloads.build_request(tool, arguments)
        logger.start(payloads.describe(request))
        logger.log(f"Sending {tool.value} request to Exa API")
        body = await client.post_context(request.to_payload())
        logger.log(f"Received {tool.value} response from Exa API")
        result = results.normalize(body, tool, logger)
    except Exception as exc:  # noqa: BLE001
        logger.error(exc)
        return results.classify_error(exc, tool)
    logger.complete()
    return result


# ---------------------------------------------------------------------------
# Handler factories
# ---------------------------------------------------------------------------


def make_find_library(client: ExaClient) -> Handler:
    async def find_library_exa(
        githubLibraryName: LibraryName,  # noqa: N803
        libraryVersion: LibraryVersion = None,  # noqa: N803
    ) -> CallToolResult:
        arguments: dict[str, Any] = {"githubLibraryName": githubLibraryName}
        if libraryVersion is not None:
            arguments["libraryVersion"] = libraryVersion
        return await run_tool(ToolId.FIND_LIBRARY, arguments, client)

    return find_library_exa


def make_get_library_context(client: ExaClient) -> Handler:
    async def get_library_context_exa(
        githubLibraryName: Annotated[  # noqa: N803
            str, Field(description="GitHub library name (e.g., 'facebook/react')")
        ],
        query: Query,
        tokensNum: TokensNum,  # noqa: N803
        libraryVersion: LibraryVersion = None,  # noqa: N803
    ) -> CallToolResult:
        arguments: dict[str, Any] = {
            "githubLibraryName": githubLibraryName,
            "query": query,
            "tokensNum": tokensNum,
        }
        if libraryVersion is not None:
            arguments["libraryVersion"] = libraryVersion
        return await run_tool(ToolId.GET_LIBRARY_CONTEXT, arguments, client)

    return get_library_context_exa


def make_get_code_context(client: ExaClient) -> Handler:
    async def get_code_context(
        query: Annotated[
            str,
            Field(
                min_length=1,
                max_length=2000,
                description="Search query to find relevant code snippets",
            ),
        ],
        tokensNum: Annotated[  # noqa: N803
            float,
            Field(
                ge=50,
                le=500000,
                description="Maximum number of tokens to return in the response",
            ),
        ],
    ) -> CallToolResult:
        return await run_tool(
            ToolId.GET_CODE_CONTEXT, {"query": query, "tokensNum": tokensNum}, client
        )

    return get_code_context


HANDLER_FACTORIES: dict[ToolId, Callable[[ExaClient], Handler]] = {
    ToolId.FIND_LIBRARY: make_find_library,
    ToolId.GET_LIBRARY_CONTEXT: make_get_library_context,
    ToolId.GET_CODE_CONTEXT: make_get_code_context,
}
