"""Normalize upstream bodies and failures into MCP CallToolResult values.

Every tool returns exactly one text content item. Failures are flagged with
``isError`` rather than raised.
"""

from __future__ import annotations

import json
from typing import Any

from mcp.types import CallToolResult, TextContent

from exa_context.catalog import ToolId
from exa_context.exa_client import ExaAPIError
from exa_context.request_log import RequestLogger

_EMPTY_MESSAGES: dict[ToolId, str] = {
    ToolId.FIND_LIBRARY: "No library information found. Please try a different library name.",
    ToolId.GET_LIBRARY_CONTEXT: "No context found. Please try a different query or library.",
    ToolId.GET_CODE_CONTEXT: "No code snippets found. Please try a different query or library.",
}

_ERROR_LABELS: dict[ToolId, str] = {
    ToolId.FIND_LIBRARY: "Find library error",
    ToolId.GET_LIBRARY_CONTEXT: "Context search error",
    ToolId.GET_CODE_CONTEXT: "Code search error",
}


def text_result(text: str, *, is_error: bool = False) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


def _to_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, indent=2, ensure_ascii=False)


def normalize(
    body: Any,
    tool_id: ToolId | str,
    logger: RequestLogger | None = None,
) -> CallToolResult:
    """Turn an upstream body into the tool's text result.

    A falsy body is the empty-result outcome, not an error. A string
    ``response`` is returned verbatim; a structured one (or the whole body
    when there is no ``response`` field) is pretty-printed as JSON.
    """
    tool = ToolId(tool_id)
    if not body:
        if logger:
            logger.log("Warning: Empty response from Exa API")
        return text_result(_EMPTY_MESSAGES[tool])

    if not isinstance(body, dict):
        return text_result(_to_text(body))

    if logger:
        logger.log(
            f"Search completed with {body.get('resultsCount') or 0} results "
            f"(cost: {body.get('costDollars', 'n/a')}, "
            f"search time: {body.get('searchTime', 'n/a')})"
        )

    content = body.get("response")
    if content is None:
        content = body
    return text_result(_to_text(content))


def classify_error(exc: BaseException, tool_id: ToolId | str) -> CallToolResult:
    """Format *exc* as an error result labelled for *tool_id*."""
    label = _ERROR_LABELS[ToolId(tool_id)]
    if isinstance(exc, ExaAPIError):
        status = exc.status_code if exc.status_code is not None else "unknown"
        return text_result(f"{label} ({status}): {exc.message}", is_error=True)
    return text_result(f"{label}: {str(exc) or type(exc).__name__}", is_error=True)
