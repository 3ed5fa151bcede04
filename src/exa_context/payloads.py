"""Upstream request payloads for the Exa /context endpoint.

The endpoint accepts two body shapes:

* an ``action``-discriminated body (``findLibrary`` / ``getLibraryContext``)
* a flat ``{query, tokensNum}`` body used by ``get_code_context``

Optional fields are omitted from the payload when absent, never sent as null.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from exa_context.catalog import ToolId


def _wire_number(value: float) -> float | int:
    """Send integral numbers as JSON integers (100, not 100.0)."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


@dataclass(frozen=True, slots=True)
class FindLibraryRequest:
    github_library_name: str
    library_version: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "action": "findLibrary",
            "githubLibraryName": self.github_library_name,
        }
        if self.library_version:
            payload["libraryVersion"] = self.library_version
        return payload


@dataclass(frozen=True, slots=True)
class LibraryContextRequest:
    github_library_name: str
    query: str
    tokens_num: float
    library_version: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "action": "getLibraryContext",
            "githubLibraryName": self.github_library_name,
        }
        if self.library_version:
            payload["libraryVersion"] = self.library_version
        payload["tokensNum"] = _wire_number(self.tokens_num)
        payload["query"] = self.query
        return payload


@dataclass(frozen=True, slots=True)
class CodeContextRequest:
    query: str
    tokens_num: float

    def to_payload(self) -> dict[str, Any]:
        return {"query": self.query, "tokensNum": _wire_number(self.tokens_num)}


UpstreamRequest = FindLibraryRequest | LibraryContextRequest | CodeContextRequest


def build_request(tool_id: ToolId | str, arguments: Mapping[str, Any]) -> UpstreamRequest:
    """Map validated tool arguments (wire names) onto the request for *tool_id*.

    Raises:
        ValueError: if *tool_id* is not a known tool.
    """
    tool = ToolId(tool_id)
    if tool is ToolId.FIND_LIBRARY:
        return FindLibraryRequest(
            github_library_name=arguments["githubLibraryName"],
            library_version=arguments.get("libraryVersion"),
        )
    if tool is ToolId.GET_LIBRARY_CONTEXT:
        return LibraryContextRequest(
            github_library_name=arguments["githubLibraryName"],
            query=arguments["query"],
            tokens_num=arguments["tokensNum"],
            library_version=arguments.get("libraryVersion"),
        )
    if tool is ToolId.GET_CODE_CONTEXT:
        return CodeContextRequest(query=arguments["query"], tokens_num=arguments["tokensNum"])
    raise ValueError(f"No request shape for tool '{tool.value}'")  # pragma: no cover


def describe(request: UpstreamRequest) -> str:
    """Short human-readable summary used in the request log."""
    if isinstance(request, FindLibraryRequest):
        version = f"@{request.library_version}" if request.library_version else ""
        return f"Finding library {request.github_library_name}{version}"
    if isinstance(request, LibraryContextRequest):
        version = f"@{request.library_version}" if request.library_version else ""
        return f"{request.query} in {request.github_library_name}{version}"
    return f"Searching for: {request.query}"
