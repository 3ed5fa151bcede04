"""Unit tests for upstream request payload construction."""

from __future__ import annotations

import pytest

from exa_context.catalog import ToolId
from exa_context.payloads import (
    CodeContextRequest,
    FindLibraryRequest,
    LibraryContextRequest,
    build_request,
    describe,
)


class TestFindLibraryRequest:
    def test_omits_missing_version(self) -> None:
        payload = build_request(ToolId.FIND_LIBRARY, {"githubLibraryName": "facebook/react"})
        payload = payload.to_payload()
        assert payload == {"action": "findLibrary", "githubLibraryName": "facebook/react"}
        assert "libraryVersion" not in payload

    def test_includes_version_when_present(self) -> None:
        payload = FindLibraryRequest("facebook/react", "18.2.0").to_payload()
        assert payload["libraryVersion"] == "18.2.0"

    def test_empty_version_is_omitted(self) -> None:
        payload = FindLibraryRequest("facebook/react", "").to_payload()
        assert "libraryVersion" not in payload

    def test_excludes_context_fields(self) -> None:
        payload = FindLibraryRequest("%/react").to_payload()
        assert "query" not in payload
        assert "tokensNum" not in payload


class TestLibraryContextRequest:
    def test_builds_action_payload(self) -> None:
        request = build_request(
            "get_library_context_exa",
            {"githubLibraryName": "vercel/next.js", "query": "app router", "tokensNum": 5000},
        )
        assert isinstance(request, LibraryContextRequest)
        assert request.to_payload() == {
            "action": "getLibraryContext",
            "githubLibraryName": "vercel/next.js",
            "tokensNum": 5000,
            "query": "app router",
        }

    def test_includes_version_when_present(self) -> None:
        request = LibraryContextRequest("vercel/next.js", "app router", 5000, "14.0.0")
        assert request.to_payload()["libraryVersion"] == "14.0.0"


class TestCodeContextRequest:
    def test_flat_payload_has_no_action(self) -> None:
        request = build_request(ToolId.GET_CODE_CONTEXT, {"query": "useEffect", "tokensNum": 100})
        assert isinstance(request, CodeContextRequest)
        assert request.to_payload() == {"query": "useEffect", "tokensNum": 100}


class TestBuildRequest:
    def test_unknown_tool_raises(self) -> None:
        with pytest.raises(ValueError):
            build_request("search_everything", {"query": "x"})

    def test_describe_includes_version(self) -> None:
        assert describe(FindLibraryRequest("facebook/react", "18")) == (
            "Finding library facebook/react@18"
        )
        assert describe(CodeContextRequest("hooks", 100)) == "Searching for: hooks"


class TestTokensNum:
    def test_integral_float_sent_as_integer(self) -> None:
        payload = CodeContextRequest("hooks", 100.0).to_payload()
        assert payload["tokensNum"] == 100
        assert isinstance(payload["tokensNum"], int)

    def test_fractional_value_passes_through(self) -> None:
        payload = LibraryContextRequest("facebook/react", "hooks", 100.5).to_payload()
        assert payload["tokensNum"] == 100.5
