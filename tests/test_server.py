"""Unit tests for server construction and environment configuration."""

from __future__ import annotations

import pytest

from exa_context import config
from exa_context.catalog import CODE_PROFILE, get_profile
from exa_context.config import ServerConfig
from exa_context.server import create_server


class TestLoadConfig:
    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("EXA_ENABLED_TOOLS", raising=False)
        monkeypatch.delenv("EXA_DEBUG", raising=False)
        assert config.load_config() == ServerConfig()

    def test_enabled_tools_and_debug(self, monkeypatch) -> None:
        monkeypatch.setenv("EXA_ENABLED_TOOLS", "find_library_exa, get_code_context,")
        monkeypatch.setenv("EXA_DEBUG", "true")
        loaded = config.load_config()
        assert loaded.enabled_tools == ("find_library_exa", "get_code_context")
        assert loaded.debug is True

    def test_base_url_override(self, monkeypatch) -> None:
        monkeypatch.setenv("EXA_API_URL", "https://exa.internal")
        assert config.base_url() == "https://exa.internal"
        monkeypatch.delenv("EXA_API_URL")
        assert config.base_url() == "https://api.exa.ai"


class TestProfiles:
    def test_get_known_profile(self) -> None:
        assert get_profile("exa-code") is CODE_PROFILE

    def test_unknown_profile_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown server profile"):
            get_profile("exa-search")


class TestCreateServer:
    @pytest.mark.asyncio
    async def test_default_profile(self, monkeypatch) -> None:
        monkeypatch.setenv("EXA_API_KEY", "from-env")
        server, registry = create_server(ServerConfig())
        assert server.name == "exa-context"
        assert registry.registered == ["find_library_exa", "get_library_context_exa"]
        names = sorted(tool.name for tool in await server.list_tools())
        assert names == ["find_library_exa", "get_library_context_exa"]

    def test_code_profile(self) -> None:
        server, registry = create_server(ServerConfig(debug=True), CODE_PROFILE)
        assert server.name == "exa-code"
        assert registry.registered == ["get_code_context"]

    def test_default_client_key_precedence(self, monkeypatch) -> None:
        from exa_context import server as server_mod

        captured = {}
        real_client = server_mod.ExaClient

        def spy(**kwargs):
            client = real_client(**kwargs)
            captured["client"] = client
            return client

        monkeypatch.setenv("EXA_API_KEY", "from-env")
        monkeypatch.setattr(server_mod, "ExaClient", spy)

        create_server(ServerConfig(exa_api_key="configured"))
        assert captured["client"].resolved_api_key == "configured"
        assert captured["client"].timeout == 30.0

        create_server(ServerConfig())
        assert captured["client"].resolved_api_key == "from-env"
