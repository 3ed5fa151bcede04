"""Shared pytest fixtures for exa-context test suite."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from exa_context.exa_client import ExaClient


@pytest.fixture
def make_client() -> Callable[..., ExaClient]:
    """Build an ExaClient whose requests go to *handler* via httpx.MockTransport."""

    def factory(handler, **kwargs) -> ExaClient:
        return ExaClient(transport=httpx.MockTransport(handler), **kwargs)

    return factory
