"""Async client for the Exa /context API using httpx.

One POST per call, no retry. Every httpx failure is re-raised as
ExaAPIError carrying the HTTP status code when the upstream answered.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from exa_context.config import CONTEXT_ENDPOINT, DEFAULT_BASE_URL, DEFAULT_TIMEOUT

log = logging.getLogger("exa-context")


class ExaAPIError(Exception):
    """Transport or HTTP failure talking to the Exa API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _upstream_message(response: httpx.Response) -> str | None:
    """Return the ``message`` field of an upstream error body, if any."""
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return None


class ExaClient:
    """Bound to a base URL and an API key.

    The key sent is *api_key*, else *fallback_api_key*, else an empty string.
    """

    def __init__(
        self,
        api_key: str | None = None,
        fallback_api_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.fallback_api_key = fallback_api_key
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    @property
    def resolved_api_key(self) -> str:
        return self.api_key or self.fallback_api_key or ""

    def _headers(self) -> dict[str, str]:
        return {
            "accept": "application/json",
            "content-type": "application/json",
            "x-api-key": self.resolved_api_key,
        }

    def _make_client(self) -> httpx.AsyncClient:
        """Create a per-call AsyncClient (caller manages lifecycle)."""
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self._headers(),
            timeout=self.timeout,
            transport=self._transport,
        )

    async def post_context(self, payload: dict[str, Any]) -> Any:
        """POST *payload* to /context and return the decoded JSON body.

        Returns None when the upstream answers with an empty body, and the raw
        text when the body is not JSON.

        Raises:
            ExaAPIError: on network failure, timeout or a non-2xx status.
        """
        try:
            async with self._make_client() as client:
                resp = await client.post(CONTEXT_ENDPOINT, json=payload)
                resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            message = _upstream_message(exc.response) or str(exc)
            raise ExaAPIError(message, status_code=exc.response.status_code) from exc
        except httpx.HTTPError as exc:
            raise ExaAPIError(str(exc) or type(exc).__name__) from exc

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            log.warning("Non-JSON body from Exa API, returning raw text")
            return resp.text
