"""Per-invocation request logger.

Every line is tagged with the request id and the tool name so that
interleaved logs from concurrent calls stay distinguishable.
"""

from __future__ import annotations

import logging
import random
import string
import time

log = logging.getLogger("exa-context")

_ID_ALPHABET = string.digits + string.ascii_lowercase


def new_request_id(tool_name: str) -> str:
    """Return ``<tool>-<epoch ms>-<5 base36 chars>``."""
    suffix = "".join(random.choices(_ID_ALPHABET, k=5))
    return f"{tool_name}-{int(time.time() * 1000)}-{suffix}"


class RequestLogger:
    def __init__(self, request_id: str, tool_name: str) -> None:
        self.request_id = request_id
        self.tool_name = tool_name

    @classmethod
    def for_tool(cls, tool_name: str) -> RequestLogger:
        return cls(new_request_id(tool_name), tool_name)

    def _emit(self, level: int, message: str) -> None:
        log.log(level, "[%s] [%s] %s", self.request_id, self.tool_name, message)

    def start(self, description: str) -> None:
        self._emit(logging.INFO, f'Starting request for query: "{description}"')

    def log(self, message: str) -> None:
        self._emit(logging.DEBUG, message)

    def error(self, exc: BaseException) -> None:
        self._emit(logging.ERROR, f"Error: {str(exc) or type(exc).__name__}")

    def complete(self) -> None:
        self._emit(logging.INFO, "Successfully completed request")
