"""
Capabilities the client is built from: an HTTP poster and a line logger.

Both are narrow protocols so tests and embedding code can hand in their
own implementations. An ``httpx.Client`` is a valid HttpPoster as is.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

import httpx

DEFAULT_TIMEOUT = 30.0

CONTENT_TYPE = "application/json"


class PostResponse(Protocol):
    @property
    def content(self) -> bytes:
        ...


class HttpPoster(Protocol):
    def post(self, url: str, *, content: bytes, headers: Mapping[str, str]) -> PostResponse:
        ...


class LineLogger(Protocol):
    def write_line(self, line: str) -> None:
        ...


class LoggingLineLogger:
    """Line logger backed by a stdlib logger."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self._logger = logger or logging.getLogger("ethnode.rpc")
        self._level = level

    def write_line(self, line: str) -> None:
        self._logger.log(self._level, "%s", line)


def default_http_client(timeout: float = DEFAULT_TIMEOUT) -> httpx.Client:
    return httpx.Client(timeout=timeout)
