"""Shared fakes for the transport and logger capabilities."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable

import pytest

from ethnode.client import EthClient


@dataclass
class FakeResponse:
    content: bytes


@dataclass
class FakePoster:
    """HttpPoster that replays canned replies and records every request."""

    replies: list[Any]
    requests: list[dict[str, Any]] = field(default_factory=list)

    def post(self, url: str, *, content: bytes, headers: Any) -> FakeResponse:
        self.requests.append(
            {"url": url, "body": content, "json": json.loads(content), "headers": dict(headers)}
        )
        reply = self.replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        if isinstance(reply, (dict, list)):
            reply = json.dumps(reply)
        if isinstance(reply, str):
            reply = reply.encode("utf-8")
        return FakeResponse(reply)

    @property
    def last(self) -> dict[str, Any]:
        return self.requests[-1]


@dataclass
class RecordingLogger:
    lines: list[str] = field(default_factory=list)

    def write_line(self, line: str) -> None:
        self.lines.append(line)


def ok(result: Any) -> dict[str, Any]:
    return {"id": 1, "jsonrpc": "2.0", "result": result}


@pytest.fixture()
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture()
def make_client(recording_logger: RecordingLogger) -> Callable[..., tuple[EthClient, FakePoster]]:
    """Build a client whose transport replays ``replies`` in order."""

    def factory(*replies: Any, debug: bool = False) -> tuple[EthClient, FakePoster]:
        poster = FakePoster(list(replies))
        client = EthClient(
            "http://node.test:8545",
            http_client=poster,
            logger=recording_logger,
            debug=debug,
        )
        return client, poster

    return factory


@pytest.fixture()
def result_client(make_client: Callable[..., tuple[EthClient, FakePoster]]) -> Callable[..., tuple[EthClient, FakePoster]]:
    """Build a client answering each call with a successful envelope around ``results``."""

    def factory(*results: Any) -> tuple[EthClient, FakePoster]:
        return make_client(*[ok(result) for result in results])

    return factory
