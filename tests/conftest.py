"""Shared fixtures: a Datadog client wired to an in-memory HTTP transport."""

import json
from typing import Callable, List, Tuple, Union

import httpx
import pytest

from datadog_api import Client, DatadogConfig

HOST = "https://api.datadoghq.test"
API_KEY = "api-key-123"
APP_KEY = "app-key-456"

Reply = Union[httpx.Response, Exception]


class RecordingTransport:
    """Replays canned replies in order and records every request it sees."""

    def __init__(self, replies: List[Reply]):
        self.replies = list(replies)
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.replies:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    @property
    def calls(self) -> int:
        return len(self.requests)

    def body(self, index: int = -1):
        """Decoded JSON body of a recorded request."""
        return json.loads(self.requests[index].content)


def reply(status_code: int = 200, payload=None, text: str = None) -> httpx.Response:
    """Build a canned response with a JSON or raw text body."""
    if text is not None:
        return httpx.Response(status_code, text=text)
    return httpx.Response(status_code, json=payload)


@pytest.fixture
def config() -> DatadogConfig:
    return DatadogConfig(host=HOST, api_key=API_KEY, application_key=APP_KEY)


@pytest.fixture
def make_client(config) -> Callable[..., Tuple[Client, RecordingTransport]]:
    """Factory returning a client and the transport recording its requests."""

    def _make(*replies: Reply) -> Tuple[Client, RecordingTransport]:
        transport = RecordingTransport(list(replies))
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(transport))
        return Client(config, http_client=http_client), transport

    return _make
