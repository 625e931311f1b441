"""Shared test fixtures for the orchestrator dashboard tests."""

from typing import Callable, List

import httpx
import pytest

BASE_URL = "http://orchestrator.test"


class RecordingBackend:
    """Fake orchestrator: answers through httpx.MockTransport and keeps every request."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]):
        self.respond = respond
        self.requests: List[httpx.Request] = []

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handle), base_url=BASE_URL)


@pytest.fixture
def make_backend():
    """Factory for a recording fake backend."""
    return RecordingBackend
