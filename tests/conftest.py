import asyncio
import json

import httpx
import pytest

API_URL = "https://remote.test/exec"


class FakeRemote:
    """Stands in for the remote endpoint and records every request body."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = {"success": True}
        self.content = None
        self.error = None

    @property
    def payloads(self):
        return [json.loads(r.content) for r in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.body)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def remote():
    return FakeRemote()
