"""
測試環境配置
Fake remote servers for delivery tests, served through httpx.MockTransport.
"""

import asyncio
import json
from typing import Any, Callable, Dict, List, Tuple

import httpx
import pytest

from app.core.http_client import HTTPClient

ALICE = "https://alice.example/users/alice"
BOB = "https://bob.example/users/bob"
CAROL = "https://carol.example/users/carol"


class FakeFediverse:
    """Routes (method, url) to canned responses and records every request."""

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Any] = {}
        self.requests: List[httpx.Request] = []

    def route(self, method: str, url: str, status: int = 200, **kwargs) -> None:
        self.routes[(method, url)] = (status, kwargs)

    def fail(self, method: str, url: str, error: Exception) -> None:
        self.routes[(method, url)] = error

    def actor(self, actor_id: str, inbox: str, inbox_url: str = None) -> None:
        """A remote actor whose profile names `inbox`, accepting POSTs at `inbox_url`"""
        self.route("GET", actor_id, json={"id": actor_id, "type": "Person", "inbox": inbox})
        self.route("POST", inbox_url or inbox, status=202)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        answer = self.routes.get((request.method, str(request.url)))
        if answer is None:
            return httpx.Response(404, text="Not Found")
        if isinstance(answer, Exception):
            raise answer
        status, kwargs = answer
        return httpx.Response(status, **kwargs)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    def fetched(self) -> List[str]:
        return [str(r.url) for r in self.requests if r.method == "GET"]

    def posted(self) -> List[Tuple[str, Dict[str, Any]]]:
        return [(str(r.url), json.loads(r.content)) for r in self.requests if r.method == "POST"]


def run_with_client(fediverse: FakeFediverse, call: Callable[[httpx.AsyncClient], Any]) -> Any:
    """Run an async call against the fake network on a fresh event loop."""
    async def main():
        async with fediverse.client() as client:
            return await call(client)
    return asyncio.run(main())


@pytest.fixture
def fediverse():
    return FakeFediverse()


@pytest.fixture
def note_activity():
    return {
        "@context": "https://www.w3.org/ns/activitystreams",
        "id": "http://localhost/activities/create/1",
        "type": "Create",
        "actor": "http://localhost/users/me",
        "object": {"type": "Note", "content": "hello fediverse"},
    }


@pytest.fixture(autouse=True)
def no_shared_client():
    """Tests never leak a shared client into each other."""
    HTTPClient.set_shared_client(None)
    yield
    HTTPClient.set_shared_client(None)
