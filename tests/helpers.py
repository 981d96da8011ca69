"""Helpers for tests: a fake exchange behind httpx.MockTransport."""
from __future__ import annotations

import json
from typing import Any, Callable, Optional
from urllib.parse import parse_qsl

import httpx

BASE_URL = "https://fapi.asterdex.com"
FIXED_TIMESTAMP = 1700000000000


class FakeExchange:
    """Records every upstream request and answers with canned responses.

    Unknown paths answer ``{"ok": true}`` with status 200.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[str, Callable[[httpx.Request], httpx.Response]] = {}

    def respond(
        self,
        path: str,
        json_body: Any = None,
        status: int = 200,
        text: Optional[str] = None,
    ) -> None:
        def reply(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status, text=text)
            return httpx.Response(status, json=json_body)

        self._routes[path] = reply

    def fail(self, path: str, exc: Exception) -> None:
        def reply(request: httpx.Request) -> httpx.Response:
            raise exc

        self._routes[path] = reply

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self._routes.get(request.url.path)
        if reply is None:
            return httpx.Response(200, json={"ok": True})
        return reply(request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler), base_url=BASE_URL)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no upstream request was made"
        return self.requests[-1]


def raw_params(request: httpx.Request) -> str:
    """The encoded parameter string: form body for POST, query string otherwise."""
    if request.method == "POST":
        return request.content.decode()
    return request.url.query.decode()


def form_items(request: httpx.Request) -> list[tuple[str, str]]:
    """Decoded ``k=v`` pairs of a request's parameters, in order."""
    return parse_qsl(raw_params(request), keep_blank_values=True)


def envelope_json(result: Any) -> Any:
    """Parse the single text item of a CallToolResult."""
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    return json.loads(result.content[0].text)
