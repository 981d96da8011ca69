"""Helpers for E2E tests: JSON-RPC over the in-process streamable HTTP app."""
from __future__ import annotations

import contextlib
import itertools
import json
from typing import Any, AsyncIterator, Optional

import httpx

from aster_mcp_server.mcp_server import AsterMcpServer

MCP_PATH = "/mcp"
_ids = itertools.count(1)


class McpHttpClient:
    """Minimal MCP client speaking JSON-RPC over streamable HTTP."""

    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http

    async def rpc(
        self,
        method: str,
        params: Optional[dict[str, Any]] = None,
        authorization: Optional[str] = None,
    ) -> dict[str, Any]:
        """Send one JSON-RPC request and return the parsed response object."""
        headers = {
            "Accept": "application/json, text/event-stream",
            "Content-Type": "application/json",
        }
        if authorization is not None:
            headers["Authorization"] = authorization

        payload = {"jsonrpc": "2.0", "id": next(_ids), "method": method, "params": params or {}}
        response = await self._http.post(MCP_PATH, content=json.dumps(payload), headers=headers)
        return response.json()

    async def list_tools(self) -> list[dict[str, Any]]:
        result = await self.rpc("tools/list")
        return result["result"]["tools"]

    async def call_tool(
        self,
        name: str,
        args: Optional[dict[str, Any]] = None,
        authorization: Optional[str] = "K:S",
    ) -> dict[str, Any]:
        """Call a tool; returns the raw JSON-RPC response (``result`` or ``error``)."""
        return await self.rpc(
            "tools/call",
            {"name": name, "arguments": args or {}},
            authorization=authorization,
        )


def tool_text(response: dict[str, Any]) -> Any:
    """Parse the JSON text content of a successful tools/call response."""
    assert "error" not in response, response
    content = response["result"]["content"]
    assert len(content) == 1
    assert content[0]["type"] == "text"
    return json.loads(content[0]["text"])


@contextlib.asynccontextmanager
async def connect(server: AsterMcpServer) -> AsyncIterator[McpHttpClient]:
    """Run the server's app in-process and yield a client bound to it."""
    app = server.streamable_http_app()
    async with server.lifespan(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http:
            yield McpHttpClient(http)
