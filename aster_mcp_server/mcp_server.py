"""MCP server exposing the Aster REST API over streamable HTTP.

Architecture:
    - Protocol: low-level MCP SDK Server with tools/list and tools/call handlers
    - HTTP transport: stateless StreamableHTTPSessionManager (JSON responses)
      mounted in a starlette app, served by uvicorn
    - Upstream: one shared httpx.AsyncClient, opened for the app's lifetime
      and closed in the lifespan shutdown

Every HTTP request is handled independently. Credentials come from the
Authorization header of the inbound request and are passed straight to the
dispatcher for that one call.
"""

import asyncio
import contextlib
import logging
from typing import Any, AsyncIterator, Callable, Mapping, Optional

import httpx
import uvicorn
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from mcp.server.transport_security import TransportSecuritySettings
from mcp.shared.exceptions import McpError
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.routing import Route
from starlette.types import Receive, Scope, Send

from . import SERVER_NAME, __version__
from .config import Config
from .credentials import AUTH_HEADER, Credentials, parse_authorization
from .dispatcher import Dispatcher
from .errors import InvalidRequestError
from .registry import REGISTRY, ToolRegistry
from .signing import now_ms

logger = logging.getLogger(__name__)


class _StreamableHTTPEndpoint:
    """ASGI endpoint forwarding every request to the session manager."""

    def __init__(self, session_manager: StreamableHTTPSessionManager) -> None:
        self._session_manager = session_manager

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self._session_manager.handle_request(scope, receive, send)


class AsterMcpServer:
    """MCP server forwarding tool calls to the exchange.

    Args:
        config: Server configuration
        client: HTTP client for the exchange. Created from ``config.base_url``
            when omitted.
        registry: Tool catalog
        clock: Millisecond clock for request timestamps (defaults to wall time)

    Attributes:
        server: Low-level MCP SDK server with the tool handlers registered
        session_manager: Stateless streamable HTTP transport for ``server``
    """

    def __init__(
        self,
        config: Config,
        client: Optional[httpx.AsyncClient] = None,
        registry: ToolRegistry = REGISTRY,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self._config = config
        self._registry = registry
        self._client = client or httpx.AsyncClient(base_url=config.base_url)
        self._dispatcher = Dispatcher(self._client, registry, clock)

        self.server: Server = Server(SERVER_NAME, version=__version__)
        self.server.list_tools()(self.list_tools)
        # Registered directly: the call_tool() decorator would turn McpError
        # into an isError result and drop the JSON-RPC error code
        self.server.request_handlers[types.CallToolRequest] = self._handle_call_tool

        # Disable DNS rebinding protection to allow tunnels/proxies in front of the server
        self.session_manager = StreamableHTTPSessionManager(
            app=self.server,
            event_store=None,
            json_response=True,
            stateless=True,
            security_settings=TransportSecuritySettings(enable_dns_rebinding_protection=False),
        )

    async def list_tools(self) -> list[types.Tool]:
        return self._registry.list_tools()

    async def call_tool(
        self,
        name: str,
        arguments: Optional[Mapping[str, Any]],
        authorization: Optional[str],
    ) -> types.CallToolResult:
        """Apply the credential policy, then dispatch the call.

        By default every call needs a valid Authorization header, checked
        before the tool name is resolved. With ``public_without_auth`` set,
        unsigned tools also run without one.

        Raises:
            ToolCallError: Any classified failure (see errors module)
        """
        credentials: Optional[Credentials]
        try:
            credentials = parse_authorization(authorization)
        except InvalidRequestError:
            tool = self._registry.get(name)
            if not (self._config.public_without_auth and tool is not None and not tool.signed):
                raise
            credentials = None

        return await self._dispatcher.dispatch(name, arguments, credentials)

    async def _handle_call_tool(self, req: types.CallToolRequest) -> types.ServerResult:
        authorization = _request_header(self.server, AUTH_HEADER)
        try:
            result = await self.call_tool(req.params.name, req.params.arguments, authorization)
        except McpError as e:
            logger.info("tools/call %s rejected: %s", req.params.name, e.error.message)
            raise
        return types.ServerResult(result)

    @contextlib.asynccontextmanager
    async def lifespan(self, app: Starlette) -> AsyncIterator[None]:
        async with self.session_manager.run():
            try:
                yield
            finally:
                await self._client.aclose()

    def streamable_http_app(self) -> Starlette:
        """Starlette app serving MCP at ``config.streamable_path``."""
        middleware = []
        if self._config.cors_origins:
            middleware.append(
                Middleware(
                    CORSMiddleware,
                    allow_origins=self._config.cors_origins,
                    allow_methods=["GET", "POST", "DELETE"],
                    allow_headers=["*"],
                    expose_headers=["mcp-session-id", "mcp-protocol-version"],
                )
            )

        return Starlette(
            routes=[
                Route(
                    self._config.streamable_path,
                    endpoint=_StreamableHTTPEndpoint(self.session_manager),
                )
            ],
            middleware=middleware,
            lifespan=self.lifespan,
        )

    def run(self) -> None:
        """Serve until interrupted."""
        asyncio.run(self._serve())

    async def _serve(self) -> None:
        config = uvicorn.Config(
            self.streamable_http_app(),
            host=self._config.http_host,
            port=self._config.http_port,
            log_level="warning",
        )
        server = uvicorn.Server(config)

        display_host = self._config.http_host
        if display_host in ("0.0.0.0", "127.0.0.1"):
            display_host = "localhost"
        logger.info(
            "MCP Server running on http://%s:%d%s",
            display_host,
            self._config.http_port,
            self._config.streamable_path,
        )
        await server.serve()


def _request_header(server: Server, name: str) -> Optional[str]:
    """Header of the HTTP request that carried the current MCP message, if any."""
    try:
        request = server.request_context.request
    except LookupError:
        return None
    if request is None:
        return None
    return request.headers.get(name)
