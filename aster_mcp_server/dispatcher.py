"""Dispatcher - turns a tool call into one upstream HTTP request.

Flow for a single call:
    1. Resolve the tool name against the registry (MethodNotFound if unknown)
    2. Check tool-specific required composite arguments (InvalidParams)
    3. Copy the arguments and JSON-encode composite fields
    4. For signed tools: add timestamp, sign the query string, add the
       signature and the X-MBX-APIKEY header
    5. Send GET/DELETE parameters in the query string, POST parameters as a
       form body
    6. Return the upstream JSON pretty-printed, or raise UpstreamError

The dispatcher holds no per-call state. Concurrent calls share only the
read-only registry and the httpx client.
"""
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

import httpx
from mcp import types

from .credentials import Credentials
from .errors import InvalidParamsError, InvalidRequestError, MethodNotFoundError, UpstreamError
from .models import ToolDefinition
from .registry import REGISTRY, ToolRegistry
from .signing import compact_json, encode_params, now_ms, sign

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-MBX-APIKEY"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class UpstreamRequest:
    """Fully built outgoing request. ``url`` is relative to the client's base URL."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    content: Optional[str] = None


class Dispatcher:
    """Executes tool calls against the exchange REST API.

    Args:
        client: Shared async HTTP client configured with the exchange base URL
        registry: Tool catalog to resolve names against
        clock: Returns the current time in milliseconds, used for ``timestamp``
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        registry: ToolRegistry = REGISTRY,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self._client = client
        self._registry = registry
        self._clock = clock

    def resolve(self, name: str) -> ToolDefinition:
        tool = self._registry.get(name)
        if tool is None:
            raise MethodNotFoundError(
                f"Unknown tool: {name}", hint="call tools/list for available tools"
            )
        return tool

    async def dispatch(
        self,
        name: str,
        arguments: Optional[Mapping[str, Any]],
        credentials: Optional[Credentials],
    ) -> types.CallToolResult:
        """Run one tool call and wrap the upstream response.

        Raises:
            MethodNotFoundError: Unknown tool name
            InvalidParamsError: A required composite argument is missing
            InvalidRequestError: Signed tool called without credentials
            UpstreamError: Non-2xx response or transport failure
        """
        tool = self.resolve(name)
        arguments = arguments or {}
        _check_required(tool, arguments)

        request = self.build_request(tool, arguments, credentials)
        logger.debug("Calling %s %s (signed=%s)", request.method, tool.path, tool.signed)

        try:
            response = await self._client.request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.content,
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            error = _upstream_error(e)
            logger.warning("Tool %s failed: %s", name, error.message)
            raise error from e

        body = _response_body(response)
        return types.CallToolResult(
            content=[
                types.TextContent(type="text", text=json.dumps(body, indent=2, ensure_ascii=False))
            ]
        )

    def build_request(
        self,
        tool: ToolDefinition,
        arguments: Mapping[str, Any],
        credentials: Optional[Credentials],
    ) -> UpstreamRequest:
        """Build the exact outgoing request for ``tool``, signing it when required."""
        params = dict(arguments)
        for name in tool.json_fields:
            if params.get(name) is not None:
                params[name] = compact_json(params[name])

        headers: dict[str, str] = {}
        if tool.signed:
            if credentials is None:
                raise InvalidRequestError(
                    "API Key and Secret are required for this endpoint.",
                    hint="send Authorization: <apikey>:<apisecret>",
                    tool=tool.name,
                )
            # Injected fields always go last, drop caller-supplied copies
            params.pop("timestamp", None)
            params.pop("signature", None)
            params["timestamp"] = self._clock()
            params["signature"] = sign(encode_params(params), credentials.secret)
            headers[API_KEY_HEADER] = credentials.key

        query = encode_params(params)
        if tool.method == "POST":
            headers["Content-Type"] = FORM_CONTENT_TYPE
            return UpstreamRequest(tool.method, tool.path, headers, query)

        url = f"{tool.path}?{query}" if query else tool.path
        return UpstreamRequest(tool.method, url, headers)


def _check_required(tool: ToolDefinition, arguments: Mapping[str, Any]) -> None:
    if tool.require_any and all(arguments.get(name) is None for name in tool.require_any):
        raise InvalidParamsError(
            tool.missing_message or f"One of {', '.join(tool.require_any)} is required.",
            tool=tool.name,
        )


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def _upstream_error(exc: httpx.HTTPError) -> UpstreamError:
    message = str(exc) or type(exc).__name__
    data: dict[str, Any] = {}

    if isinstance(exc, httpx.HTTPStatusError):
        data["status"] = exc.response.status_code
        body = _response_body(exc.response)
        if isinstance(body, dict):
            if body.get("msg"):
                message = str(body["msg"])
            if "code" in body:
                data["code"] = body["code"]

    return UpstreamError(f"Aster API error: {message}", **data)
