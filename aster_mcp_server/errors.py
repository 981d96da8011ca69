"""Protocol errors raised while handling a tool call.

Every failure reaches the MCP client as a JSON-RPC error object. The classes
here pair each failure kind with its JSON-RPC code:

    InvalidRequestError   -32600  missing or malformed Authorization header
    MethodNotFoundError   -32601  unknown tool name
    InvalidParamsError    -32602  tool-specific required argument missing
    UpstreamError         -32603  the exchange call failed

They subclass McpError, so the low-level server turns them into error
responses without any extra wrapping.
"""

from typing import Any, Optional

from mcp.shared.exceptions import McpError
from mcp.types import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    ErrorData,
)


# ------------------------------------------------------------------------------
# ToolCallError - Base for structured tool call failures
# ------------------------------------------------------------------------------
# - message: What went wrong
# - hint: Actionable suggestion for the client (optional)
# - **data: Extra context like status, code, tool name (optional)
#
# Example: raise InvalidParamsError("batchOrders is required.", tool="placeBatchOrders")
# ------------------------------------------------------------------------------
class ToolCallError(McpError):
    code: int = INTERNAL_ERROR

    def __init__(self, message: str, hint: Optional[str] = None, **data: Any):
        self.message = message
        self.hint = hint
        self.data = data

        text = message
        if hint:
            text += f" (hint: {hint})"
        super().__init__(ErrorData(code=self.code, message=text, data=data or None))


class InvalidRequestError(ToolCallError):
    code = INVALID_REQUEST


class MethodNotFoundError(ToolCallError):
    code = METHOD_NOT_FOUND


class InvalidParamsError(ToolCallError):
    code = INVALID_PARAMS


class UpstreamError(ToolCallError):
    """The exchange rejected the request or could not be reached."""

    code = INTERNAL_ERROR
