"""Tests for the JSON-RPC error mapping of tool call failures."""
from __future__ import annotations

import pytest
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, INVALID_REQUEST, METHOD_NOT_FOUND

from aster_mcp_server.errors import (
    InvalidParamsError,
    InvalidRequestError,
    MethodNotFoundError,
    ToolCallError,
    UpstreamError,
)


@pytest.mark.parametrize("cls,code", [
    (ToolCallError, INTERNAL_ERROR),
    (InvalidRequestError, INVALID_REQUEST),
    (MethodNotFoundError, METHOD_NOT_FOUND),
    (InvalidParamsError, INVALID_PARAMS),
    (UpstreamError, INTERNAL_ERROR),
])
def test_error_codes(cls, code):
    assert cls("boom").error.code == code


class TestToolCallError:
    def test_message_without_hint(self):
        error = InvalidParamsError("batchOrders is required.")
        assert error.error.message == "batchOrders is required."
        assert error.hint is None
        assert error.error.data is None

    def test_hint_is_appended_to_wire_message(self):
        error = MethodNotFoundError("Unknown tool: x", hint="call tools/list for available tools")
        assert error.message == "Unknown tool: x"
        assert error.error.message == "Unknown tool: x (hint: call tools/list for available tools)"

    def test_extra_context_becomes_error_data(self):
        error = UpstreamError("Aster API error: Invalid symbol.", status=400, code=-1121)
        assert error.error.data == {"status": 400, "code": -1121}
        assert error.data == {"status": 400, "code": -1121}
