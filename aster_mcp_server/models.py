"""Pydantic models for the tool catalog."""
import copy
from typing import Any, Literal, Optional

from mcp import types
from pydantic import BaseModel, ConfigDict, Field


def empty_schema() -> dict[str, Any]:
    return {"type": "object", "properties": {}}


class ToolDefinition(BaseModel):
    """One exchange operation exposed as an MCP tool."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Unique tool name exposed to MCP clients")
    description: str = Field(description="Shown to the client to explain the tool")
    method: Literal["GET", "POST", "DELETE"]
    path: str = Field(description="Upstream path, e.g. /fapi/v1/order")
    signed: bool = Field(default=False, description="Requires HMAC signing and the API key header")
    input_schema: dict[str, Any] = Field(default_factory=empty_schema)

    # Composite arguments sent upstream as compact JSON text
    json_fields: tuple[str, ...] = ()

    # At least one of these arguments must be present (and non-empty)
    require_any: tuple[str, ...] = ()
    missing_message: Optional[str] = None

    def to_mcp_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=copy.deepcopy(self.input_schema),
        )
