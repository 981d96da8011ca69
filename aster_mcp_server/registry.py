"""Tool registry - the static catalog of exchange operations.

Each tool is a ToolDefinition: the schema shown to MCP clients plus the
upstream operation it maps to. The registry is built once at import time from
the catalog tables and never changes afterwards; both tools/list and
tools/call read from it.
"""
from typing import Iterable, Iterator, Optional

from mcp import types

from .catalog import ALL_TOOLS
from .models import ToolDefinition


class ToolRegistry:
    """Name-indexed, read-only view over a set of tool definitions."""

    def __init__(self, definitions: Iterable[ToolDefinition]):
        self._tools: dict[str, ToolDefinition] = {}
        for definition in definitions:
            # Prevent duplicate registration (would shadow an earlier tool)
            if definition.name in self._tools:
                raise ValueError(f"Tool already registered: {definition.name}")
            self._tools[definition.name] = definition

    def get(self, name: str) -> Optional[ToolDefinition]:
        """Return the definition for ``name``, or None if no such tool exists."""
        return self._tools.get(name)

    def names(self) -> list[str]:
        return list(self._tools)

    def list_tools(self) -> list[types.Tool]:
        """Catalog in declaration order, as MCP tool descriptors."""
        return [definition.to_mcp_tool() for definition in self._tools.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)


REGISTRY = ToolRegistry(ALL_TOOLS)
