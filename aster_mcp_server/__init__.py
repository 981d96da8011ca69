"""
Aster MCP Server - Model Context Protocol server for the Aster futures REST API.

Every exchange endpoint is exposed as an MCP tool. Tool calls are forwarded to
the upstream API; account and trading calls are signed with the key pair the
client sends in its Authorization header.
"""

__version__ = "0.1.0"

SERVER_NAME = "aster-mcp-server"
