"""Configuration for the Aster MCP server.

Settings come from environment variables at startup. API credentials are
never part of the configuration - they travel with each tool call.
"""

import logging
import os
from dataclasses import dataclass, field, asdict
from typing import List, Mapping, Optional
from urllib.parse import urlparse

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Config:
    """
    Server configuration.

    All fields have defaults - the server starts without any configuration.
    """

    # HTTP settings
    http_host: str = "127.0.0.1"
    http_port: int = 3002
    http_path: str = "mcp"

    # Upstream exchange endpoint
    base_url: str = "https://fapi.asterdex.com"

    # CORS settings (list of allowed origins, empty = CORS disabled)
    # Use ["*"] to allow all origins (not recommended for production)
    cors_origins: List[str] = field(default_factory=list)

    # Let unsigned market-data tools run without an Authorization header
    public_without_auth: bool = False

    log_level: str = "INFO"

    @property
    def streamable_path(self) -> str:
        """Route the MCP endpoint is served at, e.g. ``/mcp``."""
        return f"/{self.http_path.strip('/')}" if self.http_path.strip("/") else "/"

    def validate(self) -> tuple[bool, str]:
        """
        Check the config can be used to start the server.

        Returns:
            Tuple of (is_valid, error_message). If valid, error_message is empty string.

        Examples:
            >>> Config(http_port=70000).validate()
            (False, 'Port must be between 1 and 65535')
        """
        if not (1 <= self.http_port <= 65535):
            return False, "Port must be between 1 and 65535"
        parsed = urlparse(self.base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            return False, f"Invalid base URL: {self.base_url}"
        if not isinstance(logging.getLevelName(self.log_level), int):
            return False, f"Unknown log level: {self.log_level}"
        return True, ""

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """
        Create from dict, using defaults for missing keys.

        Keys that are not dataclass fields are ignored.

        Examples:
            >>> Config.from_dict({"http_port": 8080}).http_port
            8080
        """
        return cls(
            **{k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """
        Build config from environment variables.

        Recognised variables: PORT, HOST, MCP_HTTP_PATH, ASTER_BASE_URL,
        CORS_ORIGINS (comma separated), ASTER_PUBLIC_WITHOUT_AUTH, LOG_LEVEL.

        Raises:
            ValueError: If PORT is not an integer.
        """
        env = os.environ if environ is None else environ
        data: dict = {}

        if env.get("PORT"):
            try:
                data["http_port"] = int(env["PORT"])
            except ValueError:
                raise ValueError(f"PORT must be an integer, got {env['PORT']!r}")
        if env.get("HOST"):
            data["http_host"] = env["HOST"]
        if "MCP_HTTP_PATH" in env:
            data["http_path"] = env["MCP_HTTP_PATH"]
        if env.get("ASTER_BASE_URL"):
            data["base_url"] = env["ASTER_BASE_URL"].rstrip("/")
        if env.get("CORS_ORIGINS"):
            data["cors_origins"] = [
                origin.strip() for origin in env["CORS_ORIGINS"].split(",") if origin.strip()
            ]
        if "ASTER_PUBLIC_WITHOUT_AUTH" in env:
            data["public_without_auth"] = env["ASTER_PUBLIC_WITHOUT_AUTH"].strip().lower() in _TRUTHY
        if env.get("LOG_LEVEL"):
            data["log_level"] = env["LOG_LEVEL"].upper()

        return cls.from_dict(data)
