"""Command-line entry point: ``python -m aster_mcp_server`` or ``aster-mcp-server``."""
import logging
import sys

from .config import Config
from .mcp_server import AsterMcpServer

logger = logging.getLogger("aster_mcp_server")


def main() -> int:
    try:
        config = Config.from_env()
    except ValueError as e:
        print(f"Aster MCP Server: {e}", file=sys.stderr)
        return 2

    valid, error = config.validate()
    if not valid:
        print(f"Aster MCP Server: invalid configuration - {error}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        AsterMcpServer(config).run()
    except KeyboardInterrupt:
        logger.info("Aster MCP Server stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
