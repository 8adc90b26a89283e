"""Process entry point: ``python -m mcp_server_starter`` or ``mcp-server-starter``."""

import asyncio
import os
import sys

from dotenv import load_dotenv

from mcp_server_starter.mcp_wrapper import SERVER_NAME, SERVER_VERSION, build_server, run_stdio
from mcp_server_starter.server_core import get_logger, load_config, setup_logging

logger = get_logger(__name__)


def main() -> int:
    """Load configuration, build the server and serve it over stdio.

    Returns:
        The process exit status.
    """
    load_dotenv()
    # stdout is the MCP transport; logs go to stderr
    setup_logging(level=os.getenv("LOG_LEVEL", "INFO"), stream=sys.stderr)

    try:
        config = load_config()
        server = build_server(config)
        logger.info("MCP Server Starter running on stdio")
        logger.info("Server: %s v%s", SERVER_NAME, SERVER_VERSION)
        asyncio.run(run_stdio(server))
    except KeyboardInterrupt:
        logger.info("Shutting down.")
    except Exception as e:
        logger.critical(f"Fatal error: {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
