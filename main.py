# =============================================================================
# main.py - Entry Point for the Jira MCP Tool Server
# =============================================================================
#
# HOW TO RUN:
#   JIRA_BASE_URL=http://localhost:8080/rest uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads .env (JIRA_BASE_URL, JIRA_TIMEOUT, MCP_TRANSPORT, ...)
#   2. Reads and validates the configuration (jira_core/config.py)
#   3. Creates the shared httpx.Client
#   4. Builds the FastMCP server with one tool per Jira endpoint
#   5. Serves over stdio (default) or HTTP/SSE until the host disconnects
#
# Configuration errors are logged to stderr and the process exits with 1.
# =============================================================================

import logging
import sys

from dotenv import load_dotenv

# Load environment variables from .env file.  This must happen BEFORE the
# configuration is read.
load_dotenv()

from jira_core.config import create_http_client, load_config
from jira_core.errors import ConfigError
from jira_tools.mcp_server import configure_logging, create_server


def main() -> int:
    try:
        config = load_config()
    except ConfigError as e:
        configure_logging()
        logging.error(f"Invalid configuration: {e}")
        return 1

    configure_logging(config.log_level)
    logging.info(f"Serving Jira at {config.base_url} over {config.transport}")

    # The client is closed when the server stops.
    with create_http_client(config) as client:
        server = create_server(config, client)
        if config.transport == "stdio":
            server.run()
        else:
            server.run(transport=config.transport, host=config.host, port=config.port)
    return 0


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    sys.exit(main())
