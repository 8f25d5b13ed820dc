# =============================================================================
# jira_tools/mcp_server.py - FastMCP Tool Server (ALL Jira tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the FastMCP server and registers one tool per Endpoint descriptor
#   from jira_core.endpoints.  Each tool is a thin wrapper around
#   RequestAdapter.execute(); it only logs and converts results.
#
# HOW IT WORKS (the flow):
#   1. The MCP host calls a tool by name (e.g. "get_api_2_issue_issueIdOrKey")
#   2. FastMCP routes the call to that tool's EndpointTool.run()
#   3. run() hands the arguments to RequestAdapter in a worker thread
#   4. A successful CallResult becomes text content; an error CallResult
#      becomes an MCP error result via ToolError
#
# TOOL NAMING CONVENTIONS:
#   - get_*    → read-only retrieval (annotated readOnlyHint)
#   - post_*   → creates something or triggers an action
#   - put_*    → updates in place (idempotent)
#   - delete_* → removes something (annotated destructiveHint)
#
# RUNNING THIS SERVER:
#   python main.py              (stdio transport, for MCP hosts)
#   MCP_TRANSPORT=http python main.py
# =============================================================================

import asyncio
import logging
import sys
from functools import partial
from typing import Any, Callable, Optional

import httpx
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent, ToolAnnotations
from pydantic import Field

from jira_core.adapter import RequestAdapter
from jira_core.config import ApiConfig, create_http_client
from jira_core.endpoints import ENDPOINTS
from jira_core.models import CallResult, Endpoint

SERVER_NAME = "jira-7.6.1"

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because with the stdio transport the MCP messages travel
# over STDOUT.  Anything else written to stdout corrupts the protocol.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + arguments)
#     - GREEN for responses
#     - YELLOW for intermediate status/errors
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color

_PREVIEW_CHARS = 200

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, arguments: dict) -> None:
    """Log an incoming tool call with its arguments in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in arguments.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: CallResult) -> CallResult:
    """Log a preview of the tool response in GREEN, then return it."""
    preview = result.text[:_PREVIEW_CHARS].replace("\n", " ")
    if len(result.text) > _PREVIEW_CHARS:
        preview += "..."
    logger.info(
        f"{_GREEN}  ← {tool_name} response (HTTP {result.status_code}, "
        f"{len(result.text)} chars): {preview}{_RESET}"
    )
    return result


# =============================================================================
# EndpointTool: one MCP tool backed by one Endpoint descriptor
# =============================================================================
# FastMCP normally derives a tool's schema from a Python function signature.
# Our tools have no per-endpoint functions, so the schema comes straight from
# the descriptor (Endpoint.input_schema) and run() is shared by all of them.
# =============================================================================
class EndpointTool(Tool):
    handler: Callable[[dict[str, Any]], CallResult] = Field(exclude=True)

    @classmethod
    def from_endpoint(cls, endpoint: Endpoint, adapter: RequestAdapter) -> "EndpointTool":
        return cls(
            name=endpoint.name,
            description=endpoint.description,
            parameters=endpoint.input_schema(),
            tags={endpoint.method.lower()},
            annotations=ToolAnnotations(
                readOnlyHint=endpoint.method == "GET",
                destructiveHint=endpoint.method == "DELETE",
                idempotentHint=endpoint.method in ("GET", "PUT", "DELETE"),
                openWorldHint=True,
            ),
            handler=partial(adapter.execute, endpoint),
        )

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        _log_request(self.name, arguments)

        # The adapter blocks on HTTP; keep the event loop free for other calls.
        result = await asyncio.to_thread(self.handler, arguments)

        if result.is_error:
            _log_status(f"{self.name} failed ({result.error_kind.value}): {result.text[:_PREVIEW_CHARS]}")
            raise ToolError(result.text)

        _log_response(self.name, result)
        return ToolResult(content=[TextContent(type="text", text=result.text)])


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
def create_server(config: ApiConfig, client: Optional[httpx.Client] = None) -> FastMCP:
    """Build the MCP server with one tool per Jira endpoint.

    Args:
        config: Where Jira lives and how long to wait for it.
        client: The outbound HTTP client, shared by every tool.  The caller
            owns it and closes it after the server stops (main.py uses a
            ``with`` block).  When omitted, one is created from *config*;
            it is never closed and lives as long as the process.

    Returns:
        A FastMCP server ready for .run().
    """
    if client is None:
        client = create_http_client(config)
    adapter = RequestAdapter(client, config.base_url)

    mcp = FastMCP(
        SERVER_NAME,
        instructions=(
            "Tools for the Jira 7.6.1 REST API. Each tool performs exactly one HTTP request "
            "and returns the response body (JSON objects are pretty-printed)."
        ),
    )
    for endpoint in ENDPOINTS:
        mcp.add_tool(EndpointTool.from_endpoint(endpoint, adapter))

    logger.debug("Registered %d Jira tools against %s", len(ENDPOINTS), config.base_url)
    return mcp
