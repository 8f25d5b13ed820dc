# =============================================================================
# jira_tools/__init__.py
# =============================================================================
# This package exposes jira_core over MCP.
#
# ARCHITECTURAL ROLE:
#   jira_tools/ is the translation layer between the MCP host and the core:
#     1. Every Endpoint in jira_core.endpoints becomes one FastMCP tool
#     2. Tool arguments are handed to RequestAdapter unchanged
#     3. CallResult text becomes MCP text content; CallResult errors become
#        MCP error results (ToolError)
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT build URLs or parse responses (that's in jira_core/)
#   - They do NOT hold per-call state; one shared httpx.Client is all
# =============================================================================
