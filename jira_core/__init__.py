# =============================================================================
# jira_core/__init__.py
# =============================================================================
# This package contains ALL the logic for turning a tool call into one Jira
# REST request:
#   - models.py           Endpoint / Param descriptors and CallResult
#   - endpoints.py        the declarative table of Jira endpoints
#   - request_builder.py  argument validation and URL construction
#   - adapter.py          RequestAdapter: one call in, one HTTP round trip,
#                         one normalized result out
#   - config.py           environment configuration and the shared client
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or any MCP code.  The tools layer
#   (jira_tools/) depends on jira_core, never the other way round.
# =============================================================================
