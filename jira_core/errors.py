# =============================================================================
# jira_core/errors.py - Exceptions raised inside the core
# =============================================================================
#
# These never reach the MCP host directly: RequestAdapter.execute() catches
# them and turns them into CallResult errors.  ConfigError is the exception
# to that rule; it is raised at start-up, before any tool exists.
# =============================================================================


class JiraToolError(Exception):
    """Base class for errors raised while preparing a call."""


class ArgumentValidationError(JiraToolError):
    """The Argument Bag does not satisfy the endpoint's declared parameters."""

    def __init__(self, endpoint_name: str, problems: list[str]):
        self.endpoint_name = endpoint_name
        self.problems = list(problems)
        super().__init__(f"Invalid arguments for {endpoint_name}: " + "; ".join(self.problems))


class RequestConstructionError(JiraToolError):
    """The request URL could not be built (for example an unresolved placeholder)."""


class ConfigError(ValueError):
    """Missing or malformed configuration."""
