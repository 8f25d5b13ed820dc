# =============================================================================
# jira_core/models.py - Data Models (endpoint descriptors and call results)
# =============================================================================
#
# These dataclasses define the shape of everything that flows through the
# adapter:
#   - Param / Endpoint  →  the immutable description of one REST operation
#   - CallResult        →  the normalized outcome of one tool call
#
# Endpoints are defined once (see jira_core/endpoints.py) and never mutated,
# so every dataclass here is frozen.
# =============================================================================

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


# Placeholders in a path template look like "{issueIdOrKey}".
PLACEHOLDER_RE = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE")


class ParamLocation(str, Enum):
    """Where a declared parameter ends up in the request."""

    PATH = "path"
    QUERY = "query"


class ParamType(str, Enum):
    """Scalar value types accepted for a parameter."""

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"


class ErrorKind(str, Enum):
    """Why a call failed.  Each kind is reported separately to the caller."""

    INVALID_ARGUMENTS = "invalid_arguments"  # rejected before any URL is built
    CONSTRUCTION = "construction"            # URL or request could not be built
    TRANSPORT = "transport"                  # connection or body-read failure
    API = "api"                              # server answered with status >= 400


# -----------------------------------------------------------------------------
# Param: one named input of an endpoint
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Param:
    name: str
    location: ParamLocation = ParamLocation.QUERY
    type: ParamType = ParamType.STRING
    required: bool = False
    description: str = ""

    def __post_init__(self):
        # A path segment can never be left out of the URL.
        if self.location is ParamLocation.PATH and not self.required:
            object.__setattr__(self, "required", True)

    def json_schema(self) -> dict:
        schema = {"type": self.type.value}
        if self.description:
            schema["description"] = self.description
        return schema


def path_param(name: str, description: str = "") -> Param:
    return Param(name, ParamLocation.PATH, ParamType.STRING, True, description)


def query_param(
    name: str,
    description: str = "",
    type: ParamType = ParamType.STRING,
) -> Param:
    return Param(name, ParamLocation.QUERY, type, False, description)


# -----------------------------------------------------------------------------
# Endpoint: the descriptor for one REST operation (one MCP tool)
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Endpoint:
    """Immutable definition of one remote operation.

    The path template and the declared path parameters must agree exactly:
    every "{name}" in the template needs a path Param and every path Param
    needs a placeholder.  A mismatch raises ValueError when the descriptor
    is created, so a broken table fails at import instead of at call time.
    """

    name: str
    method: str
    path: str
    description: str = ""
    params: tuple[Param, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if self.method not in HTTP_METHODS:
            raise ValueError(f"{self.name}: unsupported HTTP method {self.method!r}")

        names = [p.name for p in self.params]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"{self.name}: duplicate parameters {duplicates}")

        placeholders = PLACEHOLDER_RE.findall(self.path)
        declared = [p.name for p in self.path_params]
        if sorted(placeholders) != sorted(declared):
            raise ValueError(
                f"{self.name}: path template {self.path!r} has placeholders "
                f"{placeholders} but declares path parameters {declared}"
            )

    @property
    def path_params(self) -> tuple[Param, ...]:
        return tuple(p for p in self.params if p.location is ParamLocation.PATH)

    @property
    def query_params(self) -> tuple[Param, ...]:
        return tuple(p for p in self.params if p.location is ParamLocation.QUERY)

    def input_schema(self) -> dict:
        """JSON Schema for the tool's arguments object (used by tools/list)."""
        return {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.params},
            "required": [p.name for p in self.params if p.required],
        }


# -----------------------------------------------------------------------------
# CallResult: the normalized outcome of one call
# -----------------------------------------------------------------------------
# Either formatted text (pretty JSON or raw body) or an error message tagged
# with an ErrorKind.  Errors are returned as data; nothing here is raised.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class CallResult:
    text: str
    error_kind: Optional[ErrorKind] = None
    status_code: Optional[int] = None   # set whenever a response was received

    @property
    def is_error(self) -> bool:
        return self.error_kind is not None

    @classmethod
    def success(cls, text: str, status_code: Optional[int] = None) -> "CallResult":
        return cls(text=text, status_code=status_code)

    @classmethod
    def failure(
        cls,
        kind: ErrorKind,
        message: str,
        status_code: Optional[int] = None,
    ) -> "CallResult":
        return cls(text=message, error_kind=kind, status_code=status_code)
