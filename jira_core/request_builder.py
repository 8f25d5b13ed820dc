# =============================================================================
# jira_core/request_builder.py - Argument validation & URL construction
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns (Endpoint, base URL, Argument Bag) into the final request URL:
#     1. validate_arguments()  →  presence and scalar-type checks
#     2. build_path()          →  substitute "{name}" placeholders
#     3. build_query()         →  "?a=1&b=2" in declaration order, or ""
#     4. build_url()           →  all of the above glued to the base URL
#
#   Everything here is pure: no network, no logging, no state.
#
# VALUE FORMATTING:
#   Booleans are sent as "true"/"false" (what Jira expects), integral floats
#   lose their ".0" (JSON numbers often arrive as floats), and everything else
#   goes through str().  Values are percent-encoded.
# =============================================================================

from typing import Any, Mapping, Optional
from urllib.parse import quote

from jira_core.errors import ArgumentValidationError, RequestConstructionError
from jira_core.models import PLACEHOLDER_RE, Endpoint, Param, ParamLocation, ParamType

_SCALAR_TYPES = (str, int, float, bool)
_BOOLEAN_STRINGS = ("true", "false")


def format_value(value: Any) -> str:
    """Return the string form of a scalar argument as it goes on the wire."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _check_value(param: Param, value: Any) -> Optional[str]:
    """Return a problem description for *value*, or None if it is acceptable."""
    if not isinstance(value, _SCALAR_TYPES):
        return f"'{param.name}' must be a scalar value, got {type(value).__name__}"

    if param.type is ParamType.INTEGER:
        if isinstance(value, bool):
            return f"'{param.name}' must be an integer, got a boolean"
        if isinstance(value, float) and not value.is_integer():
            return f"'{param.name}' must be an integer, got {value!r}"
        if isinstance(value, str):
            if not value.strip().removeprefix("-").isdecimal():
                return f"'{param.name}' must be an integer, got {value!r}"
            # int() refuses strings past the interpreter's digit limit.
            try:
                int(value)
            except ValueError:
                return f"'{param.name}' must be an integer, got a {len(value)}-character string"

    elif param.type is ParamType.BOOLEAN:
        if isinstance(value, str) and value.strip().lower() not in _BOOLEAN_STRINGS:
            return f"'{param.name}' must be true or false, got {value!r}"
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return f"'{param.name}' must be true or false, got {value!r}"

    elif param.location is ParamLocation.PATH and isinstance(value, str) and not value.strip():
        return f"'{param.name}' must not be empty"

    return None


def validate_arguments(endpoint: Endpoint, args: Mapping[str, Any]) -> dict[str, Any]:
    """Check *args* against the endpoint's declared parameters.

    Returns the declared, non-null arguments (undeclared keys are dropped).
    Raises ArgumentValidationError listing every problem found.
    """
    problems = []
    accepted = {}
    for param in endpoint.params:
        value = args.get(param.name)
        if value is None:
            if param.required:
                problems.append(f"missing required parameter '{param.name}'")
            continue
        problem = _check_value(param, value)
        if problem:
            problems.append(problem)
            continue
        if param.type is ParamType.BOOLEAN and isinstance(value, str):
            value = value.strip().lower() == "true"
        elif param.type is ParamType.INTEGER and isinstance(value, (str, float)):
            value = int(value)
        accepted[param.name] = value

    if problems:
        raise ArgumentValidationError(endpoint.name, problems)
    return accepted


def build_path(endpoint: Endpoint, args: Mapping[str, Any]) -> str:
    """Substitute path placeholders, failing on any that stay unresolved."""
    path = endpoint.path
    for param in endpoint.path_params:
        if param.name not in args:
            continue
        encoded = quote(format_value(args[param.name]), safe="")
        path = path.replace("{" + param.name + "}", encoded)

    unresolved = PLACEHOLDER_RE.findall(path)
    if unresolved:
        raise RequestConstructionError(
            f"Unresolved path placeholders {unresolved} in {endpoint.path!r}"
        )
    return path


def build_query(endpoint: Endpoint, args: Mapping[str, Any]) -> str:
    pairs = [
        f"{quote(p.name, safe='')}={quote(format_value(args[p.name]), safe='')}"
        for p in endpoint.query_params
        if args.get(p.name) is not None
    ]
    if not pairs:
        return ""
    return "?" + "&".join(pairs)


def build_url(endpoint: Endpoint, base_url: str, args: Mapping[str, Any]) -> str:
    """Validate *args* and build "<base_url><path>[?query]" for *endpoint*."""
    accepted = validate_arguments(endpoint, args)
    return base_url.rstrip("/") + build_path(endpoint, accepted) + build_query(endpoint, accepted)
