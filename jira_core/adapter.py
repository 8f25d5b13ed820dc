# =============================================================================
# jira_core/adapter.py - The Request Adapter (one tool call = one HTTP call)
# =============================================================================
#
# HOW IT WORKS (the flow):
#   1. build_url() validates the Argument Bag and builds the URL
#   2. ONE request is sent with "Accept: application/json", no body
#   3. status >= 400  →  API error carrying the raw response body
#   4. otherwise the body is normalized: JSON objects are pretty-printed
#      with two-space indentation, anything else comes back verbatim
#
# ERRORS ARE DATA:
#   execute() never raises.  Every failure becomes a CallResult with an
#   ErrorKind so the MCP host can report it and keep serving.
#
# THE HTTP CLIENT IS INJECTED:
#   RequestAdapter does not create its own httpx.Client.  The caller owns it
#   (and its timeout, pooling and lifetime).  Tests pass a client built on
#   httpx.MockTransport to serve canned responses.
# =============================================================================

import json
import logging
from typing import Any, Mapping, Optional

import httpx

from jira_core.errors import ArgumentValidationError, RequestConstructionError
from jira_core.models import CallResult, Endpoint, ErrorKind
from jira_core.request_builder import build_url

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Accept": "application/json"}


def _reject_constant(name: str):
    # NaN, Infinity and -Infinity are not JSON.
    raise ValueError(f"non-standard JSON constant {name}")


def normalize_body(body: str) -> str:
    """Pretty-print *body* if it is a JSON object, otherwise return it unchanged.

    Arrays, scalars, empty bodies and invalid JSON are all returned verbatim;
    a parse failure is never an error.
    """
    try:
        parsed = json.loads(body, parse_constant=_reject_constant)
    except ValueError:
        return body
    if not isinstance(parsed, dict):
        return body
    return json.dumps(parsed, indent=2, sort_keys=True, ensure_ascii=False)


class RequestAdapter:
    """Executes Endpoint descriptors against one Jira base URL.

    Safe to share between threads: the only state is the base URL and the
    injected httpx.Client.
    """

    def __init__(self, client: httpx.Client, base_url: str):
        self.client = client
        self.base_url = base_url.rstrip("/")

    def execute(self, endpoint: Endpoint, args: Optional[Mapping[str, Any]] = None) -> CallResult:
        args = args or {}

        # --- Step 1: validate arguments and build the URL ---
        try:
            url = build_url(endpoint, self.base_url, args)
        except ArgumentValidationError as e:
            return CallResult.failure(ErrorKind.INVALID_ARGUMENTS, str(e))
        except RequestConstructionError as e:
            # Not reached by a constructed Endpoint: its placeholders match its
            # path params and every path param is required.
            return CallResult.failure(ErrorKind.CONSTRUCTION, f"Failed to create request: {e}")

        try:
            request = self.client.build_request(endpoint.method, url, headers=DEFAULT_HEADERS)
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            return CallResult.failure(ErrorKind.CONSTRUCTION, f"Failed to create request: {e}")

        # --- Step 2: exactly one round trip ---
        logger.debug("%s %s", endpoint.method, url)
        try:
            response = self.client.send(request, stream=True)
        except httpx.RequestError as e:
            return CallResult.failure(ErrorKind.TRANSPORT, f"Request failed: {e}")

        try:
            response.read()
        except httpx.RequestError as e:
            return CallResult.failure(
                ErrorKind.TRANSPORT,
                f"Failed to read response body: {e}",
                status_code=response.status_code,
            )
        finally:
            response.close()

        # --- Step 3: classify by status code ---
        body = response.text
        if response.status_code >= 400:
            return CallResult.failure(
                ErrorKind.API,
                f"API error: {body}",
                status_code=response.status_code,
            )

        # --- Step 4: normalize the body ---
        return CallResult.success(normalize_body(body), status_code=response.status_code)
