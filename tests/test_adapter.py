"""Tests for RequestAdapter: dispatch, classification and body normalization."""

from __future__ import annotations

import json
from concurrent.futures import ThreadPoolExecutor

import httpx
import pytest

from conftest import BASE_URL, FakeJira, pretty, respond_with, sample_args
from jira_core.adapter import RequestAdapter, normalize_body
from jira_core.endpoints import ENDPOINTS, get_endpoint
from jira_core.models import ErrorKind

GET_ISSUE = get_endpoint("get_api_2_issue_issueIdOrKey")


def execute_with(responder, endpoint=GET_ISSUE, args=None):
    fake = FakeJira(responder)
    with fake.client() as client:
        result = RequestAdapter(client, BASE_URL).execute(endpoint, args or {"issueIdOrKey": "TEST-1"})
    return result, fake


# ---------------------------------------------------------------------------
# Body normalization
# ---------------------------------------------------------------------------

class TestNormalizeBody:
    def test_object_is_pretty_printed(self):
        assert normalize_body('{"b":1,"a":{"c":[1,2]}}') == pretty({"a": {"c": [1, 2]}, "b": 1})

    def test_pretty_print_is_idempotent(self):
        once = normalize_body('{"key":"TEST-1","fields":{"summary":"Hello"}}')
        assert normalize_body(once) == once

    def test_plain_text_verbatim(self):
        assert normalize_body("OK") == "OK"

    def test_array_verbatim(self):
        assert normalize_body('[{"name":"admin"}]') == '[{"name":"admin"}]'

    @pytest.mark.parametrize("body", ['{"a": NaN}', '{"a": Infinity}', '{"a": -Infinity}'])
    def test_non_json_constants_verbatim(self, body):
        assert normalize_body(body) == body

    def test_empty_body_verbatim(self):
        assert normalize_body("") == ""

    def test_non_ascii_kept(self):
        assert '"Größe"' in normalize_body('{"summary":"Größe"}')


# ---------------------------------------------------------------------------
# Request dispatch
# ---------------------------------------------------------------------------

class TestDispatch:
    def test_one_request_with_accept_header(self, adapter, fake_jira):
        adapter.execute(GET_ISSUE, {"issueIdOrKey": "TEST-1", "fields": "summary"})

        assert len(fake_jira.requests) == 1
        request = fake_jira.requests[0]
        assert request.method == "GET"
        assert str(request.url) == f"{BASE_URL}/api/2/issue/TEST-1?fields=summary"
        assert request.headers["Accept"] == "application/json"
        assert "Authorization" not in request.headers
        assert request.content == b""

    @pytest.mark.parametrize("name, method", [
        ("post_api_2_issue", "POST"),
        ("put_api_2_user_properties_propertyKey", "PUT"),
        ("delete_api_2_project_projectIdOrKey_role_id", "DELETE"),
    ])
    def test_descriptor_method_used(self, adapter, fake_jira, name, method):
        endpoint = get_endpoint(name)
        adapter.execute(endpoint, sample_args(endpoint))
        assert fake_jira.requests[0].method == method

    def test_invalid_arguments_send_nothing(self, adapter, fake_jira):
        result = adapter.execute(GET_ISSUE, {})
        assert result.error_kind is ErrorKind.INVALID_ARGUMENTS
        assert "issueIdOrKey" in result.text
        assert fake_jira.requests == []

    def test_oversized_integer_is_invalid_arguments(self, adapter, fake_jira):
        result = adapter.execute(get_endpoint("get_api_2_search"), {"maxResults": "1" * 5000})
        assert result.error_kind is ErrorKind.INVALID_ARGUMENTS
        assert fake_jira.requests == []

    def test_invalid_base_url_is_construction_error(self, fake_jira):
        with fake_jira.client() as client:
            broken = RequestAdapter(client, "http://jira.test/re\x00st")
            result = broken.execute(GET_ISSUE, {"issueIdOrKey": "TEST-1"})
        assert result.error_kind is ErrorKind.CONSTRUCTION
        assert result.text.startswith("Failed to create request:")
        assert fake_jira.requests == []

    def test_none_args_treated_as_empty(self, adapter, fake_jira):
        result = adapter.execute(get_endpoint("get_api_2_index_summary"), None)
        assert not result.is_error
        assert str(fake_jira.requests[0].url) == f"{BASE_URL}/api/2/index/summary"


# ---------------------------------------------------------------------------
# Response classification
# ---------------------------------------------------------------------------

class TestResponses:
    def test_json_object_success(self):
        body = {"key": "TEST-1", "fields": {"summary": "Hello"}}
        result, _ = execute_with(respond_with(200, json.dumps(body)))
        assert not result.is_error
        assert result.status_code == 200
        assert result.text == pretty(body)
        assert json.loads(result.text) == body

    def test_plain_text_success(self):
        result, _ = execute_with(respond_with(200, "OK", "text/plain"))
        assert not result.is_error
        assert result.text == "OK"

    def test_no_content(self):
        result, _ = execute_with(lambda request: httpx.Response(204))
        assert not result.is_error
        assert result.text == ""

    def test_not_found_is_api_error_with_raw_body(self):
        result, _ = execute_with(respond_with(404, '{"error":"not found"}'))
        assert result.is_error
        assert result.error_kind is ErrorKind.API
        assert result.status_code == 404
        assert '{"error":"not found"}' in result.text

    def test_server_error(self):
        result, _ = execute_with(respond_with(500, "boom", "text/plain"))
        assert result.error_kind is ErrorKind.API
        assert result.text == "API error: boom"

    def test_redirect_followed(self):
        def responder(request):
            if request.url.path.endswith("/OLD-1"):
                return httpx.Response(302, headers={"Location": f"{BASE_URL}/api/2/issue/NEW-1"})
            return httpx.Response(200, json={"key": "NEW-1"})

        result, fake = execute_with(responder, args={"issueIdOrKey": "OLD-1"})
        assert [r.url.path for r in fake.requests] == ["/rest/api/2/issue/OLD-1", "/rest/api/2/issue/NEW-1"]
        assert result.status_code == 200
        assert json.loads(result.text) == {"key": "NEW-1"}


# ---------------------------------------------------------------------------
# Transport failures
# ---------------------------------------------------------------------------

class _BrokenStream(httpx.SyncByteStream):
    def __iter__(self):
        raise httpx.ReadError("connection reset while reading body")
        yield b""  # pragma: no cover


class TestTransportFailures:
    def test_connection_error_is_transport_error(self):
        def responder(request):
            raise httpx.ConnectError("unreachable host", request=request)

        result, _ = execute_with(responder)
        assert result.is_error
        assert result.error_kind is ErrorKind.TRANSPORT
        assert result.error_kind is not ErrorKind.API
        assert result.text.startswith("Request failed:")
        assert result.status_code is None

    def test_timeout_is_transport_error(self):
        def responder(request):
            raise httpx.ReadTimeout("timed out", request=request)

        result, _ = execute_with(responder)
        assert result.error_kind is ErrorKind.TRANSPORT

    def test_body_read_failure_is_transport_error(self):
        result, _ = execute_with(lambda request: httpx.Response(200, stream=_BrokenStream()))
        assert result.error_kind is ErrorKind.TRANSPORT
        assert result.text.startswith("Failed to read response body:")

    def test_no_retry_after_failure(self):
        calls = []

        def responder(request):
            calls.append(request)
            raise httpx.ConnectError("unreachable host", request=request)

        execute_with(responder)
        assert len(calls) == 1


# ---------------------------------------------------------------------------
# Concurrency
# ---------------------------------------------------------------------------

class TestConcurrency:
    def test_parallel_calls_match_serial_calls(self):
        calls = [
            (ENDPOINTS[i % len(ENDPOINTS)], sample_args(ENDPOINTS[i % len(ENDPOINTS)], seed=i))
            for i in range(100)
        ]
        fake = FakeJira()
        with fake.client() as client:
            adapter = RequestAdapter(client, BASE_URL)
            serial = [adapter.execute(endpoint, args) for endpoint, args in calls]
            with ThreadPoolExecutor(max_workers=16) as pool:
                parallel = list(pool.map(lambda call: adapter.execute(*call), calls))

        assert parallel == serial
        assert len(fake.requests) == 200
        assert all(not result.is_error for result in parallel)
