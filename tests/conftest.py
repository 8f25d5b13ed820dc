"""Shared fixtures: a fake Jira built on httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from jira_core.adapter import RequestAdapter
from jira_core.config import ApiConfig
from jira_core.models import Endpoint, ParamLocation, ParamType

BASE_URL = "http://jira.test/rest"


class FakeJira:
    """Records every request and answers with a canned or computed response."""

    def __init__(self, responder=None):
        self.requests: list[httpx.Request] = []
        self.responder = responder or echo_request

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    def client(self) -> httpx.Client:
        # Same redirect policy as jira_core.config.create_http_client.
        return httpx.Client(transport=httpx.MockTransport(self), follow_redirects=True)


def echo_request(request: httpx.Request) -> httpx.Response:
    """Answer with a JSON object describing the request that was received."""
    return httpx.Response(
        200,
        json={
            "method": request.method,
            "path": request.url.path,
            "query": request.url.query.decode(),
        },
    )


def sample_value(param_type: ParamType, index: int):
    if param_type is ParamType.INTEGER:
        return index
    if param_type is ParamType.BOOLEAN:
        return index % 2 == 0
    return f"v{index}"


def sample_args(endpoint: Endpoint, seed: int = 0) -> dict:
    """A value for every declared parameter of *endpoint*."""
    args = {}
    for i, param in enumerate(endpoint.params):
        if param.location is ParamLocation.PATH:
            args[param.name] = f"{param.name}-{seed}"
        else:
            args[param.name] = sample_value(param.type, seed + i)
    return args


@pytest.fixture
def fake_jira() -> FakeJira:
    return FakeJira()


@pytest.fixture
def adapter(fake_jira):
    with fake_jira.client() as client:
        yield RequestAdapter(client, BASE_URL)


@pytest.fixture
def config() -> ApiConfig:
    return ApiConfig(base_url=BASE_URL, timeout=5.0)


def respond_with(status: int, body: str, content_type: str = "application/json"):
    def responder(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, text=body, headers={"Content-Type": content_type})
    return responder


def pretty(obj) -> str:
    return json.dumps(obj, indent=2, sort_keys=True, ensure_ascii=False)
