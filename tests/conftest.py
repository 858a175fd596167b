"""Shared fixtures for tests: an in-memory Okta stub behind httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from providers.okta_client import OktaClient

ORG = "acme"
API_TOKEN = "00aBcD-token"
API_ROOT = f"https://{ORG}.okta.com/api/v1/"


class StubOkta:
    """Answers requests from a route table keyed by (method, path?query)."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], httpx.Response] = {}
        self.default: httpx.Response | None = None
        self.requests: list[httpx.Request] = []

    def add(self, method: str, endpoint: str, response: httpx.Response) -> None:
        self.routes[(method, f"/api/v1/{endpoint}")] = response

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.raw_path.decode())
        if key in self.routes:
            return self.routes[key]
        if self.default is not None:
            return self.default
        return httpx.Response(404, json={"errorCode": "E0000007", "errorSummary": "Not found"})

    def body(self, index: int = -1) -> dict:
        return json.loads(self.requests[index].content)


def link_headers(self_endpoint: str, next_endpoint: str | None = None) -> list[tuple[str, str]]:
    headers = [("Link", f'<{API_ROOT}{self_endpoint}>; rel="self"')]
    if next_endpoint is not None:
        headers.append(("Link", f'<{API_ROOT}{next_endpoint}>; rel="next"'))
    return headers


@pytest.fixture
def stub() -> StubOkta:
    return StubOkta()


@pytest.fixture
def client(stub) -> OktaClient:
    http = httpx.Client(transport=httpx.MockTransport(stub.handle))
    okta = OktaClient(ORG, api_token=API_TOKEN, http_client=http)
    yield okta
    http.close()


@pytest.fixture
def sample_user() -> dict:
    return {
        "id": "00u1abcd",
        "status": "ACTIVE",
        "created": "2023-04-01T10:00:00.000Z",
        "lastLogin": "2024-06-11T08:30:12.000Z",
        "profile": {
            "login": "jane.doe@acme.com",
            "email": "jane.doe@acme.com",
            "firstName": "Jane",
            "lastName": "Doe",
            "department": "Finance",
        },
        "credentials": {"provider": {"type": "OKTA", "name": "OKTA"}},
        "_links": {"self": {"href": f"{API_ROOT}users/00u1abcd"}},
    }
