"""Mock Jira HTTP endpoint built on httpx.MockTransport."""

import json
from typing import Any

import httpx


class MockJiraHttp:
    """Routes requests to canned responses and records what was sent.

    Routes are keyed by (method, path). Unrouted requests get the fallback
    response, a 404 unless `respond_to_all` replaced it. After `fail_with`, every
    request raises instead.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], tuple[int, Any]] = {}
        self.requests: list[httpx.Request] = []
        self.fallback: tuple[int, Any] = (404, "Not Found")
        self.error: Exception | None = None
        self.transport = httpx.MockTransport(self._handle)

    def add(self, method: str, path: str, payload: Any, status_code: int = 200) -> None:
        self.routes[(method.upper(), path)] = (status_code, payload)

    def respond_to_all(self, payload: Any, status_code: int = 200) -> None:
        self.fallback = (status_code, payload)

    def fail_with(self, error: Exception) -> None:
        self.error = error

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        status_code, payload = self.routes.get(
            (request.method, request.url.path), self.fallback
        )
        if isinstance(payload, str):
            return httpx.Response(status_code, text=payload)
        return httpx.Response(status_code, json=payload)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "No request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)

    def last_params(self) -> dict[str, str]:
        return dict(self.last_request.url.params)
