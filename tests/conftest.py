from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

RATE_HEADERS = {
    "X-Rate-Limit-Limit": "40",
    "X-Rate-Limit-Remaining": "39",
    "X-Rate-Limit-Reset": "60",
}


class Recorder:
    """MockTransport handler that records every request it sees.

    Assign ``respond`` to change what the fake server returns.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.respond: Callable[[httpx.Request], httpx.Response] = (
            lambda req: httpx.Response(200, json={}, headers=RATE_HEADERS)
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> object:
        return json.loads(self.last.content)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture(autouse=True)
def _clear_shipstation_env(monkeypatch):
    """Keep a developer's real credentials out of the tests."""
    for var in (
        "SHIPSTATION_API_KEY",
        "SHIPSTATION_API_SECRET",
        "SHIPSTATION_API_URL",
        "SHIPSTATION_PARTNER_KEY",
    ):
        monkeypatch.delenv(var, raising=False)
