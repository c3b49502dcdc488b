"""Tests for shipstation.client.AsyncShipStation."""

from __future__ import annotations

import httpx
import pytest

from shipstation import AsyncEndpoint, AsyncOrders, AsyncShipStation, ConfigurationError

_EXHAUSTED = {
    "X-Rate-Limit-Limit": "40",
    "X-Rate-Limit-Remaining": "0",
    "X-Rate-Limit-Reset": "60",
}


def _client(recorder, **kwargs) -> AsyncShipStation:
    return AsyncShipStation(
        "key", "secret", _transport=httpx.MockTransport(recorder), **kwargs
    )


class TestAsyncClient:
    def test_missing_secret_raises(self, recorder):
        with pytest.raises(ConfigurationError):
            AsyncShipStation("key", "", _transport=httpx.MockTransport(recorder))

    async def test_get_query_and_default_endpoint(self, recorder):
        async with _client(recorder) as c:
            await c.get({"status": "awaiting_shipment"})
        assert recorder.last.url.path == "/orders/"
        assert recorder.last.url.params["status"] == "awaiting_shipment"

    async def test_post_and_update_json(self, recorder):
        async with _client(recorder) as c:
            await c.post({"status": "awaiting_shipment"}, "createorder")
            assert recorder.last_json() == {"status": "awaiting_shipment"}
            await c.update({"name": "x"}, "1")
        assert recorder.last.method == "PUT"
        assert recorder.last_json() == {"name": "x"}

    async def test_delete(self, recorder):
        async with _client(recorder) as c:
            await c.stores.delete("3")
        assert recorder.last.method == "DELETE"
        assert recorder.last.url.path == "/stores/3"
        assert recorder.last.content == b""

    async def test_resource_views(self, recorder):
        async with _client(recorder) as c:
            assert isinstance(c.orders, AsyncOrders)
            assert type(c.users) is AsyncEndpoint
            assert c.resource("bogus") is c
            await c.users.get()
        assert recorder.last.url.path == "/users/"
        assert c.endpoint == "/orders/"

    async def test_rate_limit_tracking(self, recorder):
        recorder.respond = lambda req: httpx.Response(200, json={}, headers=_EXHAUSTED)
        async with _client(recorder) as c:
            assert c.is_rate_limited() is False
            await c.get()
            assert c.max_allowed_requests == 40
            assert c.remaining_requests == 0
            assert c.seconds_until_reset == 60
            assert c.is_rate_limited() is True

    async def test_status_error_propagates(self, recorder):
        recorder.respond = lambda req: httpx.Response(401, json={"Message": "no"})
        async with _client(recorder) as c:
            with pytest.raises(httpx.HTTPStatusError):
                await c.get()

    async def test_context_manager_lifecycle(self, recorder):
        client = _client(recorder)
        async with client as c:
            await c.get()
        assert client._client.is_closed
