"""Resource-scoped views over a shared client."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from shipstation.client import AsyncShipStation, ShipStation


class Endpoint:
    """Generic verbs bound to one resource segment of a :class:`ShipStation`."""

    def __init__(self, client: ShipStation, endpoint: str) -> None:
        self.client = client
        self.endpoint = endpoint

    def __repr__(self) -> str:
        return f"{type(self).__name__}(endpoint={self.endpoint!r})"

    def get(self, options: dict[str, Any] | None = None, path: str = "") -> Any:
        return self.client.request("GET", path, options, endpoint=self.endpoint)

    def post(self, options: Any = None, path: str = "") -> Any:
        return self.client.request("POST", path, options, endpoint=self.endpoint)

    def update(self, options: Any = None, path: str = "") -> Any:
        return self.client.request("PUT", path, options, endpoint=self.endpoint)

    def delete(self, path: str = "") -> Any:
        return self.client.request("DELETE", path, endpoint=self.endpoint)


class AsyncEndpoint:
    """Async counterpart of :class:`Endpoint` for :class:`AsyncShipStation`."""

    def __init__(self, client: AsyncShipStation, endpoint: str) -> None:
        self.client = client
        self.endpoint = endpoint

    def __repr__(self) -> str:
        return f"{type(self).__name__}(endpoint={self.endpoint!r})"

    async def get(self, options: dict[str, Any] | None = None, path: str = "") -> Any:
        return await self.client.request("GET", path, options, endpoint=self.endpoint)

    async def post(self, options: Any = None, path: str = "") -> Any:
        return await self.client.request("POST", path, options, endpoint=self.endpoint)

    async def update(self, options: Any = None, path: str = "") -> Any:
        return await self.client.request("PUT", path, options, endpoint=self.endpoint)

    async def delete(self, path: str = "") -> Any:
        return await self.client.request("DELETE", path, endpoint=self.endpoint)
