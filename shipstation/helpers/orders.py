"""Convenience methods for the ``/orders/`` resource."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from shipstation.helpers.endpoint import AsyncEndpoint, Endpoint

logger = logging.getLogger(__name__)

AWAITING_SHIPMENT = "awaiting_shipment"


def _first_order_id(body: Any) -> Any:
    """Pull ``orders[0].orderId`` out of a listing response, or *None*."""
    if not isinstance(body, dict):
        return None
    orders = body.get("orders") or []
    if not isinstance(orders, list) or not orders or not isinstance(orders[0], dict):
        return None
    return orders[0].get("orderId")


def _total(body: Any) -> int | None:
    if not isinstance(body, dict):
        return None
    return body.get("total")


def _is_not_found(exc: httpx.HTTPStatusError) -> bool:
    return exc.response.status_code == httpx.codes.NOT_FOUND


class Orders(Endpoint):
    def create(self, order: dict[str, Any]) -> Any:
        """Create (or update, when ``orderKey`` matches) a single order."""
        return self.post(order, "createorder")

    def create_many(self, orders: list[dict[str, Any]]) -> Any:
        return self.post(orders, "createorders")

    def get_order_id(self, order_number: str) -> Any:
        """Look up the ShipStation ``orderId`` for an order number."""
        return _first_order_id(self.get({"orderNumber": order_number}))

    def exists_by_order_number(self, order_number: str) -> bool:
        """Does an order with *order_number* exist?

        A 404 from the lookup means "no such order". Every other HTTP status
        error, and any connectivity error, is raised to the caller.
        """
        try:
            return bool(self.get_order_id(order_number))
        except httpx.HTTPStatusError as exc:
            if not _is_not_found(exc):
                raise
            logger.debug("Order %r not found", order_number)
            return False

    def awaiting_shipment_count(self) -> int | None:
        """How many orders are awaiting shipment? *None* if the total is absent."""
        return _total(self.get({"orderStatus": AWAITING_SHIPMENT}))


class AsyncOrders(AsyncEndpoint):
    async def create(self, order: dict[str, Any]) -> Any:
        return await self.post(order, "createorder")

    async def create_many(self, orders: list[dict[str, Any]]) -> Any:
        return await self.post(orders, "createorders")

    async def get_order_id(self, order_number: str) -> Any:
        return _first_order_id(await self.get({"orderNumber": order_number}))

    async def exists_by_order_number(self, order_number: str) -> bool:
        try:
            return bool(await self.get_order_id(order_number))
        except httpx.HTTPStatusError as exc:
            if not _is_not_found(exc):
                raise
            logger.debug("Order %r not found", order_number)
            return False

    async def awaiting_shipment_count(self) -> int | None:
        return _total(await self.get({"orderStatus": AWAITING_SHIPMENT}))
