"""Resource helpers, keyed by resource name."""

from __future__ import annotations

from shipstation.helpers.endpoint import AsyncEndpoint, Endpoint
from shipstation.helpers.orders import AsyncOrders, Orders

HELPERS: dict[str, type[Endpoint]] = {
    "orders": Orders,
}

ASYNC_HELPERS: dict[str, type[AsyncEndpoint]] = {
    "orders": AsyncOrders,
}

__all__ = [
    "ASYNC_HELPERS",
    "AsyncEndpoint",
    "AsyncOrders",
    "Endpoint",
    "HELPERS",
    "Orders",
]
