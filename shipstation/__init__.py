"""ShipStation Python client: resource-scoped access to the ShipStation REST API."""

from __future__ import annotations

from shipstation.client import AsyncShipStation, ShipStation
from shipstation.exceptions import ConfigurationError, ShipStationError
from shipstation.helpers import AsyncEndpoint, AsyncOrders, Endpoint, Orders
from shipstation.models import DEFAULT_API_URL, ENDPOINTS, RateLimitInfo

__all__ = [
    "AsyncEndpoint",
    "AsyncOrders",
    "AsyncShipStation",
    "ConfigurationError",
    "DEFAULT_API_URL",
    "ENDPOINTS",
    "Endpoint",
    "Orders",
    "RateLimitInfo",
    "ShipStation",
    "ShipStationError",
]
