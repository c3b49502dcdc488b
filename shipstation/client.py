"""Async and sync HTTP clients for the ShipStation API."""

from __future__ import annotations

import base64
import logging
from typing import Any

import httpx

from shipstation.config import Settings, settings
from shipstation.exceptions import ConfigurationError
from shipstation.helpers import ASYNC_HELPERS, HELPERS, AsyncEndpoint, Endpoint
from shipstation.models import (
    DEFAULT_API_URL,
    DEFAULT_ENDPOINT,
    ENDPOINTS,
    PARTNER_HEADER,
    RateLimitInfo,
    endpoint_for,
)

logger = logging.getLogger(__name__)

_RESOURCE_NAMES: frozenset[str] = frozenset(e.strip("/") for e in ENDPOINTS)


def _build_headers(
    api_key: str | None,
    api_secret: str | None,
    partner_key: str | None,
) -> dict[str, str]:
    """Validate credentials and return the headers sent on every request."""
    if not api_key or not api_secret:
        raise ConfigurationError(
            "Your API key and/or API secret are not set. "
            "Set SHIPSTATION_API_KEY and SHIPSTATION_API_SECRET."
        )
    token = base64.b64encode(f"{api_key}:{api_secret}".encode()).decode("ascii")
    headers = {"Authorization": f"Basic {token}"}
    if partner_key:
        headers[PARTNER_HEADER] = partner_key
    return headers


def _request_kwargs(method: str, options: Any) -> dict[str, Any]:
    """GET options go in the query string; POST/PUT options in a JSON body."""
    if options is None or method == "DELETE":
        return {}
    if method == "GET":
        return {"params": options}
    return {"json": options}


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    return response.json()


def _settings_kwargs(config: Settings | None) -> dict[str, Any]:
    if config is None:
        config = settings
    return {
        "api_key": config.api_key,
        "api_secret": config.api_secret,
        "api_url": config.api_url,
        "partner_key": config.partner_key or None,
        "timeout": config.timeout,
    }


class _BaseShipStation:
    """Credential handling, rate-limit bookkeeping and resource selection."""

    _helpers: dict[str, type]
    _endpoint_cls: type

    def __init__(
        self,
        api_key: str | None,
        api_secret: str | None,
        api_url: str = DEFAULT_API_URL,
        partner_key: str | None = None,
    ) -> None:
        self._headers = _build_headers(api_key, api_secret, partner_key)
        self.base_url = api_url
        self.endpoint = DEFAULT_ENDPOINT
        self.last_rate_limit: RateLimitInfo | None = None

    # -- resource selection --------------------------------------------------

    def resource(self, name: str) -> Any:
        """Return a view of this client scoped to resource *name*.

        Registered helpers (e.g. ``orders``) are returned as their helper
        type, other known resources as a generic endpoint. Unknown names
        return the client itself. The client's own ``endpoint`` is never
        changed.
        """
        endpoint = endpoint_for(name)
        helper_cls = self._helpers.get(name)
        if helper_cls is not None:
            return helper_cls(self, endpoint or self.endpoint)
        if endpoint is not None:
            return self._endpoint_cls(self, endpoint)
        return self

    def __getitem__(self, name: str) -> Any:
        return self.resource(name)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails.
        if name in _RESOURCE_NAMES or name in self._helpers:
            return self.resource(name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    # -- rate limits ---------------------------------------------------------

    def _record_rate_limit(self, method: str, url: str, response: httpx.Response) -> None:
        info = RateLimitInfo.from_headers(response.headers)
        self.last_rate_limit = info
        fields = {
            "method": method,
            "endpoint": url,
            "status_code": response.status_code,
            "rate_limit": info.limit,
            "remaining": info.remaining if info.remaining_observed else None,
            "reset": info.reset,
        }
        logger.debug(
            "ShipStation %s %s -> %d", method, url, response.status_code, extra=fields,
        )
        if info.exhausted:
            logger.warning(
                "ShipStation rate limit exhausted (%d requests); window resets in %ds",
                info.limit,
                info.reset,
                extra=fields,
            )

    @property
    def max_allowed_requests(self) -> int:
        return self.last_rate_limit.limit if self.last_rate_limit else 0

    @property
    def remaining_requests(self) -> int | None:
        """Requests left in the current window, *None* before any request."""
        return self.last_rate_limit.remaining if self.last_rate_limit else None

    @property
    def seconds_until_reset(self) -> int:
        return self.last_rate_limit.reset if self.last_rate_limit else 0

    def is_rate_limited(self) -> bool:
        """True once the server has reported zero remaining requests.

        A response without an ``X-Rate-Limit-Remaining`` header does not
        count as a report.
        """
        return self.last_rate_limit is not None and self.last_rate_limit.exhausted


# ---------------------------------------------------------------------------
# Async client
# ---------------------------------------------------------------------------


class AsyncShipStation(_BaseShipStation):
    """Async client for the ShipStation API (backed by ``httpx.AsyncClient``)."""

    _helpers = ASYNC_HELPERS
    _endpoint_cls = AsyncEndpoint

    def __init__(
        self,
        api_key: str | None,
        api_secret: str | None,
        api_url: str = DEFAULT_API_URL,
        partner_key: str | None = None,
        timeout: float = 30.0,
        *,
        _transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(api_key, api_secret, api_url, partner_key)
        kwargs: dict[str, Any] = {
            "base_url": api_url,
            "headers": self._headers,
            "timeout": timeout,
        }
        if _transport is not None:
            kwargs["transport"] = _transport
        self._client = httpx.AsyncClient(**kwargs)

    @classmethod
    def from_settings(
        cls,
        config: Settings | None = None,
        *,
        _transport: httpx.AsyncBaseTransport | None = None,
    ) -> AsyncShipStation:
        return cls(**_settings_kwargs(config), _transport=_transport)

    # -- context manager -----------------------------------------------------

    async def __aenter__(self) -> AsyncShipStation:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    # -- dispatch ------------------------------------------------------------

    async def request(
        self,
        method: str,
        path: str = "",
        options: Any = None,
        *,
        endpoint: str | None = None,
    ) -> Any:
        method = method.upper()
        url = f"{endpoint or self.endpoint}{path}"
        response = await self._client.request(method, url, **_request_kwargs(method, options))
        self._record_rate_limit(method, url, response)
        response.raise_for_status()
        return _decode(response)

    async def get(self, options: dict[str, Any] | None = None, path: str = "") -> Any:
        return await self.request("GET", path, options)

    async def post(self, options: Any = None, path: str = "") -> Any:
        return await self.request("POST", path, options)

    async def update(self, options: Any = None, path: str = "") -> Any:
        return await self.request("PUT", path, options)

    async def delete(self, path: str = "") -> Any:
        return await self.request("DELETE", path)


# ---------------------------------------------------------------------------
# Sync client
# ---------------------------------------------------------------------------


class ShipStation(_BaseShipStation):
    """Synchronous client for the ShipStation API (backed by ``httpx.Client``)."""

    _helpers = HELPERS
    _endpoint_cls = Endpoint

    def __init__(
        self,
        api_key: str | None,
        api_secret: str | None,
        api_url: str = DEFAULT_API_URL,
        partner_key: str | None = None,
        timeout: float = 30.0,
        *,
        _transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(api_key, api_secret, api_url, partner_key)
        kwargs: dict[str, Any] = {
            "base_url": api_url,
            "headers": self._headers,
            "timeout": timeout,
        }
        if _transport is not None:
            kwargs["transport"] = _transport
        self._client = httpx.Client(**kwargs)

    @classmethod
    def from_settings(
        cls,
        config: Settings | None = None,
        *,
        _transport: httpx.BaseTransport | None = None,
    ) -> ShipStation:
        return cls(**_settings_kwargs(config), _transport=_transport)

    # -- context manager -----------------------------------------------------

    def __enter__(self) -> ShipStation:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    # -- dispatch ------------------------------------------------------------

    def request(
        self,
        method: str,
        path: str = "",
        options: Any = None,
        *,
        endpoint: str | None = None,
    ) -> Any:
        """Send one request to ``endpoint + path`` and return the decoded body.

        *endpoint* defaults to the client's ``/orders/`` segment. The
        rate-limit snapshot is updated before the status is checked, so it
        reflects error responses too. ``httpx`` errors propagate unchanged.
        """
        method = method.upper()
        url = f"{endpoint or self.endpoint}{path}"
        response = self._client.request(method, url, **_request_kwargs(method, options))
        self._record_rate_limit(method, url, response)
        response.raise_for_status()
        return _decode(response)

    def get(self, options: dict[str, Any] | None = None, path: str = "") -> Any:
        return self.request("GET", path, options)

    def post(self, options: Any = None, path: str = "") -> Any:
        return self.request("POST", path, options)

    def update(self, options: Any = None, path: str = "") -> Any:
        return self.request("PUT", path, options)

    def delete(self, path: str = "") -> Any:
        return self.request("DELETE", path)
