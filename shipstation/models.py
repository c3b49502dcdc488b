"""Lightweight models used by the ShipStation client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

DEFAULT_API_URL = "https://ssapi.shipstation.com"

PARTNER_HEADER = "x-partner"

# Valid top-level resource segments on the ShipStation API.
ENDPOINTS: tuple[str, ...] = (
    "/accounts/",
    "/carriers/",
    "/customers/",
    "/fulfillments/",
    "/orders/",
    "/products/",
    "/shipments/",
    "/stores/",
    "/users/",
    "/warehouses/",
    "/webhooks/",
)

DEFAULT_ENDPOINT = "/orders/"


def endpoint_for(name: str) -> str | None:
    """Return the ``/name/`` segment for *name*, or *None* if it is not a resource."""
    segment = f"/{name}/"
    return segment if segment in ENDPOINTS else None


def _non_negative_int(raw: str | None) -> int:
    if raw is None:
        return 0
    try:
        value = int(raw.strip())
    except ValueError:
        return 0
    return max(value, 0)


@dataclass(frozen=True)
class RateLimitInfo:
    """Rate-limit window reported by the most recent response."""

    limit: int
    remaining: int
    reset: int
    remaining_observed: bool = False

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> RateLimitInfo:
        """Parse ``X-Rate-Limit-*`` headers.

        Missing, malformed or negative values are clamped to 0, so a snapshot
        is always produced. ``remaining_observed`` records whether the server
        sent a remaining count at all.
        """
        raw_remaining = headers.get("x-rate-limit-remaining")
        return cls(
            limit=_non_negative_int(headers.get("x-rate-limit-limit")),
            remaining=_non_negative_int(raw_remaining),
            reset=_non_negative_int(headers.get("x-rate-limit-reset")),
            remaining_observed=raw_remaining is not None,
        )

    @property
    def exhausted(self) -> bool:
        """True when the server reported zero requests left in the window."""
        return self.remaining_observed and self.remaining == 0
