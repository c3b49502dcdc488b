"""Exception hierarchy for the ShipStation client.

Errors raised while talking to the API are ``httpx`` exceptions and reach the
caller unchanged; only configuration problems are reported with these types.
"""

from __future__ import annotations


class ShipStationError(Exception):
    """Base exception for all ShipStation client errors."""


class ConfigurationError(ShipStationError):
    """Raised when the API key and/or secret are missing."""
