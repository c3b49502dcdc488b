"""Tests for RateLimitInfo parsing and the resource table."""

from __future__ import annotations

import httpx
import pytest

from shipstation.models import DEFAULT_ENDPOINT, ENDPOINTS, RateLimitInfo, endpoint_for


class TestRateLimitInfo:
    def test_from_headers_present(self):
        info = RateLimitInfo.from_headers(
            {
                "x-rate-limit-limit": "40",
                "x-rate-limit-remaining": "0",
                "x-rate-limit-reset": "60",
            }
        )
        assert info == RateLimitInfo(
            limit=40, remaining=0, reset=60, remaining_observed=True,
        )
        assert info.exhausted is True

    def test_from_headers_case_insensitive(self):
        headers = httpx.Headers(
            {"X-Rate-Limit-Limit": "40", "X-Rate-Limit-Remaining": "7", "X-Rate-Limit-Reset": "9"}
        )
        assert RateLimitInfo.from_headers(headers) == RateLimitInfo(40, 7, 9, remaining_observed=True)

    def test_from_headers_absent(self):
        info = RateLimitInfo.from_headers({})
        assert info == RateLimitInfo(0, 0, 0)
        assert info.remaining_observed is False
        assert info.exhausted is False

    def test_exhausted_requires_reported_remaining(self):
        assert RateLimitInfo.from_headers({"x-rate-limit-remaining": "-3"}).exhausted is True
        assert RateLimitInfo.from_headers({"x-rate-limit-remaining": "1"}).exhausted is False

    @pytest.mark.parametrize("raw", ["-1", "abc", "", "1.5"])
    def test_bad_values_clamp_to_zero(self, raw):
        info = RateLimitInfo.from_headers({"x-rate-limit-limit": raw})
        assert info.limit == 0

    def test_whitespace_tolerated(self):
        assert RateLimitInfo.from_headers({"x-rate-limit-reset": " 12 "}).reset == 12

    def test_frozen(self):
        info = RateLimitInfo(limit=40, remaining=39, reset=60)
        with pytest.raises(AttributeError):
            info.limit = 0  # type: ignore[misc]


class TestEndpoints:
    def test_eleven_resources(self):
        assert len(ENDPOINTS) == 11
        assert DEFAULT_ENDPOINT in ENDPOINTS

    def test_endpoint_for_known(self):
        assert endpoint_for("shipments") == "/shipments/"

    @pytest.mark.parametrize("name", ["bogus", "Orders", "", "orders/"])
    def test_endpoint_for_unknown(self, name):
        assert endpoint_for(name) is None
