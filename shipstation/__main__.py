"""Entry point for ``python -m shipstation``: send one request and print the JSON result."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

import httpx

from shipstation.client import ShipStation
from shipstation.config import settings
from shipstation.exceptions import ConfigurationError
from shipstation.logging_config import setup_logging
from shipstation.models import ENDPOINTS, endpoint_for

logger = logging.getLogger(__name__)


def _build_options(method: str, params: list[str], data: str | None) -> Any:
    if params and method != "get":
        raise ValueError(f"--param is only valid with --method get, not {method}")
    if data is not None and method not in ("post", "put"):
        raise ValueError(f"--data is only valid with --method post or put, not {method}")
    if method == "get":
        options: dict[str, str] = {}
        for pair in params:
            key, sep, value = pair.partition("=")
            if not sep or not key:
                raise ValueError(f"--param expects KEY=VALUE, got {pair!r}")
            options[key] = value
        return options or None
    if data is None:
        return None
    try:
        return json.loads(data)
    except json.JSONDecodeError as exc:
        raise ValueError(f"--data is not valid JSON: {exc}") from exc


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Send one request to the ShipStation API")
    parser.add_argument(
        "resource",
        choices=[e.strip("/") for e in ENDPOINTS],
        help="Resource to address (e.g. orders, shipments)",
    )
    parser.add_argument(
        "path", nargs="?", default="",
        help="Sub-path below the resource (e.g. createorder or an id)",
    )
    parser.add_argument(
        "--method",
        choices=["get", "post", "put", "delete"],
        default="get",
        help="HTTP method (default: get)",
    )
    parser.add_argument(
        "--param", action="append", default=[], metavar="KEY=VALUE",
        help="Query parameter for GET requests (repeatable)",
    )
    parser.add_argument("--data", help="JSON body for POST/PUT requests")
    args = parser.parse_args(argv)

    setup_logging(settings.log_level, settings.log_format)

    try:
        options = _build_options(args.method, args.param, args.data)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        with ShipStation.from_settings() as client:
            result = client.request(
                args.method, args.path, options, endpoint=endpoint_for(args.resource),
            )
            logger.info(
                "Rate limit: %s/%d remaining, resets in %ds",
                client.remaining_requests,
                client.max_allowed_requests,
                client.seconds_until_reset,
            )
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 1
    except httpx.HTTPError as exc:
        logger.error("Request failed: %s", exc)
        return 1

    json.dump(result, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
