"""Blocking JSON GET helper shared by the geolocation and solar lookups."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from daylight.errors import NetworkError, ParseError

LOGGER = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


def get_json(url: str, params: dict[str, Any] | None = None, *, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> dict[str, Any]:
    """GET ``url`` and decode the body as a JSON object.

    Raises:
        NetworkError: malformed URL, transport failure or non-2xx status.
        ParseError: body is not a JSON object.
    """
    LOGGER.debug("GET %s params=%s", url, params)
    try:
        with httpx.Client(timeout=timeout) as client:
            response = client.get(url, params=params)
            response.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise NetworkError(f"Request to {url} failed: {exc}") from exc

    try:
        payload = response.json()
    except ValueError as exc:
        raise ParseError(f"Response from {url} is not valid JSON") from exc
    if not isinstance(payload, dict):
        raise ParseError(f"Response from {url} is not a JSON object")
    return payload
