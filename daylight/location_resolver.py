from __future__ import annotations

import logging

from daylight.errors import ParseError
from daylight.http_client import DEFAULT_TIMEOUT_SECONDS, get_json
from daylight.models import Coordinate

LOGGER = logging.getLogger(__name__)

GEOLOCATION_URL = "https://ipinfo.io/json"


def locate(url: str = GEOLOCATION_URL, *, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> Coordinate:
    """Approximate the caller's coordinate from its public IP address.

    The source answers with a ``loc`` field shaped ``"<lat>,<lon>"``.
    """
    payload = get_json(url, timeout=timeout)
    loc = payload.get("loc")
    if not isinstance(loc, str):
        raise ParseError(f"Geolocation response from {url} has no 'loc' field")
    coordinate = Coordinate.parse(loc)
    LOGGER.debug("Located %s via %s", coordinate, url)
    return coordinate


def resolve_coordinate(
    override: str | None,
    *,
    url: str = GEOLOCATION_URL,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> Coordinate:
    """Use an explicit ``"lat,lon"`` override when given, else :func:`locate`."""
    if override is not None and override.strip():
        return Coordinate.parse(override)
    return locate(url, timeout=timeout)
