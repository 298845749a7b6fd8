"""Sunrise/sunset lookup and day/night classification.

The solar-event source reports sunrise and sunset as 12-hour wall-clock
strings. They are anchored to today's date as UTC and then converted to local
time before being compared with the reference instant.
"""

from __future__ import annotations

import logging
from datetime import datetime

from daylight.datetime_utils import anchor_utc_time, ensure_local, local_now, parse_clock_time
from daylight.errors import ParseError
from daylight.http_client import DEFAULT_TIMEOUT_SECONDS, get_json
from daylight.models import Coordinate, SolarEvents, SunState

LOGGER = logging.getLogger(__name__)

SUN_API_URL = "https://api.sunrise-sunset.org/json"


def fetch_solar_events(
    coordinate: Coordinate,
    *,
    url: str = SUN_API_URL,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> SolarEvents:
    """Request today's sunrise and sunset for ``coordinate``."""
    payload = get_json(
        url,
        params={"lat": coordinate.latitude, "lng": coordinate.longitude},
        timeout=timeout,
    )
    status = payload.get("status")
    if status is not None and status != "OK":
        raise ParseError(f"Solar-event source answered with status '{status}'")
    results = payload.get("results")
    if not isinstance(results, dict):
        raise ParseError("Solar-event response has no 'results' object")
    sunrise = results.get("sunrise")
    sunset = results.get("sunset")
    if not isinstance(sunrise, str) or not isinstance(sunset, str):
        raise ParseError("Solar-event response is missing 'sunrise' or 'sunset'")
    return SolarEvents(sunrise=sunrise, sunset=sunset)


def event_to_local(raw: str, now: datetime) -> datetime:
    """Turn a reported event time into an instant in ``now``'s timezone."""
    try:
        clock = parse_clock_time(raw)
    except ValueError as exc:
        raise ParseError(str(exc)) from exc
    return anchor_utc_time(now.date(), clock, now.tzinfo)


def classify(sunrise: datetime, sunset: datetime, now: datetime) -> SunState:
    """``UP`` within ``[sunrise, sunset)``, ``DOWN`` otherwise."""
    if sunrise <= now < sunset:
        return SunState.UP
    return SunState.DOWN


def resolve(
    coordinate: Coordinate,
    *,
    now: datetime | None = None,
    url: str = SUN_API_URL,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> SunState:
    """Fetch today's solar events for ``coordinate`` and classify ``now``."""
    current = now or local_now()
    if current.tzinfo is None:
        current = ensure_local(current)
    events = fetch_solar_events(coordinate, url=url, timeout=timeout)
    sunrise = event_to_local(events.sunrise, current)
    sunset = event_to_local(events.sunset, current)
    state = classify(sunrise, sunset, current)
    LOGGER.info(
        "Sunrise %s, sunset %s at %s: sun is %s",
        sunrise.strftime("%H:%M:%S"),
        sunset.strftime("%H:%M:%S"),
        coordinate,
        state.name.lower(),
    )
    return state
