"""Shared value types for daylight-sync."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from daylight.errors import ParseError

_STATE_ALIASES = {
    "up": "UP",
    "light": "UP",
    "down": "DOWN",
    "dark": "DOWN",
}


class SunState(Enum):
    """Day/night classification driving the visual mode."""

    UP = "light"
    DOWN = "dark"

    @property
    def mode(self) -> str:
        """Mode token used in theme anchors (``light`` / ``dark``)."""
        return self.value

    @property
    def directive(self) -> str:
        """Vim directive persisted in the state file."""
        return f"set bg={self.value}"

    @classmethod
    def from_name(cls, raw: str) -> SunState:
        """Parse a user supplied state name (case-insensitive).

        Accepts ``up``/``down`` and the ``light``/``dark`` aliases.
        """
        key = _STATE_ALIASES.get(raw.strip().lower())
        if key is None:
            raise ValueError(f"Unknown sun state '{raw}' (expected one of: {', '.join(_STATE_ALIASES)})")
        return cls[key]


@dataclass(frozen=True, slots=True)
class Coordinate:
    latitude: float
    longitude: float

    @classmethod
    def parse(cls, raw: str | None) -> Coordinate:
        """Parse a ``"lat,lon"`` string.

        At least two comma-separated numeric parts are required; extra parts
        must still be numeric and are ignored.
        """
        if raw is None or not raw.strip():
            raise ParseError("Missing coordinate")
        parts = [part.strip() for part in raw.split(",")]
        if len(parts) < 2:
            raise ParseError(f"Coordinate '{raw}' is not of the form 'lat,lon'")
        try:
            values = [float(part) for part in parts]
        except ValueError as exc:
            raise ParseError(f"Coordinate '{raw}' contains a non-numeric part") from exc
        lat, lon = values[0], values[1]
        if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
            raise ParseError(f"Coordinate '{raw}' is out of range")
        return cls(latitude=lat, longitude=lon)

    def __str__(self) -> str:
        return f"{self.latitude:.4f},{self.longitude:.4f}"


@dataclass(frozen=True, slots=True)
class SolarEvents:
    """Raw sunrise/sunset strings as reported by the solar-event source."""

    sunrise: str
    sunset: str
