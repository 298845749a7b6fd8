"""Error kinds raised by daylight-sync.

Everything except :class:`SessionError` is fatal for a run and propagates to
the CLI. Session failures are contained by the synchronizer.
"""

from __future__ import annotations


class DaylightError(Exception):
    """Base class for daylight-sync errors."""


class NetworkError(DaylightError):
    """A remote data source was unreachable or answered with a non-2xx status."""


class ParseError(DaylightError, ValueError):
    """A response, time string or coordinate could not be parsed."""


class ThemeConfigNotFoundError(DaylightError, FileNotFoundError):
    """The terminal config file that holds the theme anchor does not exist."""


class SessionError(DaylightError):
    """A single live session could not be reached or refused a command."""

    def __init__(self, socket_path: str, message: str) -> None:
        super().__init__(f"{socket_path}: {message}")
        self.socket_path = socket_path
