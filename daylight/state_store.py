"""Last-applied sun state, persisted as a one-line vim script.

The file doubles as a vim include (``source ~/.daylight.vim``) so new editor
sessions start with the right background.
"""

from __future__ import annotations

import logging
from pathlib import Path

from daylight.errors import ParseError
from daylight.models import SunState

LOGGER = logging.getLogger(__name__)

DEFAULT_STATE_PATH = Path.home() / ".daylight.vim"
DEFAULT_STATE = SunState.UP


class StateStore:
    """Reads and writes the persisted state file."""

    def __init__(self, path: Path | None = None, logger: logging.Logger | None = None) -> None:
        self._path = path or DEFAULT_STATE_PATH
        self._logger = logger or LOGGER

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> SunState:
        """Return the persisted state, creating the file on first use."""
        if not self._path.is_file():
            self._logger.warning(
                "State file '%s' was missing; created it with '%s'",
                self._path,
                DEFAULT_STATE.directive,
            )
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self.write(DEFAULT_STATE)
            return DEFAULT_STATE

        try:
            content = self._path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError(f"State file '{self._path}' is not valid UTF-8") from exc
        # substring match tolerates whitespace and newline variations
        return SunState.DOWN if "dark" in content else SunState.UP

    def write(self, state: SunState) -> None:
        """Replace the file contents with the directive for ``state``."""
        self._path.write_text(f"{state.directive}\n", encoding="utf-8")
        self._logger.debug("Wrote '%s' to '%s'", state.directive, self._path)
