"""Push the background mode to every running Neovim session.

Sessions are found by globbing for their RPC sockets. Each one is updated on
its own under a time limit, so a failure or a session that stops answering
only affects that session.
"""

from __future__ import annotations

import glob
import logging
import socket
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

import pynvim
from pynvim.api import NvimError

from daylight.errors import SessionError
from daylight.models import SunState

LOGGER = logging.getLogger(__name__)

DEFAULT_SOCKET_GLOBS: tuple[str, ...] = (
    "/tmp/nvim*/0",
    "/tmp/nvim.*/*/nvim.*.0",
)
DEFAULT_TIMEOUT_SECONDS = 2.0
DEFAULT_RELOAD_COMMAND = "AirlineTheme"

# pynvim surfaces transport failures as OSError/EOFError and remote errors as NvimError
_SESSION_ERRORS = (OSError, EOFError, NvimError)


class NvimClient(Protocol):
    def command(self, string: str, **kwargs: Any) -> Any: ...

    def command_output(self, string: str) -> str: ...

    def close(self) -> None: ...


def _check_socket(socket_path: Path, timeout: float) -> None:
    """Fail fast on stale sockets before handing the path to pynvim."""
    with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
        sock.settimeout(timeout)
        sock.connect(str(socket_path))


def attach_nvim(socket_path: Path, timeout: float) -> NvimClient:
    _check_socket(socket_path, timeout)
    return pynvim.attach("socket", path=str(socket_path))


@dataclass
class SyncTally:
    updated: list[Path] = field(default_factory=list)
    failed: dict[Path, str] = field(default_factory=dict)


class SessionSynchronizer:
    """Best-effort fan-out of ``set bg=...`` over live Neovim sessions."""

    def __init__(
        self,
        socket_globs: Iterable[str] = DEFAULT_SOCKET_GLOBS,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        reload_command: str | None = DEFAULT_RELOAD_COMMAND,
        connect: Callable[[Path, float], NvimClient] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._socket_globs = tuple(socket_globs)
        self._timeout = timeout
        self._reload_command = reload_command or None
        self._connect = connect or attach_nvim
        self._logger = logger or LOGGER
        self.last_tally = SyncTally()

    def discover(self) -> list[Path]:
        """Return the control sockets currently present, sorted and deduplicated."""
        found: set[Path] = set()
        for pattern in self._socket_globs:
            for candidate in glob.glob(pattern):
                path = Path(candidate)
                if path.is_socket():
                    found.add(path)
        return sorted(found)

    def sync_all(self, state: SunState) -> int:
        """Update every discovered session; return how many succeeded."""
        tally = SyncTally()
        for socket_path in self.discover():
            try:
                self._sync_session(socket_path, state)
            except SessionError as exc:
                self._logger.warning("Skipping Neovim session: %s", exc)
                tally.failed[socket_path] = str(exc)
            else:
                tally.updated.append(socket_path)

        self.last_tally = tally
        self._logger.info(
            "Neovim sessions: %d updated, %d failed",
            len(tally.updated),
            len(tally.failed),
        )
        return len(tally.updated)

    def _sync_session(self, socket_path: Path, state: SunState) -> None:
        """Run one session's update in a worker and give up after ``timeout``.

        pynvim requests have no deadline. A worker still running after
        ``timeout`` is abandoned; it is a daemon thread and ends with the
        process.
        """
        outcome: dict[str, Any] = {}
        worker = threading.Thread(
            target=self._session_worker,
            args=(socket_path, state, outcome),
            name=f"daylight-nvim:{socket_path}",
            daemon=True,
        )
        worker.start()
        worker.join(self._timeout)
        if worker.is_alive():
            raise SessionError(str(socket_path), f"timed out after {self._timeout:g}s")
        if "error" in outcome:
            raise outcome["error"]

    def _session_worker(self, socket_path: Path, state: SunState, outcome: dict[str, Any]) -> None:
        try:
            self._apply_state(socket_path, state)
        except SessionError as exc:
            outcome["error"] = exc
        except Exception as exc:  # pynvim raises more than it documents
            error = SessionError(str(socket_path), f"unexpected error: {exc!r}")
            error.__cause__ = exc
            outcome["error"] = error

    def _apply_state(self, socket_path: Path, state: SunState) -> None:
        try:
            nvim = self._connect(socket_path, self._timeout)
        except _SESSION_ERRORS as exc:
            raise SessionError(str(socket_path), f"connect failed: {exc}") from exc

        try:
            nvim.command(state.directive)
            if self._reload_command:
                # airline does not follow 'background' on its own
                theme = nvim.command_output(self._reload_command).strip()
                if theme:
                    nvim.command(f"{self._reload_command} {theme}")
        except _SESSION_ERRORS as exc:
            raise SessionError(str(socket_path), f"command failed: {exc}") from exc
        finally:
            try:
                nvim.close()
            except (OSError, EOFError) as exc:
                self._logger.debug("Closing %s failed: %s", socket_path, exc)
        self._logger.debug("Set '%s' in %s", state.directive, socket_path)
