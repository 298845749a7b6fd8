"""Single-run orchestration: decide the target state and apply it on change."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from daylight import solar
from daylight.config import DaylightConfig
from daylight.location_resolver import resolve_coordinate
from daylight.models import SunState
from daylight.sessions import SessionSynchronizer
from daylight.state_store import StateStore
from daylight.theme_rewriter import ThemeRewriter

LOGGER = logging.getLogger(__name__)


class DaylightSync:
    """Compares the wanted state with the persisted one and syncs all targets."""

    def __init__(
        self,
        *,
        resolve_state: Callable[[], SunState],
        store: StateStore,
        rewriter: ThemeRewriter,
        sessions: SessionSynchronizer,
        config_path: Path,
        logger: logging.Logger | None = None,
    ) -> None:
        self._resolve_state = resolve_state
        self._store = store
        self._rewriter = rewriter
        self._sessions = sessions
        self._config_path = config_path
        self._logger = logger or LOGGER

    @classmethod
    def from_config(cls, config: DaylightConfig, logger: logging.Logger | None = None) -> DaylightSync:
        def resolve_state() -> SunState:
            coordinate = resolve_coordinate(
                config.location,
                url=config.geolocation_url,
                timeout=config.http_timeout,
            )
            return solar.resolve(coordinate, url=config.sun_api_url, timeout=config.http_timeout)

        return cls(
            resolve_state=resolve_state,
            store=StateStore(config.state_file, logger=logger),
            rewriter=ThemeRewriter(logger=logger),
            sessions=SessionSynchronizer(
                config.nvim_socket_globs,
                timeout=config.nvim_timeout,
                reload_command=config.nvim_reload_command,
                logger=logger,
            ),
            config_path=config.alacritty_config,
            logger=logger,
        )

    def target_state(self, forced_state: SunState | None = None) -> SunState:
        if forced_state is not None:
            self._logger.info("Forcing %s mode", forced_state.mode)
            return forced_state
        return self._resolve_state()

    def run(self, forced_state: SunState | None = None) -> bool:
        """Apply the target state if it differs from the persisted one.

        Returns True when a transition was applied. Session failures are
        contained; state file and config file errors propagate.
        """
        target = self.target_state(forced_state)
        current = self._store.read()
        if target == current:
            self._logger.info("Already in %s mode, nothing to do", current.mode)
            return False

        self._logger.info("Switching from %s to %s mode", current.mode, target.mode)
        # live sessions first so the change is visible right away
        self._sessions.sync_all(target)
        self._store.write(target)
        self._rewriter.rewrite(self._config_path, target)
        return True
