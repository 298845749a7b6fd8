"""Configuration for daylight-sync.

Values come from an optional ``KEY=VALUE`` conf file, overlaid by environment
variables, overlaid by command-line flags.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from daylight.http_client import DEFAULT_TIMEOUT_SECONDS
from daylight.location_resolver import GEOLOCATION_URL
from daylight.models import SunState
from daylight.sessions import DEFAULT_RELOAD_COMMAND, DEFAULT_SOCKET_GLOBS
from daylight.sessions import DEFAULT_TIMEOUT_SECONDS as DEFAULT_SESSION_TIMEOUT
from daylight.solar import SUN_API_URL
from daylight.state_store import DEFAULT_STATE_PATH
from daylight.theme_rewriter import DEFAULT_CONFIG_PATH
from daylight.utils import expand_path, parse_float, split_csv, strip_or_none, strip_quotes

CONF_FILENAME = "daylight.conf"
DEFAULT_NVIM_INIT_PATH = Path.home() / ".config" / "nvim" / "init.vim"


def get_config_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get config directory (XDG compliant)."""
    source = os.environ if env is None else env
    if env_dir := source.get("XDG_CONFIG_HOME"):
        return Path(env_dir) / "daylight"
    return Path.home() / ".config" / "daylight"


def read_conf_file(path: Path) -> dict[str, str]:
    """Read ``KEY=VALUE`` lines; comments, blanks and malformed lines are skipped."""
    values: dict[str, str] = {}
    try:
        with path.open(encoding="utf-8") as handle:
            for raw_line in handle:
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, value = line.split("=", 1)
                values[key.strip().upper()] = strip_quotes(value)
    except FileNotFoundError:
        pass
    return values


def _path_or(value: str | None, default: Path) -> Path:
    stripped = strip_or_none(value)
    return expand_path(stripped) if stripped else default


def _parse_force(value: str | None) -> SunState | None:
    stripped = strip_or_none(value)
    if stripped is None:
        return None
    return SunState.from_name(stripped)


@dataclass(frozen=True)
class DaylightConfig:
    state_file: Path
    alacritty_config: Path
    nvim_init: Path
    location: str | None
    force: SunState | None
    geolocation_url: str
    sun_api_url: str
    http_timeout: float
    nvim_socket_globs: tuple[str, ...]
    nvim_timeout: float
    nvim_reload_command: str | None

    @staticmethod
    def load(env: Mapping[str, str] | None = None, conf_path: Path | None = None) -> DaylightConfig:
        environ = os.environ if env is None else env
        if conf_path is None:
            conf_override = strip_or_none(environ.get("DAYLIGHT_CONF"))
            conf_path = expand_path(conf_override) if conf_override else get_config_dir(environ) / CONF_FILENAME

        source: dict[str, str] = read_conf_file(conf_path)
        source.update({key: value for key, value in environ.items() if key.startswith("DAYLIGHT_")})

        socket_globs = tuple(split_csv(source.get("DAYLIGHT_NVIM_SOCKET_GLOBS"))) or DEFAULT_SOCKET_GLOBS
        reload_command = source.get("DAYLIGHT_NVIM_RELOAD_COMMAND", DEFAULT_RELOAD_COMMAND)

        return DaylightConfig(
            state_file=_path_or(source.get("DAYLIGHT_STATE_FILE"), DEFAULT_STATE_PATH),
            alacritty_config=_path_or(source.get("DAYLIGHT_ALACRITTY_CONFIG"), DEFAULT_CONFIG_PATH),
            nvim_init=_path_or(source.get("DAYLIGHT_NVIM_INIT"), DEFAULT_NVIM_INIT_PATH),
            location=strip_or_none(source.get("DAYLIGHT_LOCATION")),
            force=_parse_force(source.get("DAYLIGHT_FORCE")),
            geolocation_url=source.get("DAYLIGHT_GEOLOCATION_URL") or GEOLOCATION_URL,
            sun_api_url=source.get("DAYLIGHT_SUN_API_URL") or SUN_API_URL,
            http_timeout=parse_float(source.get("DAYLIGHT_HTTP_TIMEOUT"), DEFAULT_TIMEOUT_SECONDS),
            nvim_socket_globs=socket_globs,
            nvim_timeout=parse_float(source.get("DAYLIGHT_NVIM_TIMEOUT"), DEFAULT_SESSION_TIMEOUT),
            nvim_reload_command=strip_or_none(reload_command),
        )

    def with_overrides(
        self,
        *,
        alacritty_config: str | None = None,
        nvim_init: str | None = None,
        state_file: str | None = None,
        location: str | None = None,
        force: SunState | None = None,
    ) -> DaylightConfig:
        """Apply command-line overrides; ``None`` keeps the configured value."""
        updated = self
        if alacritty_config:
            updated = replace(updated, alacritty_config=expand_path(alacritty_config))
        if nvim_init:
            updated = replace(updated, nvim_init=expand_path(nvim_init))
        if state_file:
            updated = replace(updated, state_file=expand_path(state_file))
        if location:
            updated = replace(updated, location=location.strip())
        if force is not None:
            updated = replace(updated, force=force)
        return updated
