"""Tests for daylight.config — conf file and environment parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from daylight.config import DaylightConfig, get_config_dir, read_conf_file
from daylight.http_client import DEFAULT_TIMEOUT_SECONDS
from daylight.location_resolver import GEOLOCATION_URL
from daylight.models import SunState
from daylight.sessions import DEFAULT_SOCKET_GLOBS
from daylight.solar import SUN_API_URL
from daylight.state_store import DEFAULT_STATE_PATH
from daylight.theme_rewriter import DEFAULT_CONFIG_PATH


@pytest.fixture
def no_conf(tmp_path) -> Path:
    return tmp_path / "absent.conf"


class TestGetConfigDir:
    def test_xdg_config_home(self) -> None:
        assert get_config_dir({"XDG_CONFIG_HOME": "/xdg"}) == Path("/xdg/daylight")

    def test_home_fallback(self) -> None:
        assert get_config_dir({}) == Path.home() / ".config" / "daylight"


class TestReadConfFile:
    def test_missing_file_returns_empty(self, tmp_path) -> None:
        assert read_conf_file(tmp_path / "nope.conf") == {}

    def test_parses_assignments(self, tmp_path) -> None:
        path = tmp_path / "daylight.conf"
        path.write_text(
            "# daylight settings\n"
            "\n"
            'DAYLIGHT_LOCATION="59.91,10.75"\n'
            "daylight_force = dark\n"
            "not an assignment\n"
            "DAYLIGHT_NVIM_RELOAD_COMMAND='LightlineTheme'\n",
            encoding="utf-8",
        )
        assert read_conf_file(path) == {
            "DAYLIGHT_LOCATION": "59.91,10.75",
            "DAYLIGHT_FORCE": "dark",
            "DAYLIGHT_NVIM_RELOAD_COMMAND": "LightlineTheme",
        }


class TestDaylightConfigLoad:
    def test_defaults(self, no_conf) -> None:
        config = DaylightConfig.load({}, conf_path=no_conf)

        assert config.state_file == Path.home() / ".daylight.vim"
        assert config.alacritty_config == Path.home() / ".config" / "alacritty" / "alacritty.yml"
        assert config.nvim_init == Path.home() / ".config" / "nvim" / "init.vim"
        assert config.location is None
        assert config.force is None
        assert config.geolocation_url == GEOLOCATION_URL
        assert config.sun_api_url == SUN_API_URL
        assert config.http_timeout == DEFAULT_TIMEOUT_SECONDS
        assert config.nvim_socket_globs == DEFAULT_SOCKET_GLOBS
        assert config.nvim_timeout == 2.0
        assert config.nvim_reload_command == "AirlineTheme"

    def test_default_paths_match_component_defaults(self, no_conf) -> None:
        config = DaylightConfig.load({}, conf_path=no_conf)

        assert config.state_file == DEFAULT_STATE_PATH
        assert config.alacritty_config == DEFAULT_CONFIG_PATH

    def test_blank_path_values_fall_back_to_defaults(self, no_conf) -> None:
        config = DaylightConfig.load({"DAYLIGHT_STATE_FILE": "  ", "DAYLIGHT_ALACRITTY_CONFIG": ""}, conf_path=no_conf)

        assert config.state_file == DEFAULT_STATE_PATH
        assert config.alacritty_config == DEFAULT_CONFIG_PATH

    def test_environment_values(self, no_conf, tmp_path) -> None:
        env = {
            "DAYLIGHT_STATE_FILE": str(tmp_path / "state.vim"),
            "DAYLIGHT_ALACRITTY_CONFIG": str(tmp_path / "alacritty.yml"),
            "DAYLIGHT_LOCATION": " 1.5,2.5 ",
            "DAYLIGHT_FORCE": "Down",
            "DAYLIGHT_HTTP_TIMEOUT": "3.5",
            "DAYLIGHT_NVIM_SOCKET_GLOBS": "/run/nvim/*.sock, /tmp/nvim*/0",
            "DAYLIGHT_NVIM_TIMEOUT": "bogus",
            "DAYLIGHT_NVIM_RELOAD_COMMAND": "",
        }
        config = DaylightConfig.load(env, conf_path=no_conf)

        assert config.state_file == tmp_path / "state.vim"
        assert config.alacritty_config == tmp_path / "alacritty.yml"
        assert config.location == "1.5,2.5"
        assert config.force is SunState.DOWN
        assert config.http_timeout == 3.5
        assert config.nvim_socket_globs == ("/run/nvim/*.sock", "/tmp/nvim*/0")
        assert config.nvim_timeout == 2.0
        assert config.nvim_reload_command is None

    def test_environment_overrides_conf_file(self, tmp_path) -> None:
        conf = tmp_path / "daylight.conf"
        conf.write_text("DAYLIGHT_FORCE=light\nDAYLIGHT_LOCATION=3,4\n", encoding="utf-8")

        config = DaylightConfig.load({"DAYLIGHT_FORCE": "dark"}, conf_path=conf)

        assert config.force is SunState.DOWN
        assert config.location == "3,4"

    def test_conf_path_from_environment(self, tmp_path) -> None:
        conf = tmp_path / "custom.conf"
        conf.write_text("DAYLIGHT_LOCATION=5,6\n", encoding="utf-8")
        assert DaylightConfig.load({"DAYLIGHT_CONF": str(conf)}).location == "5,6"

    def test_conf_file_in_xdg_dir(self, tmp_path) -> None:
        conf_dir = tmp_path / "daylight"
        conf_dir.mkdir()
        (conf_dir / "daylight.conf").write_text("DAYLIGHT_FORCE=up\n", encoding="utf-8")
        assert DaylightConfig.load({"XDG_CONFIG_HOME": str(tmp_path)}).force is SunState.UP

    def test_tilde_is_expanded(self, no_conf) -> None:
        config = DaylightConfig.load({"DAYLIGHT_STATE_FILE": "~/state.vim"}, conf_path=no_conf)
        assert config.state_file == Path.home() / "state.vim"

    def test_invalid_force_raises(self, no_conf) -> None:
        with pytest.raises(ValueError):
            DaylightConfig.load({"DAYLIGHT_FORCE": "twilight"}, conf_path=no_conf)


class TestWithOverrides:
    def test_none_keeps_values(self, no_conf) -> None:
        config = DaylightConfig.load({}, conf_path=no_conf)
        assert config.with_overrides() == config

    def test_overrides_apply(self, no_conf, tmp_path) -> None:
        config = DaylightConfig.load({"DAYLIGHT_FORCE": "up"}, conf_path=no_conf).with_overrides(
            alacritty_config=str(tmp_path / "a.yml"),
            nvim_init="~/init.lua",
            state_file=str(tmp_path / "s.vim"),
            location="7,8",
            force=SunState.DOWN,
        )
        assert config.alacritty_config == tmp_path / "a.yml"
        assert config.nvim_init == Path.home() / "init.lua"
        assert config.state_file == tmp_path / "s.vim"
        assert config.location == "7,8"
        assert config.force is SunState.DOWN
