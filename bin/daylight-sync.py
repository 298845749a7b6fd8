#!/usr/bin/env python3
"""Switch terminal and Neovim between light and dark mode by the sun.

Meant to be run periodically (cron, systemd timer). A run that finds the
persisted state already matching the sun does nothing.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

try:
    from daylight.config import DaylightConfig
except ModuleNotFoundError:
    repo_dir = Path(__file__).resolve().parents[1]
    if str(repo_dir) not in sys.path:
        sys.path.insert(0, str(repo_dir))
    from daylight.config import DaylightConfig

from daylight.errors import DaylightError
from daylight.models import SunState
from daylight.orchestrator import DaylightSync

LOGGER = logging.getLogger("daylight-sync")


def _sun_state(value: str) -> SunState:
    try:
        return SunState.from_name(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "-a",
        "--alacritty",
        help="Alacritty config path (default: ~/.config/alacritty/alacritty.yml).",
    )
    parser.add_argument(
        "-n",
        "--nvim-init",
        help="Neovim init file path (default: ~/.config/nvim/init.vim).",
    )
    parser.add_argument(
        "-f",
        "--force",
        type=_sun_state,
        metavar="{up,down,light,dark}",
        help="Force a light (up) or dark (down) mode instead of asking the sun.",
    )
    parser.add_argument("--state-file", help="State file path (default: ~/.daylight.vim).")
    parser.add_argument("--location", help="Use this 'lat,lon' instead of IP geolocation.")
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = DaylightConfig.load().with_overrides(
            alacritty_config=args.alacritty,
            nvim_init=args.nvim_init,
            state_file=args.state_file,
            location=args.location,
            force=args.force,
        )
    except ValueError as exc:
        LOGGER.error("Invalid configuration: %s", exc)
        return 1
    LOGGER.debug("Neovim init file: %s", config.nvim_init)

    try:
        DaylightSync.from_config(config).run(config.force)
    except (DaylightError, OSError) as exc:
        LOGGER.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
