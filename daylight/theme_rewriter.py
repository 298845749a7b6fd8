"""Rewrite the color scheme anchor in a YAML terminal config.

Only lines referencing an anchor such as ``colors: *solarized_light_base``
are touched, and only their ``light``/``dark`` token changes. Every other
line is written back byte for byte, so comments and layout survive.
"""

from __future__ import annotations

import logging
import os
import re
import shutil
import tempfile
from pathlib import Path

from daylight.errors import ParseError, ThemeConfigNotFoundError
from daylight.models import SunState

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "alacritty" / "alacritty.yml"

# colors: *<prefix><light|dark><suffix>
_THEME_REFERENCE_RE = re.compile(r"colors: \*(?P<prefix>[_\w]+)(?P<mode>light|dark)(?P<suffix>[_\w]+)")


def rewrite_line(line: str, state: SunState) -> tuple[str, bool]:
    """Return ``(line, matched)`` with the anchor's mode token set to ``state``."""
    match = _THEME_REFERENCE_RE.search(line)
    if not match:
        return line, False
    start, end = match.span("mode")
    return f"{line[:start]}{state.mode}{line[end:]}", True


def rewrite_text(text: str, state: SunState) -> tuple[str, int]:
    """Rewrite every theme-reference line in ``text``.

    Returns the new text (newline terminated unless empty) and the number of
    lines that matched.
    """
    if not text:
        return text, 0
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()

    matches = 0
    result: list[str] = []
    for line in lines:
        new_line, matched = rewrite_line(line, state)
        if matched:
            matches += 1
        result.append(new_line)
    return "\n".join(result) + "\n", matches


def _replace_atomically(path: Path, content: str) -> None:
    """Write ``content`` next to ``path`` and move it into place."""
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
        shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


class ThemeRewriter:
    """Owns the read-modify-write cycle of the terminal config file."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or LOGGER

    def rewrite(self, path: Path, state: SunState) -> int:
        """Point every theme anchor in ``path`` at ``state``'s variant.

        Returns the number of rewritten lines.

        Raises:
            ThemeConfigNotFoundError: the config file does not exist.
            ParseError: the config file is not valid UTF-8.
            OSError: reading or replacing the file failed.
        """
        if not path.is_file():
            raise ThemeConfigNotFoundError(f"Config file '{path}' does not exist")
        # rewrite the link target, keep the symlink itself
        target = path.resolve()

        try:
            with target.open(encoding="utf-8", newline="") as handle:
                content = handle.read()
        except UnicodeDecodeError as exc:
            raise ParseError(f"Config file '{path}' is not valid UTF-8") from exc
        new_content, matches = rewrite_text(content, state)
        _replace_atomically(target, new_content)

        if matches:
            self._logger.info("Set %d theme reference(s) in '%s' to %s", matches, path, state.mode)
        else:
            self._logger.warning("No 'colors: *...' theme reference found in '%s'", path)
        return matches
