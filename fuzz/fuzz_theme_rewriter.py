import sys

import atheris

with atheris.instrument_imports():
    from daylight.models import SunState
    from daylight.theme_rewriter import rewrite_line, rewrite_text


def TestOneInput(data: bytes) -> None:
    """Fuzz the theme rewriter and check its line invariants."""
    text = data.decode("utf-8", errors="ignore")

    for state in SunState:
        rewritten, _ = rewrite_text(text, state)
        # Idempotent, and never adds or drops lines
        assert rewrite_text(rewritten, state)[0] == rewritten
        assert rewritten.count("\n") == (text.count("\n") + (0 if not text or text.endswith("\n") else 1))

        for line in text.split("\n"):
            new_line, matched = rewrite_line(line, state)
            if not matched:
                assert new_line == line


def main() -> None:
    atheris.Setup(sys.argv, TestOneInput)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
