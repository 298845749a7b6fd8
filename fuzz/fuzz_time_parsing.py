import sys

import atheris

with atheris.instrument_imports():
    from daylight.datetime_utils import parse_clock_time
    from daylight.errors import ParseError
    from daylight.models import Coordinate, SunState


def TestOneInput(data: bytes) -> None:
    """Fuzz clock time, coordinate and state parsing with arbitrary input."""
    value = data.decode("utf-8", errors="ignore")

    try:
        parse_clock_time(value)
    except ValueError:
        pass  # Expected for invalid input

    # ParseError is the only failure Coordinate.parse may raise
    try:
        Coordinate.parse(value)
    except ParseError:
        pass

    try:
        SunState.from_name(value)
    except ValueError:
        pass  # Expected for invalid input


def main() -> None:
    atheris.Setup(sys.argv, TestOneInput)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
