"""Duration formats used for the elapsed and delta columns."""

from typing import Protocol


class TimeFormat(Protocol):
    """Renders a duration given in seconds.

    `width` is the column width typical durations fit into; plain layouts
    right-align to it so successive lines line up.
    """

    name: str
    width: int

    def format_duration(self, seconds: float) -> str: ...


class SecondsFormat:
    """Fixed-point seconds with millisecond resolution.

    Format: "5.500s"
    """

    name = "seconds"
    width = 10

    def format_duration(self, seconds: float) -> str:
        return f"{seconds:.3f}s"


class MillisecondsFormat:
    """Fixed-point milliseconds with 10 microsecond resolution.

    Format: "5500.00ms"
    """

    name = "millis"
    width = 13

    def format_duration(self, seconds: float) -> str:
        return f"{seconds * 1e3:.2f}ms"


class MinutesSecondsFormat:
    """Whole minutes followed by zero-padded seconds.

    Format: "2m05.000s"
    """

    name = "minutes"
    width = 11

    def format_duration(self, seconds: float) -> str:
        minutes, rest = divmod(seconds, 60.0)
        # Rounding 59.9996 up to "60.000" would print an impossible value.
        if round(rest, 3) >= 60.0:
            minutes, rest = minutes + 1, 0.0
        return f"{int(minutes)}m{rest:06.3f}s"


TIME_FORMATS: dict[str, TimeFormat] = {
    fmt.name: fmt
    for fmt in (SecondsFormat(), MillisecondsFormat(), MinutesSecondsFormat())
}


def get_time_format(name: str) -> TimeFormat:
    """Look up a duration format by its CLI name."""
    try:
        return TIME_FORMATS[name]
    except KeyError:
        raise ValueError(
            f"Unknown time format {name!r}, expected one of {sorted(TIME_FORMATS)}"
        ) from None
