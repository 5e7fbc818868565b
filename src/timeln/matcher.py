"""Regex matching helpers for pattern mode."""

import logging
import re
from dataclasses import dataclass

from timeln.errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Span:
    """Half-open [start, end) offsets of a match within a line."""

    start: int
    end: int

    def __post_init__(self) -> None:
        assert 0 <= self.start <= self.end, f"Invalid span {self.start}:{self.end}"

    def split(self, text: str) -> tuple[str, str, str]:
        """Split text into (before, matched, after)."""
        return text[: self.start], text[self.start : self.end], text[self.end :]


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a user supplied pattern.

    Args:
        pattern: Regular expression in Python `re` syntax

    Returns:
        The compiled pattern

    Raises:
        ConfigError: If the pattern is not a valid regular expression
    """
    try:
        compiled = re.compile(pattern)
    except re.error as e:
        raise ConfigError(f"Invalid regex {pattern!r}: {e}") from e
    logger.debug(f"Compiled pattern {pattern!r}")
    return compiled


def find_first(pattern: re.Pattern[str], text: str) -> Span | None:
    """Return the span of the first match of pattern in text, or None."""
    match = pattern.search(text)
    if match is None:
        return None
    return Span(*match.span())
