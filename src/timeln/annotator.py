"""Streaming line timer.

Reads lines one at a time, stamps each emitted line with the time elapsed
since the run started and the time since the previous emitted line, and
writes it out immediately. In pattern mode only lines containing a match are
emitted and the first match is highlighted.

Durations come from a monotonic clock. The default output looks like:

    0.001s     0.001s first line
    1.503s     1.502s second line
"""

import logging
import re
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import IO, AnyStr

from timeln.console import Role, Styler, make_styler
from timeln.errors import InputError, OutputError
from timeln.matcher import Span, compile_pattern, find_first
from timeln.summarizer import RunStats
from timeln.timestamp_formatter import TIME_FORMATS, TimeFormat, get_time_format

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


@dataclass(frozen=True)
class Layout:
    """How the two duration fields and the text are arranged on a line."""

    name: str
    template: str
    align: bool  # right-align durations to the time format's width


LAYOUTS = {
    layout.name: layout
    for layout in (
        Layout("plain", "{elapsed} {delta} {text}", align=True),
        Layout("bracket", "[time: {elapsed}, delta: {delta}] {text}", align=False),
        Layout("unicode", "[Τ: {elapsed}, Δ: {delta}] {text}", align=False),
    )
}


@dataclass
class AnnotatorConfig:
    pattern: str | None = None
    color: bool = False
    time_format: str = "seconds"
    layout: str = "plain"

    def __post_init__(self) -> None:
        assert isinstance(
            self.pattern, (str, type(None))
        ), f"Expected str, got {type(self.pattern)}"
        assert isinstance(self.color, bool), f"Expected bool, got {type(self.color)}"
        assert (
            self.time_format in TIME_FORMATS
        ), f"Unknown time format {self.time_format!r}"
        assert self.layout in LAYOUTS, f"Unknown layout {self.layout!r}"


class LineAnnotator:
    """Formats one emitted record."""

    def __init__(self, time_format: TimeFormat, layout: Layout, styler: Styler):
        self.time_format = time_format
        self.layout = layout
        self.styler = styler

    def _field(self, seconds: float) -> str:
        raw = self.time_format.format_duration(seconds)
        # Pad outside the styled region so escape codes don't count toward width.
        padding = ""
        if self.layout.align:
            padding = " " * max(0, self.time_format.width - len(raw))
        return padding + self.styler.style(raw, Role.TIMESTAMP)

    def format_line(
        self, text: str, elapsed: float, delta: float, span: Span | None = None
    ) -> str:
        """Render text with its elapsed and delta fields.

        Args:
            text: The record, terminator already stripped
            elapsed: Seconds since the run started
            delta: Seconds since the previous emitted record
            span: Match to highlight within text, if any

        Returns:
            The annotated line without a trailing newline
        """
        if span is not None:
            before, matched, after = span.split(text)
            text = before + self.styler.style(matched, Role.HIGHLIGHT) + after
        return self.layout.template.format(
            elapsed=self._field(elapsed), delta=self._field(delta), text=text
        )


def strip_terminator(line: str) -> str:
    """Remove a single trailing \\n, \\r\\n or \\r."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


class StreamAnnotator:
    """Single pass read → annotate → write loop.

    Raises ConfigError on construction if the pattern does not compile.
    """

    def __init__(self, config: AnnotatorConfig, clock: Clock = time.monotonic):
        self.config = config
        self.clock = clock
        self.pattern: re.Pattern[str] | None = None
        if config.pattern is not None:
            self.pattern = compile_pattern(config.pattern)
        self.styler = make_styler(config.color)
        self.time_format = get_time_format(config.time_format)
        self.line_annotator = LineAnnotator(
            self.time_format, LAYOUTS[config.layout], self.styler
        )
        self.stats = RunStats(pattern_mode=self.pattern is not None)

    def run(self, input_stream: IO[AnyStr], output_stream: IO[str]) -> RunStats:
        """Annotate input_stream onto output_stream until end of input.

        Returns:
            Counters for the run

        Raises:
            InputError: If reading fails before end of input
            OutputError: If writing or flushing fails
        """
        stats = self.stats = RunStats(pattern_mode=self.pattern is not None)
        start = self.clock()
        last = start
        logger.debug(
            f"Starting run (pattern={self.config.pattern!r}, color={self.config.color})"
        )
        try:
            while True:
                line = self._read_line(input_stream)
                if line is None:
                    break
                stats.lines_read += 1

                span = None
                if self.pattern is not None:
                    span = find_first(self.pattern, line)
                    if span is None:
                        continue

                now = self.clock()
                elapsed = now - start
                delta = now - last
                last = now

                self._write_line(
                    output_stream,
                    self.line_annotator.format_line(line, elapsed, delta, span),
                )
                stats.lines_emitted += 1
        finally:
            stats.total_seconds = self.clock() - start
            logger.debug(f"Run finished: {stats}")
        return stats

    def _read_line(self, stream: IO[AnyStr]) -> str | None:
        try:
            raw = stream.readline()
        except (OSError, ValueError) as e:
            raise InputError(f"Failed to read input: {e}", e) from e
        if not raw:
            return None
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8", errors="replace")
        return strip_terminator(raw)

    def _write_line(self, stream: IO[str], line: str) -> None:
        try:
            stream.write(line + "\n")
            stream.flush()
        except (OSError, ValueError) as e:
            raise OutputError(f"Failed to write output: {e}", e) from e
