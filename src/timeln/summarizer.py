"""End-of-run summaries."""

from dataclasses import dataclass
from typing import Protocol

from timeln.console import Role, Styler
from timeln.timestamp_formatter import TimeFormat


@dataclass
class RunStats:
    """Counters collected by a single annotator run."""

    lines_read: int = 0
    lines_emitted: int = 0
    total_seconds: float = 0.0
    pattern_mode: bool = False

    @property
    def matches(self) -> int:
        """Emitted records that matched the pattern (0 outside pattern mode)."""
        return self.lines_emitted if self.pattern_mode else 0


class Summarizer(Protocol):
    def summarize(self, stats: RunStats, time_format: TimeFormat) -> str: ...


class SimpleSummarizer:
    """One bracketed line with totals."""

    name = "simple"

    def __init__(self, styler: Styler) -> None:
        self.styler = styler

    def summarize(self, stats: RunStats, time_format: TimeFormat) -> str:
        time_str = time_format.format_duration(stats.total_seconds)
        text = (
            f"[Processed Lines: {stats.lines_read}, Matches: {stats.matches}, "
            f"Total Time: {time_str}]"
        )
        return self.styler.style(text, Role.TIMESTAMP)


class DetailedSummarizer:
    """Totals plus the average time per line read."""

    name = "detailed"

    def __init__(self, styler: Styler) -> None:
        self.styler = styler

    def summarize(self, stats: RunStats, time_format: TimeFormat) -> str:
        time_str = time_format.format_duration(stats.total_seconds)
        if stats.lines_read > 0:
            average = stats.total_seconds / stats.lines_read
        else:
            average = 0.0
        avg_str = time_format.format_duration(average)
        text = (
            f"Processed {stats.lines_read} lines in {time_str} with "
            f"{stats.matches} matches. Average time per line: {avg_str}"
        )
        return self.styler.style(text, Role.TIMESTAMP)


SUMMARIZERS = {
    SimpleSummarizer.name: SimpleSummarizer,
    DetailedSummarizer.name: DetailedSummarizer,
}


def make_summarizer(name: str, styler: Styler) -> Summarizer:
    """Build the summarizer registered under name."""
    try:
        return SUMMARIZERS[name](styler)
    except KeyError:
        raise ValueError(
            f"Unknown summary style {name!r}, expected one of {sorted(SUMMARIZERS)}"
        ) from None
