"""Command-line argument definitions for timeln."""

import argparse
from dataclasses import dataclass

from timeln.annotator import LAYOUTS, AnnotatorConfig
from timeln.summarizer import SUMMARIZERS
from timeln.timestamp_formatter import TIME_FORMATS

EPILOG = """
Examples:
  python your_script.py | timeln -c             Time every line, in color
  python your_script.py | timeln -r "ERROR.*"   Time only lines matching a regex
  make 2>&1 | timeln -s detailed                Print a summary when input ends
"""


@dataclass
class Args:
    regex: str | None
    color: bool
    time_format: str
    layout: str
    summary: str | None
    verbose: bool

    def __post_init__(self) -> None:
        assert isinstance(
            self.regex, (str, type(None))
        ), f"Expected str, got {type(self.regex)}"
        assert isinstance(self.color, bool), f"Expected bool, got {type(self.color)}"
        assert isinstance(
            self.time_format, str
        ), f"Expected str, got {type(self.time_format)}"
        assert isinstance(self.layout, str), f"Expected str, got {type(self.layout)}"
        assert isinstance(
            self.summary, (str, type(None))
        ), f"Expected str, got {type(self.summary)}"
        assert isinstance(
            self.verbose, bool
        ), f"Expected bool, got {type(self.verbose)}"

    def to_config(self) -> AnnotatorConfig:
        """Build the annotator configuration these arguments describe."""
        return AnnotatorConfig(
            pattern=self.regex,
            color=self.color,
            time_format=self.time_format,
            layout=self.layout,
        )

    @staticmethod
    def parse_args(argv: list[str] | None = None) -> "Args":
        """Parse command-line arguments and return Args instance."""
        return _parse_args(argv)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="timeln",
        description="Time lines (or regex matches) read from stdin.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )
    parser.add_argument(
        "-r",
        "--regex",
        help="Only time and print lines matching this regex",
        type=str,
    )
    parser.add_argument(
        "-c",
        "--color",
        help="Color timestamps green and regex matches red",
        action="store_true",
    )
    parser.add_argument(
        "-f",
        "--format",
        dest="time_format",
        help="Duration format (default: seconds)",
        choices=sorted(TIME_FORMATS),
        default="seconds",
    )
    parser.add_argument(
        "-l",
        "--layout",
        help="Line layout (default: plain)",
        choices=sorted(LAYOUTS),
        default="plain",
    )
    parser.add_argument(
        "-s",
        "--summary",
        help="Print a summary to stderr when input ends",
        choices=sorted(SUMMARIZERS),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        help="Enable debug logging on stderr",
        action="store_true",
    )
    return parser


def _parse_args(argv: list[str] | None = None) -> Args:
    """Parse command-line arguments."""
    tmp = _build_parser().parse_args(argv)

    out: Args = Args(
        regex=tmp.regex,
        color=tmp.color,
        time_format=tmp.time_format,
        layout=tmp.layout,
        summary=tmp.summary,
        verbose=tmp.verbose,
    )
    return out
