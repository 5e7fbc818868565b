"""
Entry point for the timeln command.

  * parse flags
  * compile the regex (exit 2 if it is invalid, before reading anything)
  * annotate stdin onto stdout until end of input
  * optionally print a summary to stderr
"""

import logging
import sys
import time
from typing import IO

from colorama import just_fix_windows_console

from timeln.annotator import Clock, StreamAnnotator
from timeln.args import Args
from timeln.console import error, warning
from timeln.errors import ConfigError, InputError, IoError, OutputError
from timeln.summarizer import RunStats, Summarizer, make_summarizer
from timeln.utils import (
    configure_logging,
    get_input_stream,
    get_output_stream,
    silence_stdout,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130  # Standard exit code for SIGINT


def _print_summary(
    summarizer: Summarizer | None, annotator: StreamAnnotator, stats: RunStats
) -> None:
    if summarizer is None:
        return
    print(summarizer.summarize(stats, annotator.time_format), file=sys.stderr)


def annotate(
    args: Args,
    input_stream: IO,
    output_stream: IO[str],
    clock: Clock = time.monotonic,
) -> int:
    """Run the annotator for parsed args and translate failures to an exit code.

    Args:
        args: Parsed command-line arguments
        input_stream: Text or binary stream to read lines from
        output_stream: Text stream annotated lines are written to
        clock: Monotonic clock returning seconds

    Returns:
        Exit code (0 on clean end of input)
    """
    try:
        annotator = StreamAnnotator(args.to_config(), clock=clock)
    except ConfigError as e:
        logger.debug(f"Configuration rejected: {e}")
        error(f"Error: {e}")
        return EXIT_CONFIG_ERROR

    summarizer = None
    if args.summary is not None:
        summarizer = make_summarizer(args.summary, annotator.styler)

    try:
        stats = annotator.run(input_stream, output_stream)
    except KeyboardInterrupt:
        warning("Interrupted")
        _print_summary(summarizer, annotator, annotator.stats)
        return EXIT_INTERRUPTED
    except OutputError as e:
        if e.broken_pipe:
            # The reader closed early (e.g. `| head`); stop quietly.
            logger.info("Output closed by reader, stopping")
            if output_stream is sys.stdout:
                silence_stdout()
        else:
            logger.debug(f"Output failed: {e}")
            error(f"Error: {e}")
        _print_summary(summarizer, annotator, annotator.stats)
        return EXIT_IO_ERROR
    except InputError as e:
        logger.debug(f"Input failed: {e}")
        error(f"Error: {e}")
        _print_summary(summarizer, annotator, annotator.stats)
        return EXIT_IO_ERROR

    _print_summary(summarizer, annotator, stats)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the timeln command."""
    args = Args.parse_args(argv)
    configure_logging(args.verbose)
    just_fix_windows_console()
    try:
        input_stream = get_input_stream()
        output_stream = get_output_stream()
    except IoError as e:
        logger.debug(f"Standard stream unavailable: {e}")
        error(f"Error: {e}")
        return EXIT_IO_ERROR
    return annotate(args, input_stream, output_stream)


if __name__ == "__main__":
    sys.exit(main())
