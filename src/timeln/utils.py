"""Process-level helpers for the timeln command."""

import io
import logging
import os
import sys
from typing import IO

from timeln.errors import InputError, OutputError

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Configure logging on stderr; stdout carries only annotated lines."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,  # Override any existing configuration
    )


def get_input_stream() -> IO:
    """Return stdin as a binary stream when possible.

    The annotator decodes byte lines itself with replacement characters, so
    undecodable input never stops the loop.

    Raises:
        InputError: If the process was started with stdin closed
    """
    if sys.stdin is None:
        raise InputError("Failed to read input: stdin is closed")
    return getattr(sys.stdin, "buffer", sys.stdin)


def get_output_stream() -> IO[str]:
    """Return stdout, set to replace characters the terminal can't encode.

    Raises:
        OutputError: If the process was started with stdout closed
    """
    if sys.stdout is None:
        raise OutputError("Failed to write output: stdout is closed")
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(errors="replace")
    return sys.stdout


def silence_stdout() -> None:
    """Point stdout at devnull after the reader of our pipe went away.

    Python flushes stdout again at exit; without this that flush raises a
    second BrokenPipeError and prints a traceback.
    """
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        logger.debug("stdout has no file descriptor, nothing to silence")
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, fd)
    finally:
        os.close(devnull)
