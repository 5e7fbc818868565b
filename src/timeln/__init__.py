"""timeln - Time lines or regex matches read from a stream."""

__version__ = "0.1.0"

from typing import IO

# Import dataclasses with underscore to keep them private at module level
from .annotator import AnnotatorConfig as _AnnotatorConfig
from .annotator import Clock as _Clock
from .summarizer import RunStats as _RunStats


class Timeln:
    """Stable public API for timeln.

    All methods are static to ensure the API is stable and predictable.

    Result Types (for type hints):
        AnnotatorConfig: Configuration accepted by annotate()
        RunStats: Result from annotate()
    """

    AnnotatorConfig = _AnnotatorConfig
    RunStats = _RunStats

    # ===== Entry Points =====

    @staticmethod
    def main(argv: list[str] | None = None) -> int:
        """Run the timeln command on stdin/stdout.

        Args:
            argv: Command-line arguments, defaults to sys.argv[1:]

        Returns:
            Exit code (0 for success, non-zero for failure)
        """
        from .main import main as _main

        return _main(argv)

    # ===== Programmatic API =====

    @staticmethod
    def annotate(
        input_stream: IO,
        output_stream: IO[str],
        pattern: str | None = None,
        color: bool = False,
        clock: _Clock | None = None,
    ) -> _RunStats:
        """Annotate every line (or every match) of input_stream onto output_stream.

        Args:
            input_stream: Text or binary stream to read lines from
            output_stream: Text stream annotated lines are written to
            pattern: Optional regex; only matching lines are emitted
            color: Colorize timestamps and matches with ANSI codes
            clock: Optional callable returning monotonic seconds

        Returns:
            RunStats with line and match counts

        Raises:
            ConfigError: If pattern is not a valid regex
            IoError: If reading or writing fails
        """
        from .annotator import StreamAnnotator

        config = _AnnotatorConfig(pattern=pattern, color=color)
        if clock is None:
            annotator = StreamAnnotator(config)
        else:
            annotator = StreamAnnotator(config, clock=clock)
        return annotator.run(input_stream, output_stream)


# Export only the API class
__all__ = ["Timeln"]
