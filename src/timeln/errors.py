"""Error types raised by timeln."""

import errno


class TimelnError(Exception):
    """Base class for all timeln errors."""

    pass


class ConfigError(TimelnError):
    """Raised when the startup configuration is invalid (e.g. a bad regex)."""

    pass


class IoError(TimelnError):
    """Raised when the input or output stream fails or is unavailable."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class InputError(IoError):
    """Raised when the input stream cannot be read any further."""

    pass


class OutputError(IoError):
    """Raised when the output stream can no longer be written."""

    @property
    def broken_pipe(self) -> bool:
        """True when the consumer on the other end of the pipe went away."""
        if isinstance(self.cause, BrokenPipeError):
            return True
        return isinstance(self.cause, OSError) and self.cause.errno == errno.EPIPE
