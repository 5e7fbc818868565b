"""Console output utilities with color support."""

import sys
from enum import Enum
from typing import Protocol

from colorama import Fore, Style


class Role(Enum):
    """What a styled fragment of an output line represents."""

    TIMESTAMP = "timestamp"
    HIGHLIGHT = "highlight"
    NONE = "none"


class Styler(Protocol):
    def style(self, text: str, role: Role) -> str: ...


class PlainStyler:
    """Styler that leaves text untouched."""

    def style(self, text: str, role: Role) -> str:
        return text


class AnsiStyler:
    """Styler that wraps timestamps in green and regex matches in red."""

    COLORS = {
        Role.TIMESTAMP: Fore.GREEN,
        Role.HIGHLIGHT: Fore.RED,
    }

    def style(self, text: str, role: Role) -> str:
        color = self.COLORS.get(role)
        if color is None:
            return text
        return f"{color}{text}{Style.RESET_ALL}"


def make_styler(color: bool) -> Styler:
    """Pick the styler for the given color setting."""
    return AnsiStyler() if color else PlainStyler()


def error(message: str, file=None) -> None:
    """Print an error message in red."""
    if file is None:
        file = sys.stderr
    print(f"{Fore.RED}{message}{Style.RESET_ALL}", file=file)


def warning(message: str, file=None) -> None:
    """Print a warning message in yellow."""
    if file is None:
        file = sys.stderr
    print(f"{Fore.YELLOW}{message}{Style.RESET_ALL}", file=file)
