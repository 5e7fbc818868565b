"""Pytest configuration."""

import sys


def pytest_keyboard_interrupt(excinfo):
    """Handle Ctrl-C gracefully without verbose traceback."""
    print("\n\nTests interrupted by user (Ctrl-C)", file=sys.stderr)
    return None
