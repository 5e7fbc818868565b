import io
import logging
import os
import tempfile
import unittest
from unittest.mock import patch

import pytest

from timeln.errors import InputError, OutputError
from timeln.utils import (
    configure_logging,
    get_input_stream,
    get_output_stream,
    silence_stdout,
)


class UtilitiesTester(unittest.TestCase):
    """Test process-level helpers."""

    @pytest.mark.unit
    def test_input_stream_prefers_binary_buffer(self):
        raw = io.BytesIO(b"x\n")
        stdin = io.TextIOWrapper(raw)
        with patch("sys.stdin", stdin):
            self.assertIs(get_input_stream(), raw)

    @pytest.mark.unit
    def test_input_stream_without_buffer(self):
        stdin = io.StringIO("x\n")
        with patch("sys.stdin", stdin):
            self.assertIs(get_input_stream(), stdin)

    @pytest.mark.unit
    def test_output_stream_replaces_unencodable(self):
        stdout = io.TextIOWrapper(io.BytesIO(), encoding="ascii")
        with patch("sys.stdout", stdout):
            stream = get_output_stream()
            stream.write("café\n")
            stream.flush()

        self.assertIs(stream, stdout)
        self.assertEqual(stdout.errors, "replace")
        self.assertEqual(stdout.buffer.getvalue(), b"caf?\n")

    @pytest.mark.unit
    def test_input_stream_closed_raises(self):
        with patch("sys.stdin", None):
            with self.assertRaises(InputError) as ctx:
                get_input_stream()
        self.assertIn("stdin is closed", str(ctx.exception))

    @pytest.mark.unit
    def test_output_stream_closed_raises(self):
        with patch("sys.stdout", None):
            with self.assertRaises(OutputError) as ctx:
                get_output_stream()
        self.assertIn("stdout is closed", str(ctx.exception))

    @pytest.mark.unit
    def test_silence_stdout_redirects_file_descriptor(self):
        """Writes after silencing land in devnull, not in the original file."""
        with tempfile.TemporaryDirectory() as temp_dir:
            path = os.path.join(temp_dir, "out.txt")
            with open(path, "w") as stdout:
                with patch("sys.stdout", stdout):
                    silence_stdout()
                    stdout.write("dropped\n")
                    stdout.flush()
            with open(path) as f:
                self.assertEqual(f.read(), "")

    @pytest.mark.unit
    def test_silence_stdout_without_file_descriptor(self):
        with patch("sys.stdout", new_callable=io.StringIO):
            silence_stdout()  # StringIO.fileno() raises; nothing to redirect

    @pytest.mark.unit
    def test_configure_logging_levels(self):
        root = logging.getLogger()
        original_level = root.level
        original_handlers = root.handlers[:]
        try:
            with patch("sys.stderr", new_callable=io.StringIO):
                configure_logging(verbose=True)
                self.assertEqual(root.level, logging.DEBUG)
                configure_logging(verbose=False)
                self.assertEqual(root.level, logging.WARNING)
        finally:
            root.handlers[:] = original_handlers
            root.setLevel(original_level)


if __name__ == "__main__":
    unittest.main()
