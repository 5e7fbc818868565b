import unittest

import pytest

from timeln.errors import ConfigError
from timeln.matcher import Span, compile_pattern, find_first


class MatcherTester(unittest.TestCase):
    """Test regex compilation and first-match lookup."""

    @pytest.mark.unit
    def test_find_first_returns_first_span(self):
        pattern = compile_pattern("ba[rz]")
        self.assertEqual(find_first(pattern, "bar baz"), Span(0, 3))
        self.assertEqual(find_first(pattern, "foo baz bar"), Span(4, 7))

    @pytest.mark.unit
    def test_find_first_no_match(self):
        pattern = compile_pattern("ba[rz]")
        self.assertIsNone(find_first(pattern, "qux"))
        self.assertIsNone(find_first(pattern, ""))

    @pytest.mark.unit
    def test_match_anywhere_in_line(self):
        """Patterns are searched, not anchored at the start of the line."""
        pattern = compile_pattern("[0-9]+")
        self.assertEqual(find_first(pattern, "Iteration 42"), Span(10, 12))

    @pytest.mark.unit
    def test_invalid_pattern_raises_config_error(self):
        for bad in ("(", "[a-", "*oops", "a{2,1}"):
            with self.assertRaises(ConfigError, msg=bad) as ctx:
                compile_pattern(bad)
            self.assertIn(repr(bad), str(ctx.exception))

    @pytest.mark.unit
    def test_span_split(self):
        before, matched, after = Span(4, 7).split("foo bar baz")
        self.assertEqual((before, matched, after), ("foo ", "bar", " baz"))

    @pytest.mark.unit
    def test_empty_span(self):
        pattern = compile_pattern("x*")
        span = find_first(pattern, "abc")
        self.assertEqual(span, Span(0, 0))
        self.assertEqual(span.split("abc"), ("", "", "abc"))

    @pytest.mark.unit
    def test_span_rejects_inverted_offsets(self):
        with self.assertRaises(AssertionError):
            Span(5, 2)


if __name__ == "__main__":
    unittest.main()
