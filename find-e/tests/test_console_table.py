"""
Tests for the console table renderers.

Output goes to an io.StringIO so nothing touches the terminal.
"""

import io
import re
import unittest

import console_table
from series_matcher import RatioMatch, SeriesMatch

_ANSI = re.compile(r"\033\[[0-9;]*[A-Za-z]")


def _render(renderer, *args):
    out = io.StringIO()
    renderer(*args, out=out)
    return out.getvalue()


def _border_lines(text):
    """Lines that start with a box-drawing border character."""
    return [line for line in text.splitlines() if line[:1] in "╔╚╟║"]


class TestBoxes(unittest.TestCase):

    def test_banner(self):
        text = _render(console_table.render_banner)
        self.assertIn("find E tool by M_Marvin", text)
        self.assertIn("\033[38;5;214m", text)

    def test_borders_have_fixed_width(self):
        match = SeriesMatch(max_error=0.01, series=24, largest_error=0.02,
                            values={3.5: 3.6, 4.7: 4.7})
        text = (
            _render(console_table.render_banner)
            + _render(console_table.render_request, 0.01)
            + _render(console_table.render_series_match, match)
        )
        for line in _border_lines(text):
            self.assertEqual(len(line), 41, repr(line))

    def test_text_is_written_over_blank_rows(self):
        text = _render(console_table.render_failure)
        lines = text.splitlines()
        self.assertTrue(lines[1].startswith("║"))
        self.assertTrue(lines[2].startswith("  \033[1A"))

    def test_request_shows_percent(self):
        text = _ANSI.sub("", _render(console_table.render_request, 0.05))
        self.assertIn("requested max. error: 5.00 %", text)
        self.assertIn("trying to find best E-series", text)

    def test_failure_banner(self):
        text = _render(console_table.render_failure)
        self.assertIn("[!] unable to satisfy conditions", text)
        self.assertIn("\033[38;5;196m", text)


class TestSeriesMatchTable(unittest.TestCase):

    def setUp(self):
        self.match = SeriesMatch(max_error=0.05, series=24,
                                 largest_error=abs(3.6 - 3.5) / 3.5,
                                 values={3.5: 3.6, 4.7: 4.7})
        self.text = _ANSI.sub("", _render(console_table.render_series_match, self.match))

    def test_header(self):
        self.assertIn("best series: E24", self.text)
        self.assertIn("largest error: 2.86 %", self.text)
        self.assertIn("R_orig", self.text)
        self.assertIn("R_series", self.text)

    def test_one_row_per_value(self):
        self.assertEqual(self.text.count("3.500"), 1)
        self.assertIn("3.600", self.text)
        self.assertIn("4.700", self.text)
        self.assertIn("0.00 %", self.text)

    def test_not_found_renders_failure(self):
        text = _render(console_table.render_series_match, SeriesMatch(max_error=0.0))
        self.assertIn("unable to satisfy conditions", text)
        self.assertNotIn("best series", text)


class TestRatioMatchTable(unittest.TestCase):

    def test_pair_row(self):
        match = RatioMatch(max_error=0.01, target_ratio=0.5, normalized_ratio=5.0,
                           series=24, error=0.0, mantissa1=7.5, mantissa2=1.5,
                           value1=7.5, value2=15.0)
        text = _ANSI.sub("", _render(console_table.render_ratio_match, match))
        self.assertIn("best series: E24", text)
        self.assertIn("ratio error: 0.00 %", text)
        self.assertIn("7.500", text)
        self.assertIn("15.000", text)
        self.assertIn("0.5000", text)

    def test_not_found_renders_failure(self):
        match = RatioMatch(max_error=0.0, target_ratio=2.0, normalized_ratio=2.0)
        text = _render(console_table.render_ratio_match, match)
        self.assertIn("unable to satisfy conditions", text)


if __name__ == "__main__":
    unittest.main()
