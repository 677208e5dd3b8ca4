"""
find E - Console Tables

Draws fixed-width boxes with Unicode box-drawing characters.  Every content
line is printed as an empty bordered row first; the text is then written over
it after an ANSI cursor-up (ESC[1A), so the borders stay aligned whatever the
length of the coloured text.

    ╔═══════════════════════════════════════╗
    ║ best series: E24                      ║
    ╟───────────────────────────────────────╢
    ║ R_orig     ┆ R_series   ┆ error       ║
    ╚═══════════════════════════════════════╝

No decisions are made here; the renderers only format SeriesMatch and
RatioMatch objects from series_matcher.py.
"""

from __future__ import annotations

import sys

import find_e_config as config

_INNER_W = config.TABLE_WIDTH - 2

_TOP    = "╔" + "═" * _INNER_W + "╗\n"
_BOTTOM = "╚" + "═" * _INNER_W + "╝\n"
_RULE   = "╟" + "─" * _INNER_W + "╢\n"
_BLANK  = "║" + " " * _INNER_W + "║\n"

# Three-column layout: 12 ┆ 12 ┆ 13
_COLUMN_W = (12, 12, 13)
_COLUMN_X = (2, 15, 28)   # overlay start column of each cell
_ROW_BLANK = "║" + "┆".join(" " * w for w in _COLUMN_W) + "║\n"

_UP    = "\033[1A"
_RESET = "\033[0m"


def _color(text: str, code: int) -> str:
    return f"\033[38;5;{code}m{text}{_RESET}"


def _percent(fraction: float) -> str:
    return f"{fraction * 100.0:.2f} %"


def _overlay(text: str, column: int = 2) -> str:
    return " " * column + _UP + text + "\n"


def _line(text: str) -> str:
    """A bordered row with *text* written over it."""
    return _BLANK + _overlay(text)


def _header_row(*titles: str) -> str:
    cells = [f" {t:<{w - 1}}" for t, w in zip(titles, _COLUMN_W)]
    return "║" + "┆".join(cells) + "║\n"


def _value_row(*cells: str) -> str:
    row = _ROW_BLANK
    for text, column in zip(cells, _COLUMN_X):
        row += _overlay(" " + text, column)
    return row


# ---------------------------------------------------------------------------
# Public renderers
# ---------------------------------------------------------------------------

def render_banner(out=None) -> None:
    out = sys.stdout if out is None else out
    out.write(_TOP + _line(_color("find E tool by M_Marvin", config.COLOR_TITLE)) + _BOTTOM)


def render_request(max_error: float, task: str = "trying to find best E-series", out=None) -> None:
    """Print the requested tolerance and what is about to be searched."""
    out = sys.stdout if out is None else out
    out.write(
        _TOP
        + _line("requested max. error: " + _color(_percent(max_error), config.COLOR_ERROR))
        + _RULE
        + _line(task)
        + _BOTTOM
    )


def render_failure(out=None) -> None:
    out = sys.stdout if out is None else out
    out.write(
        _TOP
        + _line(_color("[!] unable to satisfy conditions", config.COLOR_FAIL))
        + _BOTTOM
    )


def render_series_match(match, out=None) -> None:
    """Print a value-mode result: series, largest error and one row per value."""
    out = sys.stdout if out is None else out
    if not match.found:
        render_failure(out)
        return

    text = (
        _TOP
        + _line("best series: " + _color(f"E{match.series}", config.COLOR_VALUE))
        + _line("largest error: " + _color(_percent(match.largest_error), config.COLOR_ERROR))
        + _RULE
        + _header_row("R_orig", "R_series", "error")
    )
    for value, member in match.values.items():
        text += _value_row(
            _color(f"{value:.3f}", config.COLOR_VALUE),
            _color(f"{member:.3f}", config.COLOR_VALUE),
            _color(_percent(match.error_for(value)), config.COLOR_ERROR),
        )
    out.write(text + _BOTTOM)


def render_ratio_match(match, out=None) -> None:
    """Print a ratio-mode result: series, error and the rescaled pair."""
    out = sys.stdout if out is None else out
    if not match.found:
        render_failure(out)
        return

    out.write(
        _TOP
        + _line("best series: " + _color(f"E{match.series}", config.COLOR_VALUE))
        + _line("ratio error: " + _color(_percent(match.error), config.COLOR_ERROR))
        + _RULE
        + _header_row("R_1", "R_2", "ratio")
        + _value_row(
            _color(f"{match.value1:.3f}", config.COLOR_VALUE),
            _color(f"{match.value2:.3f}", config.COLOR_VALUE),
            _color(f"{match.ratio:.4f}", config.COLOR_VALUE),
        )
        + _BOTTOM
    )
