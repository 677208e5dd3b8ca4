"""
find E - Command-Line Entry Point

Finds a matching E-series for a list of component values, or a pair of series
values for a ratio, and prints the result as console tables.

Usage
-----
  find-e [value...] [-err <percent>] [-ratio]

  find-e 4700 330 12            (value mode, 1 % default error)
  find-e 4700 330 -err 5        (value mode, 5 % error)
  find-e 20 -ratio              (ratio mode: a pair with value1 / value2 ≈ 20)

Arguments are read strictly left to right.  Numbers are collected as values
only until the first flag; anything after the first flag that is not itself a
flag is ignored.  So "find-e 4.7 -err 5 3.3" matches 4.7 only.

Exit codes
----------
   0  search ran (whether or not a series was found)
  -1  usage error (-err without a number, -ratio without a value, bad number,
      or a ratio too far from 1 to rescale)
"""

from __future__ import annotations

import logging
import math
import sys
from dataclasses import dataclass, field

import console_table
import find_e_config as config
from series_matcher import find_ratio, find_series

log = logging.getLogger(__name__)

USAGE = "usage: find-e [value...] [-err <percent>] [-ratio]"


class UsageError(ValueError):
    """The command line cannot be interpreted."""


@dataclass
class Invocation:
    values: list[float] = field(default_factory=list)
    max_error: float = config.DEFAULT_MAX_ERROR
    ratio_mode: bool = False


def _parse_number(text: str) -> float:
    try:
        number = float(text)
    except ValueError:
        raise UsageError(f"not a number: {text!r}") from None
    if not math.isfinite(number):
        raise UsageError(f"not a finite number: {text!r}")
    return number


def parse_args(argv) -> Invocation:
    """Parse *argv* (without the program name) into an Invocation.

    Raises:
        UsageError: -err has no argument, -ratio has no value to work on, or
            a value is not a positive number.
    """
    inv = Invocation()
    collecting = True
    i = 0

    while i < len(argv):
        arg = argv[i]
        if arg == "-err":
            if i + 1 >= len(argv):
                raise UsageError("-err needs a percentage")
            inv.max_error = _parse_number(argv[i + 1]) / 100.0
            collecting = False
            i += 2
            continue

        if arg == "-ratio":
            inv.ratio_mode = True
            collecting = False
        elif collecting:
            value = _parse_number(arg)
            if value <= 0.0:
                raise UsageError(f"values must be positive: {arg!r}")
            inv.values.append(value)
        else:
            log.debug("Ignoring %r after the first flag", arg)
        i += 1

    if inv.ratio_mode and not inv.values:
        raise UsageError("-ratio needs a ratio value")
    return inv


def main(argv=None, out=None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if out is None:
        out = sys.stdout

    try:
        inv = parse_args(argv)
        ratio_match = None
        if inv.ratio_mode:
            log.info("Ratio mode: target %g, max error %g", inv.values[0], inv.max_error)
            try:
                ratio_match = find_ratio(inv.values[0], inv.max_error)
            except ValueError as exc:
                raise UsageError(str(exc)) from None
    except UsageError as exc:
        log.error("%s", exc)
        print(USAGE, file=sys.stderr)
        return -1

    console_table.render_banner(out)

    if ratio_match is not None:
        console_table.render_request(
            inv.max_error, "trying to find best E-series pair", out=out,
        )
        console_table.render_ratio_match(ratio_match, out=out)
    else:
        log.info("Value mode: %d value(s), max error %g", len(inv.values), inv.max_error)
        console_table.render_request(inv.max_error, out=out)
        console_table.render_series_match(find_series(inv.values, inv.max_error), out=out)

    return 0


def run() -> None:
    """Console-script entry point."""
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    # The tables use box-drawing characters.
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")
    sys.exit(main())


if __name__ == "__main__":
    run()
