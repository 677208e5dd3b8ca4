"""
find E - E-Series Matching

Finds the coarsest IEC 60063 E-series that covers a set of component values
within a relative error bound, or a pair of series values whose ratio matches
a requested ratio.

Series sizes are tried in the order 3, 6, 12, 24, 48, 96, ... (doubling while
n * 2 stays below SERIES_LIMIT).  E3..E24 come from the fixed tables in
e_series_constants.py; larger series are synthesized as round(10^(k/n), 3).

Exports:
    cut_down      – strip the decade from a value (mantissa in [1, 10])
    series_values – member tuple for any series size
    match_series  – evaluate one series against a set of values
    find_series   – value mode search  → SeriesMatch
    find_ratio    – ratio mode search  → RatioMatch
"""

from __future__ import annotations

import bisect
import functools
import logging
import math
from dataclasses import dataclass, field

import find_e_config as config
from e_series_constants import FIXED_SERIES

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass
class SeriesMatch:
    """Outcome of a value-mode search.

    ``series`` is 0 when no series satisfied the error bound.  ``values`` maps
    every normalized input value to its series member, in ascending order.
    """

    max_error: float
    series: int = 0
    largest_error: float = 0.0
    values: dict[float, float] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return self.series != 0

    def error_for(self, value: float) -> float:
        """Relative error of the series member assigned to *value* (normalized)."""
        return relative_error(self.values[value], value)


@dataclass
class RatioMatch:
    """Outcome of a ratio-mode search.

    ``mantissa1 / mantissa2`` approximates ``normalized_ratio``;
    ``value1 / value2`` approximates the original ``target_ratio``.
    """

    max_error: float
    target_ratio: float
    normalized_ratio: float
    series: int = 0
    error: float = 0.0
    mantissa1: float = 0.0
    mantissa2: float = 0.0
    value1: float = 0.0
    value2: float = 0.0

    @property
    def found(self) -> bool:
        return self.series != 0

    @property
    def ratio(self) -> float:
        return self.value1 / self.value2


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def cut_down(value: float) -> float:
    """Return the mantissa of *value*, e.g. 0.00456 → 4.56, 12300 → 1.23.

    Multiplies by 10 while below 1.0 and divides by 10 while above 10.0, so
    the result lies in [1.0, 10.0] (10.0 itself is left alone).

    Raises:
        ValueError: *value* is zero, negative or not finite.
    """
    if not math.isfinite(value) or value <= 0.0:
        raise ValueError(f"cannot normalize non-positive value {value!r}")

    if value < 1.0:
        while value < 1.0:
            value *= 10.0
    else:
        while value > 10.0:
            value /= 10.0
    return value


def relative_error(approximation: float, target: float) -> float:
    return abs(approximation - target) / target


def series_sizes():
    """Yield the series sizes to try: 3, 6, 12, ... while n * 2 < SERIES_LIMIT."""
    n = config.FIRST_SERIES
    while n * 2 < config.SERIES_LIMIT:
        yield n
        n *= 2


@functools.lru_cache(maxsize=None)
def series_values(n: int) -> tuple[float, ...]:
    """Return the ascending members of series E*n* for one decade."""
    if n in FIXED_SERIES:
        return FIXED_SERIES[n]
    return tuple(
        round(10.0 ** (k / n), config.SYNTHETIC_DECIMALS) for k in range(n)
    )


def _closest_fixed(members: tuple[float, ...], value: float) -> float:
    # Strict '<' keeps the first (lowest) member on ties.
    best = members[0]
    best_error = relative_error(best, value)
    for member in members[1:]:
        error = relative_error(member, value)
        if error < best_error:
            best_error = error
            best = member
    return best


def _closest_synthetic(n: int, value: float) -> float:
    # Nearest exponent only; the rounded table is not scanned.
    r10 = 10.0 ** (1.0 / n)
    m = round(math.log(value) / math.log(r10))
    return round(r10 ** m, config.SYNTHETIC_DECIMALS)


# ---------------------------------------------------------------------------
# Value mode
# ---------------------------------------------------------------------------

def match_series(values, n: int) -> tuple[float, dict[float, float]]:
    """Map every value in *values* onto series E*n*.

    Returns (largest_error, mapping) where mapping goes from the normalized
    value to the chosen member, sorted by normalized value.
    """
    mapping: dict[float, float] = {}
    largest_error = 0.0

    for raw in values:
        v = cut_down(raw)
        if n in FIXED_SERIES:
            member = _closest_fixed(FIXED_SERIES[n], v)
        else:
            member = _closest_synthetic(n, v)
        mapping[v] = member
        largest_error = max(largest_error, relative_error(member, v))

    return largest_error, dict(sorted(mapping.items()))


def find_series(values, max_error: float = config.DEFAULT_MAX_ERROR) -> SeriesMatch:
    """Find the smallest E-series whose largest error is below *max_error*.

    Returns a SeriesMatch with ``series == 0`` if no size up to the search
    limit qualifies, or straight away if *max_error* <= 0.
    """
    result = SeriesMatch(max_error=max_error)
    if max_error <= 0.0:
        return result

    values = list(values)
    for n in series_sizes():
        largest_error, mapping = match_series(values, n)
        log.debug("E%d: largest error %.4f%%", n, largest_error * 100.0)
        if largest_error < max_error:
            log.info("Values fit E%d (largest error %.4f%%)", n, largest_error * 100.0)
            result.series = n
            result.largest_error = largest_error
            result.values = mapping
            return result

    log.info("No series up to the limit fits within %.4f%%", max_error * 100.0)
    return result


# ---------------------------------------------------------------------------
# Ratio mode
# ---------------------------------------------------------------------------

def _find_pair(members: tuple[float, ...], target: float, max_error: float):
    """Return the first (i1, i2), i2 <= i1, with members[i1]/members[i2] ≈ target.

    Pairs are visited with i1 ascending and, for each i1, i2 ascending.  The
    ratio falls as i2 grows, so the i2 values whose ratio is still above the
    tolerance window are skipped with a bisection.
    """
    high = target * (1.0 + max_error)
    low = target * (1.0 - max_error)

    for i1, value1 in enumerate(members):
        start = bisect.bisect_left(members, value1 / high, 0, i1 + 1)
        for i2 in range(max(start - 1, 0), i1 + 1):
            ratio = value1 / members[i2]
            if relative_error(ratio, target) < max_error:
                return i1, i2
            if ratio < low:
                break
    return None


def _rescale(value1: float, value2: float, target: float) -> tuple[float, float]:
    """Shift the pair by decades until value1 / value2 sits next to *target*.

    The numerator is scaled up when the pair ratio is more than half a decade
    below *target*, the denominator when it is more than half a decade above.

    Raises:
        ValueError: the shifted value does not fit in a float.
    """
    decades = round(math.log10(target) - math.log10(value1 / value2))
    try:
        factor = 10.0 ** abs(decades)
    except OverflowError:
        raise ValueError(f"ratio {target!r} is out of range") from None

    if decades >= 0:
        value1 *= factor
    else:
        value2 *= factor
    if not math.isfinite(value1) or not math.isfinite(value2):
        raise ValueError(f"ratio {target!r} is out of range")
    return value1, value2


def find_ratio(ratio: float, max_error: float = config.DEFAULT_MAX_ERROR) -> RatioMatch:
    """Find the smallest E-series holding two values whose ratio matches *ratio*.

    The ratio is normalized with cut_down() before matching; the matched pair
    is then rescaled by powers of 10 so value1 / value2 reproduces the
    original *ratio* (10k/1k rather than 1k/1k for a ratio of 10).

    Raises:
        ValueError: *ratio* is not positive, or so far from 1 that the
            rescaled pair cannot be represented.
    """
    normalized = cut_down(ratio)
    result = RatioMatch(
        max_error=max_error,
        target_ratio=ratio,
        normalized_ratio=normalized,
    )
    if max_error <= 0.0:
        return result

    for n in series_sizes():
        members = series_values(n)
        pair = _find_pair(members, normalized, max_error)
        if pair is None:
            log.debug("E%d: no pair within %.4f%% of %g", n, max_error * 100.0, normalized)
            continue

        mantissa1, mantissa2 = members[pair[0]], members[pair[1]]
        result.series = n
        result.error = relative_error(mantissa1 / mantissa2, normalized)
        result.mantissa1 = mantissa1
        result.mantissa2 = mantissa2
        result.value1, result.value2 = _rescale(mantissa1, mantissa2, ratio)
        log.info(
            "Ratio %g fits E%d as %g / %g (error %.4f%%)",
            ratio, n, result.value1, result.value2, result.error * 100.0,
        )
        return result

    log.info("No series up to the limit holds ratio %g within %.4f%%", ratio, max_error * 100.0)
    return result
