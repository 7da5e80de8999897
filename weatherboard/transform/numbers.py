"""Numeric parsing for feed strings."""

import math
import re

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_leading_int(text: str) -> int:
    """Parse the leading integer of a string, e.g. "28" or "28°C" → 28.

    Raises ValueError when the string does not start with digits.
    """
    m = _LEADING_INT.match(text)
    if m is None:
        raise ValueError(f"no leading integer in {text!r}")
    return int(m.group(1))


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
