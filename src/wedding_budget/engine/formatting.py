"""
Currency formatting and lenient form-input parsing.
"""
import math
import re
from typing import Optional, Union

_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return int(math.floor(value + 0.5))


def format_usd(amount: Union[int, float]) -> str:
    """Format as whole US dollars, e.g. 21200 -> "$21,200", -350 -> "-$350"."""
    whole = round_half_up(amount)
    if whole < 0:
        return f"-${-whole:,}"
    return f"${whole:,}"


def parse_int_or_zero(raw: Optional[Union[str, int, float]]) -> int:
    """
    Parse a numeric form field, defaulting to 0 on failure.

    Strings are read up to the first non-digit ("120 guests" -> 120);
    empty or non-numeric text gives 0.
    """
    if raw is None:
        return 0
    if isinstance(raw, (int, float)):
        if isinstance(raw, float) and not math.isfinite(raw):
            return 0
        return int(raw)

    match = _LEADING_INT.match(str(raw))
    if not match:
        return 0
    return int(match.group(1))
