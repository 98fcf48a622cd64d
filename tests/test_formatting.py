"""
Currency formatting and form-input parsing tests.
"""
import os
import sys

import pytest

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from wedding_budget.engine.formatting import format_usd, parse_int_or_zero, round_half_up


@pytest.mark.parametrize("amount,expected", [
    (21200, "$21,200"),
    (0, "$0"),
    (177, "$177"),
    (1234567, "$1,234,567"),
    (-350, "-$350"),
    (176.6667, "$177"),
])
def test_format_usd(amount, expected):
    assert format_usd(amount) == expected


@pytest.mark.parametrize("value,expected", [
    (2.5, 3),
    (2.4, 2),
    (-2.5, -2),
    (-2.6, -3),
    (94.5, 95),
    (0.5, 1),
])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


@pytest.mark.parametrize("raw,expected", [
    ("120", 120),
    ("  42 ", 42),
    ("120 guests", 120),
    ("12.7", 12),
    ("-5", -5),
    ("", 0),
    ("abc", 0),
    (None, 0),
    (3.9, 3),
    (float('nan'), 0),
    (5000, 5000),
])
def test_parse_int_or_zero(raw, expected):
    """Bad numeric input falls back to zero instead of raising."""
    assert parse_int_or_zero(raw) == expected
