"""
Tests for numeric rounding helpers.
Covers: half-up rounding of percentages and tenths, negative values.
"""

import pytest

from hvac_sizer.shared.utils.numeric import round_half_up, round_to_tenths


# ============================================================================
# round_half_up
# ============================================================================


@pytest.mark.parametrize(
    "value,expected",
    [
        (119.5, 120),
        (2.5, 3),
        (0.5, 1),
        (119.4999, 119),
        (100.0, 100),
        (-2.5, -2),
    ],
)
def test_round_half_up(value, expected):
    """Test that halves round towards +infinity (not banker's rounding)."""
    assert round_half_up(value) == expected


def test_round_half_up_differs_from_builtin_round():
    """Test the case where Python's round() would round to even."""
    assert round(2.5) == 2
    assert round_half_up(2.5) == 3


# ============================================================================
# round_to_tenths
# ============================================================================


@pytest.mark.parametrize(
    "value,expected",
    [
        (5.8617, 5.9),
        (2.3446, 2.3),
        (0.0, 0.0),
    ],
)
def test_round_to_tenths(value, expected):
    """Test rounding to one decimal place with half-up semantics."""
    assert round_to_tenths(value) == pytest.approx(expected)
