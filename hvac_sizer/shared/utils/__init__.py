"""
Shared Utilities

Responsibility:
    Generic utility functions used across the application.

Contains:
    - round_half_up: Arithmetic rounding (0.5 always rounds up)
    - round_to_tenths: Half-up rounding to one decimal place
"""

from hvac_sizer.shared.utils.numeric import round_half_up, round_to_tenths

__all__ = ["round_half_up", "round_to_tenths"]
