"""
Quantity-safe arithmetic.

Business quantities are decimal values carried in binary floats, so naive
arithmetic drifts (5.5 - 2.5 may not compare equal to 3.0 after a few
operations). Every sum and difference here is rounded to the configured
number of decimal places, and comparisons use an epsilon one order of
magnitude below that precision.
"""

import math
from decimal import Decimal
from typing import Union

Quantity = Union[int, float, Decimal]


class QuantityMath:
    """Add, subtract and compare quantities at a fixed decimal precision."""

    def __init__(self, precision: int = 2):
        if precision < 0:
            raise ValueError(f"precision must be non-negative, got {precision}")
        self.precision = precision
        self.epsilon = 10.0 ** -(precision + 1)

    def round(self, quantity: Quantity) -> float:
        """Round a quantity to the configured precision."""
        return round(float(quantity), self.precision)

    def add(self, first: Quantity, second: Quantity) -> float:
        return self.round(float(first) + float(second))

    def subtract(self, first: Quantity, second: Quantity) -> float:
        return self.round(float(first) - float(second))

    def is_equal(self, first: Quantity, second: Quantity) -> bool:
        """True when both quantities match within the precision epsilon."""
        return abs(float(first) - float(second)) < self.epsilon

    def fmod(self, quantity: Quantity, interval: Quantity) -> float:
        """
        Floating-point remainder of quantity / interval.

        A remainder indistinguishable from the interval itself is reported
        as zero, since it comes from representation error in the dividend.

        Raises:
            ZeroDivisionError: If interval is zero
        """
        interval = float(interval)
        if interval == 0:
            raise ZeroDivisionError("quantity interval must be non-zero")

        remainder = self.round(math.fmod(float(quantity), interval))
        if self.is_equal(abs(remainder), abs(interval)):
            return 0.0
        return remainder

    def is_integer(self, quantity: Quantity) -> bool:
        """True when quantity is a finite whole number within the epsilon."""
        if isinstance(quantity, bool) or not isinstance(quantity, (int, float, Decimal)):
            return False
        value = float(quantity)
        if not math.isfinite(value):
            return False
        return self.is_equal(value, round(value))
