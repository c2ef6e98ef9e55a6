"""
Nearest allowed quantity for a quantity policy.

A requested quantity is clamped into [min, max] and, when the policy has a
step interval, snapped to the closest value of the min + k * interval grid.
On an exact tie between two grid values the larger one wins.
"""

import math
from typing import Optional

from ..config.defaults import DefaultConfig, get_default_config
from ..errors import EnumerationLimitError
from ..logging.config import get_logger
from ..models.policy import QuantityPolicy
from ..quantity.arithmetic import Quantity, QuantityMath

logger = get_logger(__name__)


class QuantityRounder:
    """Finds the policy-legal quantity closest to a requested quantity."""

    def __init__(self, config: Optional[DefaultConfig] = None,
                 quantity_math: Optional[QuantityMath] = None):
        self.config = config or get_default_config()
        self.math = quantity_math or QuantityMath(self.config.quantity.precision)
        self.max_candidates = self.config.rounder.max_candidates

    def nearest_allowed_quantity(self, policy: QuantityPolicy, quantity: Quantity) -> float:
        """
        Get the allowed quantity nearest to the requested one.

        Args:
            policy: Quantity policy of the product
            quantity: Requested quantity

        Returns:
            Nearest quantity satisfying the policy

        Raises:
            EnumerationLimitError: If the fallback search would exceed
                rounder.max_candidates allowed values
        """
        minimum = float(policy.min or self.config.quantity.default_min_quantity)
        # A zero max is unset, like a zero min.
        maximum = float(policy.max) if policy.max else None
        interval = float(policy.interval or 0)
        quantity = float(quantity)

        if quantity < minimum:
            return minimum

        if maximum is not None and quantity > maximum:
            quantity = maximum

        if not interval:
            return quantity

        remainder = self.math.fmod(self.math.subtract(quantity, minimum), interval)
        if self.math.is_equal(remainder, 0):
            return quantity

        upper_bound = maximum if maximum is not None else self.math.add(quantity, interval)
        allowed = self.allowed_quantities(minimum, upper_bound, interval)

        logger.debug(
            "Snapping quantity to interval grid",
            requested=quantity,
            min=minimum,
            max=maximum,
            interval=interval,
            candidates=len(allowed),
        )

        return self.nearest_from_allowed(quantity, allowed)

    def allowed_quantities(self, minimum: Quantity, maximum: Quantity,
                           interval: Quantity) -> tuple[float, ...]:
        """
        Enumerate the allowed quantities between minimum and maximum.

        Returns:
            Allowed quantities in descending order
        """
        minimum = float(minimum)
        interval = float(interval)

        if not interval or self.math.add(minimum, interval) > float(maximum):
            return (minimum,)

        steps = int(math.floor((float(maximum) - minimum) / interval + self.math.epsilon))
        if self.max_candidates and steps + 1 > self.max_candidates:
            raise EnumerationLimitError(
                f"Rounding would enumerate {steps + 1} allowed quantities, "
                f"limit is {self.max_candidates}",
                candidate_count=steps + 1,
                limit=self.max_candidates,
                context={"min": minimum, "max": float(maximum), "interval": interval},
            )

        return tuple(
            self.math.round(minimum + step * interval)
            for step in range(steps, -1, -1)
        )

    def nearest_from_allowed(self, quantity: Quantity,
                             allowed: tuple[float, ...]) -> float:
        """Pick the allowed quantity closest to quantity; earlier entries win ties."""
        if len(allowed) == 1:
            return allowed[0]

        nearest: Optional[float] = None
        for candidate in allowed:
            if nearest is None or (
                abs(self.math.subtract(quantity, nearest))
                > abs(self.math.subtract(candidate, quantity))
            ):
                nearest = candidate

        return nearest if nearest is not None else float(quantity)


def nearest_allowed_quantity(policy: QuantityPolicy, quantity: Quantity,
                             config: Optional[DefaultConfig] = None) -> float:
    """Get the allowed quantity nearest to quantity using a one-off rounder."""
    return QuantityRounder(config).nearest_allowed_quantity(policy, quantity)
