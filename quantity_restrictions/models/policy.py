"""Quantity policy and cart item models."""

import math
from dataclasses import dataclass
from typing import Any, Optional, Union

from ..errors import InvalidPolicyError

Number = Union[int, float]


def _check_bound(field: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise InvalidPolicyError(f"Policy {field} must be a finite number, got {value!r}",
                                 field=field, value=value)
    if value < 0:
        raise InvalidPolicyError(f"Policy {field} must be non-negative, got {value}",
                                 field=field, value=value)


@dataclass(frozen=True)
class QuantityPolicy:
    """
    Quantity restrictions of a single product.

    Attributes:
        min: Lowest allowed quantity, None to use the configured default
        max: Highest allowed quantity, None for unbounded
        interval: Step between allowed quantities, 0 or None for no stepping
    """
    min: Optional[Number] = None
    max: Optional[Number] = None
    interval: Optional[Number] = None

    def __post_init__(self):
        _check_bound("min", self.min)
        _check_bound("max", self.max)
        _check_bound("interval", self.interval)

        if self.max is not None and self.max < (self.min or 0):
            raise InvalidPolicyError(
                f"Policy max {self.max} is lower than min {self.min}",
                field="max", value=self.max,
            )

    @property
    def has_interval(self) -> bool:
        """True when the policy constrains quantities to a step grid."""
        return bool(self.interval)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "QuantityPolicy":
        """Build a policy from a plain mapping with min/max/interval keys."""
        unknown = set(data) - {"min", "max", "interval"}
        if unknown:
            raise InvalidPolicyError(
                f"Unknown policy fields: {', '.join(sorted(unknown))}",
                field=sorted(unknown)[0],
            )
        return cls(
            min=data.get("min"),
            max=data.get("max"),
            interval=data.get("interval"),
        )

    def to_dict(self) -> dict[str, Optional[Number]]:
        return {"min": self.min, "max": self.max, "interval": self.interval}


@dataclass(frozen=True)
class CartItem:
    """
    A cart line, either already in the quote or part of a proposed change.

    For changes, quantity is the magnitude of the change; the validator
    decides whether it is added or removed.
    """
    sku: str
    quantity: Any
    group_key: Optional[str] = None

    @property
    def key(self) -> str:
        """Group key, falling back to the SKU."""
        return self.group_key if self.group_key is not None else self.sku
