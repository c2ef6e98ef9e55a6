"""Validation result models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ViolationKind(str, Enum):
    """Symbolic kinds of quantity policy breaches."""
    MIN_NOT_FULFILLED = "MIN_NOT_FULFILLED"
    MAX_NOT_FULFILLED = "MAX_NOT_FULFILLED"
    INTERVAL_NOT_FULFILLED = "INTERVAL_NOT_FULFILLED"
    INCORRECT_QUANTITY = "INCORRECT_QUANTITY"

    @property
    def message_key(self) -> str:
        """Translation key used by message renderers."""
        return _MESSAGE_KEYS[self]


_MESSAGE_KEYS = {
    ViolationKind.MIN_NOT_FULFILLED: "cart.pre.check.quantity.min.failed",
    ViolationKind.MAX_NOT_FULFILLED: "cart.pre.check.quantity.max.failed",
    ViolationKind.INTERVAL_NOT_FULFILLED: "cart.pre.check.quantity.interval.failed",
    ViolationKind.INCORRECT_QUANTITY: "cart.pre.check.quantity.value.failed",
}


@dataclass(frozen=True)
class Violation:
    """One policy breach for one item."""
    kind: ViolationKind
    sku: str
    restriction_value: Any
    actual_value: Any

    @property
    def message_key(self) -> str:
        return self.kind.message_key

    @property
    def parameters(self) -> dict[str, Any]:
        """Placeholder values for rendering the violation message."""
        return {
            "%sku%": self.sku,
            "%restrictionValue%": self.restriction_value,
            "%actualValue%": self.actual_value,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message_key": self.message_key,
            "sku": self.sku,
            "restriction_value": self.restriction_value,
            "actual_value": self.actual_value,
        }


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one batch of cart changes."""
    violations: tuple[Violation, ...] = ()

    @property
    def is_success(self) -> bool:
        return not self.violations

    def violations_for(self, sku: str) -> tuple[Violation, ...]:
        """Violations recorded for a single SKU, in recording order."""
        return tuple(v for v in self.violations if v.sku == sku)

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_success": self.is_success,
            "violations": [v.to_dict() for v in self.violations],
        }


@dataclass
class ViolationCollector:
    """Accumulates violations while a batch is processed."""
    _violations: list[Violation] = field(default_factory=list)

    def add(self, kind: ViolationKind, sku: str, restriction_value: Any,
            actual_value: Any) -> Violation:
        violation = Violation(
            kind=kind,
            sku=sku,
            restriction_value=restriction_value,
            actual_value=actual_value,
        )
        self._violations.append(violation)
        return violation

    @property
    def is_success(self) -> bool:
        return not self._violations

    def __len__(self) -> int:
        return len(self._violations)

    def build(self) -> ValidationResult:
        """Freeze the collected violations into a result."""
        return ValidationResult(violations=tuple(self._violations))
