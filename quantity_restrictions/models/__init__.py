"""
Data models module.

Immutable quantity policies, cart items and validation results. A result is
accumulated through ViolationCollector and frozen once per batch.
"""

from .policy import CartItem, QuantityPolicy
from .results import ValidationResult, Violation, ViolationCollector, ViolationKind

__all__ = [
    "CartItem",
    "QuantityPolicy",
    "ValidationResult",
    "Violation",
    "ViolationCollector",
    "ViolationKind",
]
