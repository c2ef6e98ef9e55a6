"""
Quantity Restrictions - product quantity policy engine

Computes the nearest quantity allowed by a product's quantity policy
(minimum, maximum and step interval) and validates proposed cart changes
against those policies, collecting structured violations.
"""

from .models import CartItem, QuantityPolicy, ValidationResult, Violation, ViolationKind
from .rounding.rounder import QuantityRounder, nearest_allowed_quantity
from .validation.restrictions import (
    RestrictionValidator,
    validate_additions,
    validate_removals,
)

__version__ = "0.1.0"
__author__ = "Quantity Restrictions Team"

__all__ = [
    "CartItem",
    "QuantityPolicy",
    "QuantityRounder",
    "RestrictionValidator",
    "ValidationResult",
    "Violation",
    "ViolationKind",
    "nearest_allowed_quantity",
    "validate_additions",
    "validate_removals",
]
