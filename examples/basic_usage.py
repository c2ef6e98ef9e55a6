#!/usr/bin/env python3
"""
Basic Usage Example - quantity restrictions

Shows how to:
- Snap a requested quantity to the nearest allowed value
- Validate cart additions and removals against stored policies
- Read the violations for message rendering

Run: python examples/basic_usage.py
"""

from quantity_restrictions import (
    CartItem,
    QuantityPolicy,
    RestrictionValidator,
    nearest_allowed_quantity,
)
from quantity_restrictions.logging import configure_logging
from quantity_restrictions.persistence import InMemoryPolicyStore


def rounding_demo() -> None:
    """Print nearest allowed quantities for a 6-pack policy."""
    policy = QuantityPolicy(min=6, max=48, interval=6)

    print("=== Nearest allowed quantity (min 6, max 48, interval 6) ===")
    for requested in (1, 7, 9, 15, 100):
        print(f"  requested {requested:>3} -> {nearest_allowed_quantity(policy, requested):g}")


def validation_demo() -> None:
    """Validate a mixed batch of cart changes."""
    store = InMemoryPolicyStore({
        "WATER-6PK": QuantityPolicy(min=6, max=48, interval=6),
        "COFFEE-1KG": QuantityPolicy(min=2, max=10, interval=1),
    })
    validator = RestrictionValidator(store)

    quote = [
        CartItem(sku="WATER-6PK", quantity=12),
        CartItem(sku="COFFEE-1KG", quantity=2),
    ]
    additions = [
        CartItem(sku="WATER-6PK", quantity=4),
        CartItem(sku="COFFEE-1KG", quantity=1),
        CartItem(sku="TEA-BOX", quantity=3),
    ]
    removals = [CartItem(sku="COFFEE-1KG", quantity=2)]

    print("\n=== Additions ===")
    result = validator.validate_additions(additions, quote)
    print(f"  success: {result.is_success}")
    for violation in result.violations:
        print(f"  {violation.message_key} {violation.parameters}")

    print("\n=== Removals ===")
    result = validator.validate_removals(removals, quote)
    print(f"  success: {result.is_success}")


def main() -> None:
    configure_logging(level="WARNING")
    rounding_demo()
    validation_demo()


if __name__ == "__main__":
    main()
