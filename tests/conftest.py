"""Pytest configuration and shared fixtures."""

from typing import Any, Callable, Optional

import pytest

from quantity_restrictions.config.defaults import get_default_config
from quantity_restrictions.models import CartItem, QuantityPolicy
from quantity_restrictions.persistence import InMemoryPolicyStore


@pytest.fixture
def default_config():
    """Default configuration instance."""
    return get_default_config()


@pytest.fixture
def policy_store() -> InMemoryPolicyStore:
    """Policy store with a few representative products."""
    return InMemoryPolicyStore({
        "SKU-PACK-6": QuantityPolicy(min=6, max=60, interval=6),
        "SKU-MIN-3": QuantityPolicy(min=3, interval=1),
        "SKU-MAX-4": QuantityPolicy(min=1, max=4, interval=1),
    })


@pytest.fixture
def make_cart() -> Callable[..., tuple[list[CartItem], list[CartItem]]]:
    """Build (changes, quote_items) for a single SKU."""

    def _make(sku: str, quote_quantity: Any, change_quantity: Any,
              group_key: Optional[str] = None):
        quote_items = []
        if quote_quantity:
            quote_items.append(CartItem(sku=sku, quantity=quote_quantity, group_key=group_key))
        changes = [CartItem(sku=sku, quantity=change_quantity, group_key=group_key)]
        return changes, quote_items

    return _make
