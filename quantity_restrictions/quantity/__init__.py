"""Quantity-safe arithmetic for decimal business quantities."""

from .arithmetic import QuantityMath

__all__ = ["QuantityMath"]
