"""Nearest allowed quantity search."""

from .rounder import QuantityRounder, nearest_allowed_quantity

__all__ = ["QuantityRounder", "nearest_allowed_quantity"]
