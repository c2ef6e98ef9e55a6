"""Cart change validation against product quantity policies."""

from .restrictions import (
    ChangeOperation,
    PolicyLookup,
    RestrictionValidator,
    validate_additions,
    validate_removals,
)

__all__ = [
    "ChangeOperation",
    "PolicyLookup",
    "RestrictionValidator",
    "validate_additions",
    "validate_removals",
]
