"""
Precondition failures.

These indicate caller or integration bugs rather than breaches of a quantity
policy, so they abort the call instead of being collected as violations.
"""

from typing import Any, Optional

from .base import QuantityRestrictionError


class PreconditionError(QuantityRestrictionError):
    """Input or collaborator state makes the call impossible to complete."""


class UnresolvedGroupKeyError(PreconditionError):
    """A resulting-quantity entry references a group key with no known SKU."""

    def __init__(self, message: str, group_key: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.group_key = group_key


class PolicyLookupError(PreconditionError):
    """The policy lookup collaborator failed."""

    def __init__(self, message: str, skus: Optional[set] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.skus = skus or set()


class EnumerationLimitError(PreconditionError):
    """Rounding would enumerate more allowed quantities than configured."""

    def __init__(self, message: str, candidate_count: Optional[int] = None,
                 limit: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.candidate_count = candidate_count
        self.limit = limit


class InvalidPolicyError(PreconditionError):
    """A quantity policy breaks its own invariants."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value
