"""
Error classification for quantity restriction processing.

Business-rule breaches are never raised: they are reported as violations on
the validation result. The exceptions here cover integration and caller
mistakes that make a call impossible to complete.
"""

from .base import ConfigurationError, QuantityRestrictionError
from .preconditions import (
    EnumerationLimitError,
    InvalidPolicyError,
    PolicyLookupError,
    PreconditionError,
    UnresolvedGroupKeyError,
)

__all__ = [
    "QuantityRestrictionError",
    "ConfigurationError",
    # Precondition failures
    "PreconditionError",
    "UnresolvedGroupKeyError",
    "PolicyLookupError",
    "EnumerationLimitError",
    "InvalidPolicyError",
]
