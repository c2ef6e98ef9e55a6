"""Base error types shared by every quantity restriction component."""

from typing import Any, Optional


class QuantityRestrictionError(Exception):
    """Base class for errors raised by the quantity restriction core."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ConfigurationError(QuantityRestrictionError):
    """Configuration could not be loaded or failed validation."""

    def __init__(self, message: str, issues: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.issues = issues or []
