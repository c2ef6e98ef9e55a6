"""Default configuration parameters for quantity rounding and validation."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class QuantityParams:
    """Quantity arithmetic parameters."""
    precision: int = 2                      # Decimal places kept by add/subtract
    default_min_quantity: float = 1.0       # Used when a policy has no minimum


@dataclass(frozen=True)
class DefaultPolicyParams:
    """Policy applied to SKUs the policy lookup knows nothing about."""
    min: float = 1
    max: Optional[float] = None
    interval: float = 1


@dataclass(frozen=True)
class RounderParams:
    """Nearest-quantity search parameters."""
    max_candidates: int = 1_000_000         # 0 disables the enumeration guard


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    quantity: QuantityParams
    default_policy: DefaultPolicyParams
    rounder: RounderParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        quantity=QuantityParams(),
        default_policy=DefaultPolicyParams(),
        rounder=RounderParams(),
    )
