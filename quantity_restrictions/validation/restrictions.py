"""
Quantity restriction validation for cart changes.

Validation runs in two phases per item. The current and resulting
quantities are first sanity checked (whole numbers, with the sign allowed
by the operation); items that pass are then checked against their product's
quantity policy. Policy checks are independent, so one item can produce
several violations. Removing an item completely is always allowed.

Resulting quantities are computed per group key while policies and current
quote quantities are looked up per SKU.
"""

import math
from collections.abc import Iterable, Mapping
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Protocol

from ..config.defaults import DefaultConfig, get_default_config
from ..errors import PolicyLookupError, PreconditionError, UnresolvedGroupKeyError
from ..logging.config import get_validation_logger, log_validation_summary, log_violation
from ..models.policy import CartItem, QuantityPolicy
from ..models.results import ValidationResult, ViolationCollector, ViolationKind
from ..quantity.arithmetic import QuantityMath

logger = get_validation_logger(__name__)

INCORRECT_QUANTITY_RESTRICTION = 1


class ChangeOperation(str, Enum):
    """Direction of a cart change."""
    ADDITION = "addition"
    REMOVAL = "removal"


class PolicyLookup(Protocol):
    """Batch source of quantity policies."""

    def find_policies_by_skus(self, skus: set[str]) -> Mapping[str, QuantityPolicy]:
        """Return stored policies; SKUs without one are left out."""
        ...


def _is_number(value: Any) -> bool:
    return (isinstance(value, (int, float, Decimal))
            and not isinstance(value, bool)
            and math.isfinite(float(value)))


class RestrictionValidator:
    """Validates cart additions and removals against quantity policies."""

    def __init__(self, policy_lookup: PolicyLookup,
                 config: Optional[DefaultConfig] = None,
                 quantity_math: Optional[QuantityMath] = None):
        self.policy_lookup = policy_lookup
        self.config = config or get_default_config()
        self.math = quantity_math or QuantityMath(self.config.quantity.precision)
        self.default_policy = QuantityPolicy(
            min=self.config.default_policy.min,
            max=self.config.default_policy.max,
            interval=self.config.default_policy.interval,
        )

    def validate_additions(self, changes: Iterable[CartItem],
                           quote_items: Iterable[CartItem]) -> ValidationResult:
        """
        Validate adding changes to the quote.

        Each resulting quantity (quote quantity + change quantity) must be a
        positive whole number that satisfies the product's policy.

        Raises:
            UnresolvedGroupKeyError: If a group key cannot be mapped to a SKU
            PolicyLookupError: If the policy lookup fails
        """
        return self._validate(list(changes), list(quote_items), ChangeOperation.ADDITION)

    def validate_removals(self, changes: Iterable[CartItem],
                          quote_items: Iterable[CartItem]) -> ValidationResult:
        """
        Validate removing changes from the quote.

        Each resulting quantity (quote quantity - change quantity) must be a
        non-negative whole number; zero is always valid, anything else must
        satisfy the product's policy.

        Raises:
            UnresolvedGroupKeyError: If a group key cannot be mapped to a SKU
            PolicyLookupError: If the policy lookup fails
        """
        return self._validate(list(changes), list(quote_items), ChangeOperation.REMOVAL)

    def _validate(self, changes: list[CartItem], quote_items: list[CartItem],
                  operation: ChangeOperation) -> ValidationResult:
        collector = ViolationCollector()

        sku_by_group_key = self.get_changed_sku_map(changes)
        change_quantity_by_group_key = {item.key: item.quantity for item in changes}
        quote_quantity_by_sku = self.get_quote_quantities_by_sku(quote_items)
        resulting_by_group_key = self.get_resulting_quantity_map(changes, quote_items, operation)
        policies = self.get_policy_map(set(sku_by_group_key.values()))

        for group_key, resulting_quantity in resulting_by_group_key.items():
            sku = sku_by_group_key.get(group_key)
            if sku is None:
                raise UnresolvedGroupKeyError(
                    f"No SKU known for group key {group_key!r}",
                    group_key=group_key,
                    context={"operation": operation.value},
                )

            current_quantity = quote_quantity_by_sku.get(sku, 0)
            if not self._check_whole_quantity(sku, current_quantity, operation, collector):
                continue

            change_quantity = change_quantity_by_group_key[group_key]
            if _is_number(change_quantity) and change_quantity < 0:
                self._add_violation(collector, ViolationKind.INCORRECT_QUANTITY, sku,
                                    INCORRECT_QUANTITY_RESTRICTION, change_quantity, operation)
                continue

            if not self._check_whole_quantity(
                sku, resulting_quantity, operation, collector,
                positive=operation is ChangeOperation.ADDITION,
            ):
                continue

            quantity = int(round(float(resulting_quantity)))
            if quantity == 0:
                continue

            self.validate_item(sku, quantity, policies[sku], operation, collector)

        log_validation_summary(
            logger,
            operation=operation.value,
            item_count=len(resulting_by_group_key),
            violation_count=len(collector),
        )

        return collector.build()

    def validate_item(self, sku: str, quantity: int, policy: QuantityPolicy,
                      operation: ChangeOperation, collector: ViolationCollector) -> None:
        """Check a non-zero whole quantity against one policy."""
        minimum = policy.min if policy.min is not None else self.config.quantity.default_min_quantity

        if quantity < minimum and not self.math.is_equal(quantity, minimum):
            self._add_violation(collector, ViolationKind.MIN_NOT_FULFILLED,
                                sku, minimum, quantity, operation)

        if policy.has_interval:
            remainder = self.math.fmod(self.math.subtract(quantity, minimum), policy.interval)
            if not self.math.is_equal(remainder, 0):
                self._add_violation(collector, ViolationKind.INTERVAL_NOT_FULFILLED,
                                    sku, policy.interval, quantity, operation)

        if (policy.max is not None and quantity > policy.max
                and not self.math.is_equal(quantity, policy.max)):
            self._add_violation(collector, ViolationKind.MAX_NOT_FULFILLED,
                                sku, policy.max, quantity, operation)

    def get_changed_sku_map(self, changes: list[CartItem]) -> dict[str, str]:
        """Map group keys of the changed items to their SKUs."""
        return {item.key: item.sku for item in changes}

    def get_quote_quantities_by_sku(self, quote_items: list[CartItem]) -> dict[str, Any]:
        """Map SKUs present in the quote to their quantity."""
        return {item.sku: item.quantity for item in quote_items}

    def get_resulting_quantity_map(self, changes: list[CartItem], quote_items: list[CartItem],
                                   operation: ChangeOperation) -> dict[str, Any]:
        """Map group keys to the quantity they would have after the change."""
        quote_quantity_by_group_key = {item.key: item.quantity for item in quote_items}

        resulting = {}
        for item in changes:
            current = quote_quantity_by_group_key.get(item.key, 0)
            resulting[item.key] = self._apply_change(current, item.quantity, operation)

        return resulting

    def get_policy_map(self, skus: set[str]) -> dict[str, QuantityPolicy]:
        """Fetch policies for all SKUs in one call, defaulting missing ones."""
        if not skus:
            return {}

        try:
            found = self.policy_lookup.find_policies_by_skus(set(skus))
        except PreconditionError:
            raise
        except Exception as e:
            raise PolicyLookupError(
                f"Policy lookup failed for {len(skus)} SKUs: {e}",
                skus=set(skus),
            ) from e

        if not isinstance(found, Mapping):
            raise PolicyLookupError(
                f"Policy lookup returned {type(found).__name__}, expected a mapping",
                skus=set(skus),
            )

        return {sku: found.get(sku) or self.default_policy for sku in skus}

    def _apply_change(self, current: Any, change: Any, operation: ChangeOperation) -> Any:
        # Non-numeric input is passed through and rejected as INCORRECT_QUANTITY.
        # The result stays unrounded so sub-precision fractions fail the whole-number check.
        if not (_is_number(current) and _is_number(change)):
            return change
        if operation is ChangeOperation.ADDITION:
            return float(current) + float(change)
        return float(current) - float(change)

    def _check_whole_quantity(self, sku: str, quantity: Any, operation: ChangeOperation,
                              collector: ViolationCollector, positive: bool = False) -> bool:
        if not self.math.is_integer(quantity):
            valid = False
        elif positive:
            valid = round(float(quantity)) > 0
        else:
            valid = round(float(quantity)) >= 0

        if not valid:
            self._add_violation(collector, ViolationKind.INCORRECT_QUANTITY,
                                sku, INCORRECT_QUANTITY_RESTRICTION, quantity, operation)

        return valid

    def _add_violation(self, collector: ViolationCollector, kind: ViolationKind, sku: str,
                       restriction_value: Any, actual_value: Any,
                       operation: ChangeOperation) -> None:
        collector.add(kind, sku, restriction_value, actual_value)
        log_violation(logger, kind.value, sku, restriction_value, actual_value, operation.value)


def validate_additions(changes: Iterable[CartItem], quote_items: Iterable[CartItem],
                       policy_lookup: PolicyLookup,
                       config: Optional[DefaultConfig] = None) -> ValidationResult:
    """Validate cart additions with a one-off validator."""
    return RestrictionValidator(policy_lookup, config).validate_additions(changes, quote_items)


def validate_removals(changes: Iterable[CartItem], quote_items: Iterable[CartItem],
                      policy_lookup: PolicyLookup,
                      config: Optional[DefaultConfig] = None) -> ValidationResult:
    """Validate cart removals with a one-off validator."""
    return RestrictionValidator(policy_lookup, config).validate_removals(changes, quote_items)
