"""Tests for nearest allowed quantity rounding"""

import pytest

from quantity_restrictions.config.defaults import (
    DefaultConfig,
    DefaultPolicyParams,
    QuantityParams,
    RounderParams,
)
from quantity_restrictions.errors import EnumerationLimitError
from quantity_restrictions.models import QuantityPolicy
from quantity_restrictions.quantity import QuantityMath
from quantity_restrictions.rounding import QuantityRounder, nearest_allowed_quantity


def make_config(default_min=1.0, max_candidates=1_000_000, precision=2):
    return DefaultConfig(
        quantity=QuantityParams(precision=precision, default_min_quantity=default_min),
        default_policy=DefaultPolicyParams(),
        rounder=RounderParams(max_candidates=max_candidates),
    )


class TestClamping:
    """Test min/max clamping"""

    def setup_method(self):
        self.rounder = QuantityRounder()

    def test_below_min_returns_min(self):
        policy = QuantityPolicy(min=4, max=20, interval=4)
        assert self.rounder.nearest_allowed_quantity(policy, 1) == 4

    def test_above_max_clamps_to_max(self):
        policy = QuantityPolicy(min=1, max=6, interval=0)
        assert self.rounder.nearest_allowed_quantity(policy, 10) == 6

    def test_above_max_snaps_below_max(self):
        policy = QuantityPolicy(min=1, max=6, interval=2)
        # clamp to 6, then allowed values are 5, 3, 1
        assert self.rounder.nearest_allowed_quantity(policy, 10) == 5

    def test_unset_min_uses_configured_default(self):
        policy = QuantityPolicy(interval=1)
        assert self.rounder.nearest_allowed_quantity(policy, 0) == 1

    def test_zero_max_is_unbounded(self):
        policy = QuantityPolicy(max=0, interval=2)
        # min falls back to 1, requests are not clamped to 0
        assert self.rounder.nearest_allowed_quantity(policy, 0.5) == 1
        assert self.rounder.nearest_allowed_quantity(policy, 4) == 5
        assert self.rounder.nearest_allowed_quantity(policy, 9) == 9

    def test_zero_min_uses_configured_default(self):
        rounder = QuantityRounder(make_config(default_min=2.0))
        assert rounder.nearest_allowed_quantity(QuantityPolicy(min=0), 1) == 2


class TestZeroInterval:
    """Without an interval only min and max apply"""

    def setup_method(self):
        self.rounder = QuantityRounder()

    @pytest.mark.parametrize("requested, expected", [
        (0.5, 1.0),
        (1.0, 1.0),
        (7.3, 7.3),
        (250, 250),
    ])
    def test_unbounded(self, requested, expected):
        policy = QuantityPolicy(min=1, interval=0)
        assert self.rounder.nearest_allowed_quantity(policy, requested) == expected

    def test_unset_interval_behaves_like_zero(self):
        assert self.rounder.nearest_allowed_quantity(QuantityPolicy(min=1), 3.3) == 3.3

    def test_never_enumerates(self, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("allowed quantities must not be enumerated")

        monkeypatch.setattr(self.rounder, "allowed_quantities", fail)
        policy = QuantityPolicy(min=2, max=9, interval=0)
        assert self.rounder.nearest_allowed_quantity(policy, 5.5) == 5.5
        assert self.rounder.nearest_allowed_quantity(policy, 12) == 9
        assert self.rounder.nearest_allowed_quantity(policy, 1) == 2


class TestIntervalSnapping:
    """Test snapping onto the min + k * interval grid"""

    def setup_method(self):
        self.rounder = QuantityRounder()

    def test_on_grid_returned_unchanged(self):
        policy = QuantityPolicy(min=1, interval=2)
        # offset 4 is a multiple of 2
        assert self.rounder.nearest_allowed_quantity(policy, 5) == 5

    def test_tie_prefers_larger_value(self):
        policy = QuantityPolicy(min=1, interval=2)
        # 6 is equally far from 5 and 7
        assert self.rounder.nearest_allowed_quantity(policy, 6) == 7

    def test_tie_with_max_prefers_larger_value(self):
        policy = QuantityPolicy(min=2, max=10, interval=4)
        assert self.rounder.nearest_allowed_quantity(policy, 8) == 10

    def test_nearest_lower_value(self):
        policy = QuantityPolicy(min=1, max=5, interval=3)
        # allowed: 4, 1
        assert self.rounder.nearest_allowed_quantity(policy, 3) == 4
        assert self.rounder.nearest_allowed_quantity(policy, 2) == 1

    def test_single_allowed_value(self):
        policy = QuantityPolicy(min=2, max=4, interval=3)
        assert self.rounder.nearest_allowed_quantity(policy, 3) == 2

    def test_decimal_interval(self):
        policy = QuantityPolicy(min=0.5, interval=0.25)
        assert self.rounder.nearest_allowed_quantity(policy, 1.3) == 1.25
        assert self.rounder.nearest_allowed_quantity(policy, 1.4) == 1.5

    def test_float_drift_does_not_trigger_snapping(self, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("on-grid decimal value must not be enumerated")

        monkeypatch.setattr(self.rounder, "allowed_quantities", fail)
        policy = QuantityPolicy(min=2.5, interval=0.1)
        assert self.rounder.nearest_allowed_quantity(policy, 3.0) == 3.0

    def test_module_level_function(self):
        policy = QuantityPolicy(min=1, interval=2)
        assert nearest_allowed_quantity(policy, 6) == 7
        assert nearest_allowed_quantity(QuantityPolicy(interval=2), 4,
                                        config=make_config(default_min=2.0)) == 4


class TestAllowedQuantities:
    """Test allowed set enumeration"""

    def setup_method(self):
        self.rounder = QuantityRounder()

    def test_descending_order(self):
        assert self.rounder.allowed_quantities(1, 7, 2) == (7.0, 5.0, 3.0, 1.0)

    def test_upper_bound_not_on_grid(self):
        assert self.rounder.allowed_quantities(1, 8, 3) == (7.0, 4.0, 1.0)

    def test_min_plus_interval_above_max(self):
        assert self.rounder.allowed_quantities(3, 4, 2) == (3.0,)

    def test_decimal_steps_do_not_drift(self):
        allowed = self.rounder.allowed_quantities(0.1, 1.0, 0.1)
        assert len(allowed) == 10
        assert allowed[0] == 1.0
        assert allowed[-1] == 0.1
        assert 0.3 in allowed

    def test_nearest_from_allowed_single(self):
        assert self.rounder.nearest_from_allowed(100, (3.0,)) == 3.0

    def test_enumeration_limit(self):
        rounder = QuantityRounder(make_config(max_candidates=10))
        policy = QuantityPolicy(min=1, interval=0.5)

        with pytest.raises(EnumerationLimitError) as exc_info:
            rounder.nearest_allowed_quantity(policy, 100.3)

        assert exc_info.value.limit == 10
        assert exc_info.value.candidate_count > 10

    def test_enumeration_limit_disabled(self):
        rounder = QuantityRounder(make_config(max_candidates=0))
        policy = QuantityPolicy(min=1, interval=0.5)
        assert rounder.nearest_allowed_quantity(policy, 100.3) == 100.5


class TestRounderProperties:
    """Grid membership and idempotence over a range of inputs"""

    POLICIES = [
        QuantityPolicy(min=1, max=10, interval=3),
        QuantityPolicy(min=2, max=20, interval=4),
        QuantityPolicy(min=0.5, max=5, interval=0.5),
        QuantityPolicy(min=1.5, max=9, interval=1.25),
        QuantityPolicy(min=3, interval=7),
    ]
    REQUESTS = [0, 0.3, 1, 2.2, 3.5, 4, 5.75, 8, 9.99, 11, 17, 40]

    def setup_method(self):
        self.rounder = QuantityRounder()
        self.math = QuantityMath(precision=2)

    @pytest.mark.parametrize("policy", POLICIES)
    def test_result_is_on_grid_and_in_bounds(self, policy):
        for requested in self.REQUESTS:
            value = self.rounder.nearest_allowed_quantity(policy, requested)
            steps = self.math.subtract(value, policy.min) / policy.interval

            assert self.math.is_equal(steps, round(steps)), (requested, value)
            assert round(steps) >= 0
            assert value >= policy.min
            if policy.max is not None:
                assert value <= policy.max

    @pytest.mark.parametrize("policy", POLICIES + [QuantityPolicy(min=2, max=6)])
    def test_idempotent(self, policy):
        for requested in self.REQUESTS:
            once = self.rounder.nearest_allowed_quantity(policy, requested)
            assert self.rounder.nearest_allowed_quantity(policy, once) == once
