"""Tests for engine/ramp.py: linear ramp, totals and payback."""

from __future__ import annotations

import pytest

from aivis_roi.config import RAMP_MONTHS, BusinessInputs, VisibilityCurveConfig
from aivis_roi.engine.ramp import ramp_visibility, simulate_ramp
from aivis_roi.engine.scenario import project_scenario
from aivis_roi.errors import InvalidInputError


class TestVisibilityPath:
    def test_month_count(self, business: BusinessInputs):
        r = simulate_ramp(65.0, business)
        assert RAMP_MONTHS == 3
        assert [m.month for m in r.months] == [1, 2, 3]

    def test_linear_steps(self, business: BusinessInputs):
        r = simulate_ramp(65.0, business)
        # 33 → 43.67 → 54.33 → 65
        assert r.months[0].visibility == pytest.approx(33 + 32 / 3)
        assert r.months[1].visibility == pytest.approx(33 + 64 / 3)

    @pytest.mark.parametrize("current,target", [(33.0, 65.0), (0.1, 0.7), (17.3, 71.9), (80.0, 50.0)])
    def test_final_month_lands_exactly_on_target(self, current: float, target: float):
        inputs = BusinessInputs(current_visibility=current)
        r = simulate_ramp(target, inputs)
        assert r.months[RAMP_MONTHS - 1].visibility == target

    def test_longer_ramp(self, business: BusinessInputs):
        r = simulate_ramp(75.0, business, ramp_months=6)
        assert len(r.months) == 6
        assert r.months[-1].visibility == 75.0
        assert r.months[2].visibility == pytest.approx(33 + 3 * 42 / 6)

    def test_single_month_ramp_jumps_to_target(self, business: BusinessInputs):
        r = simulate_ramp(50.0, business, ramp_months=1)
        assert [m.visibility for m in r.months] == [50.0]

    def test_zero_month_ramp_rejected(self, business: BusinessInputs):
        with pytest.raises(InvalidInputError, match="ramp_months"):
            simulate_ramp(50.0, business, ramp_months=0)

    def test_helper_month_zero_is_current(self):
        assert ramp_visibility(33.0, 65.0, 0, 3) == 33.0


class TestConsistency:
    @pytest.mark.parametrize("target", [50.0, 65.0, 75.0])
    def test_final_month_equals_scenario(self, business: BusinessInputs, target: float):
        r = simulate_ramp(target, business)
        s = project_scenario(target, business)
        last = r.months[-1]
        assert last.extra_revenue == s.extra_revenue_per_month
        assert last.visitors_per_day == s.visitors_per_day
        assert last.extra_orders == s.extra_orders_per_month

    @pytest.mark.parametrize("target", [50.0, 65.0, 75.0])
    def test_total_is_sum_of_months(self, business: BusinessInputs, target: float):
        r = simulate_ramp(target, business)
        assert r.total_extra_revenue == sum(m.extra_revenue for m in r.months)

    def test_revenue_rises_each_month(self, business: BusinessInputs):
        r = simulate_ramp(75.0, business)
        revenues = [m.extra_revenue for m in r.months]
        assert revenues == sorted(revenues)

    def test_net_after_cost(self, business: BusinessInputs):
        r = simulate_ramp(65.0, business)
        assert r.program_cost == 5_550.0
        assert r.net_after_cost == pytest.approx(r.total_extra_revenue - 5_550.0)


class TestPayback:
    def test_baseline_pays_back_in_month_one(self, business: BusinessInputs):
        """Month 1 at 43.67% already earns ≈ $12.4k > $5,550."""
        r = simulate_ramp(65.0, business)
        m1 = r.months[0].extra_revenue
        assert m1 >= 5_550
        assert r.payback_days == pytest.approx(30 * (5_550 / m1))
        assert 0 < r.payback_days < 30
        assert r.paid_back

    def test_modest_target_pays_back_in_month_two(self, business: BusinessInputs):
        # 33% → 40%: month 1 ≈ $2.7k, month 2 ≈ $4.2k
        r = simulate_ramp(40.0, business)
        revenues = [m.extra_revenue for m in r.months]
        assert revenues[0] < 5_550 <= revenues[0] + revenues[1]
        expected = 30 * 1 + 30 * ((5_550 - revenues[0]) / revenues[1])
        assert r.payback_days == pytest.approx(expected)
        assert 30 < r.payback_days < 60

    def test_tiny_target_never_pays_back(self, business: BusinessInputs):
        # 33% → 34% earns ≈ $2.3k over the whole ramp
        r = simulate_ramp(34.0, business)
        assert r.total_extra_revenue < 5_550
        assert r.payback_days is None
        assert not r.paid_back
        assert r.net_after_cost < 0

    def test_custom_program_cost(self, business: BusinessInputs):
        r = simulate_ramp(65.0, business, program_cost=1_000.0)
        assert r.payback_days == pytest.approx(30 * 1_000.0 / r.months[0].extra_revenue)

    def test_month_length_follows_curve(self, business: BusinessInputs):
        curve = VisibilityCurveConfig(days_per_month=28)
        r = simulate_ramp(65.0, business, curve=curve)
        assert r.payback_days == pytest.approx(28 * (5_550 / r.months[0].extra_revenue))
