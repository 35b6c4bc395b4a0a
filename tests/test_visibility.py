"""Tests for engine/visibility.py: the anchored visitors curve."""

from __future__ import annotations

import numpy as np
import pytest

from aivis_roi.config import BusinessInputs, VisibilityCurveConfig
from aivis_roi.engine.baseline import derive_baseline
from aivis_roi.engine.visibility import anchor_scale, visitors_at, visitors_curve
from aivis_roi.errors import InvalidInputError


def _raw(v: float) -> float:
    return -850.0 + 63.333 * v


class TestAnchoring:
    """visitors_at(current) reproduces today's visitors."""

    def test_reference_business(self, business: BusinessInputs):
        assert visitors_at(33.0, business) == pytest.approx(1_800.0, rel=1e-12)

    @pytest.mark.parametrize("current", [0.0, 20.0, 33.0, 50.0, 99.5, 100.0])
    def test_any_current_visibility(self, current: float):
        inputs = BusinessInputs(aov=50, conversion_rate=2.0, daily_orders=40, current_visibility=current)
        expected = derive_baseline(inputs).visitors_today
        assert visitors_at(current, inputs) == pytest.approx(expected, rel=1e-9)

    def test_scale_factor(self, business: BusinessInputs):
        # raw(33) = −850 + 63.333 × 33 = 1239.989 → k = 1800 / 1239.989 ≈ 1.4516
        assert _raw(33) == pytest.approx(1_239.989)
        assert anchor_scale(business) == pytest.approx(1_800.0 / 1_239.989)
        assert anchor_scale(business) == pytest.approx(1.4516, abs=1e-3)


class TestShape:
    def test_literal_baseline_target(self, business: BusinessInputs):
        # raw(65) = 3266.645 → 1800 × 3266.645 / 1239.989 ≈ 4741.9
        expected = 1_800.0 * _raw(65) / _raw(33)
        assert visitors_at(65.0, business) == pytest.approx(expected, rel=1e-12)
        assert visitors_at(65.0, business) == pytest.approx(4_743.1, rel=1e-3)

    def test_strictly_increasing(self, business: BusinessInputs):
        values = [visitors_at(v, business) for v in range(14, 101)]
        assert all(a < b for a, b in zip(values, values[1:]))

    def test_linear_in_visibility(self, business: BusinessInputs):
        step_1 = visitors_at(51, business) - visitors_at(50, business)
        step_2 = visitors_at(76, business) - visitors_at(75, business)
        assert step_1 == pytest.approx(step_2)

    def test_custom_curve(self, business: BusinessInputs):
        curve = VisibilityCurveConfig(intercept=0.0, slope=10.0)
        # Pure proportional curve: doubling visibility doubles visitors
        assert visitors_at(66.0, business, curve) == pytest.approx(3_600.0)


class TestVectorised:
    def test_matches_scalar(self, business: BusinessInputs):
        grid = np.linspace(0, 100, 11)
        curve = visitors_curve(grid, business)
        expected = [visitors_at(v, business) for v in grid]
        np.testing.assert_allclose(curve, expected, rtol=1e-12)

    def test_accepts_lists(self, business: BusinessInputs):
        out = visitors_curve([33, 65], business)
        assert out.shape == (2,)
        assert out[0] == pytest.approx(1_800.0)


class TestRootSingularity:
    def test_current_at_curve_root_rejected(self):
        root = 850.0 / 63.333  # ≈ 13.42%
        inputs = BusinessInputs(current_visibility=root)
        with pytest.raises(InvalidInputError, match="root"):
            visitors_at(50.0, inputs)

    def test_root_reported_by_curve(self, curve: VisibilityCurveConfig):
        assert curve.root_visibility == pytest.approx(13.4211, abs=1e-4)

    def test_vectorised_also_rejects_root(self):
        inputs = BusinessInputs(current_visibility=850.0 / 63.333)
        with pytest.raises(InvalidInputError):
            visitors_curve([50.0], inputs)

    def test_near_root_is_still_defined(self):
        inputs = BusinessInputs(current_visibility=13.5)
        assert visitors_at(13.5, inputs) == pytest.approx(derive_baseline(inputs).visitors_today)
