"""Steady-state scenario: economics once the target visibility is reached."""

from __future__ import annotations

from aivis_roi.config.business import BusinessInputs
from aivis_roi.config.curve import VisibilityCurveConfig
from aivis_roi.engine.baseline import derive_baseline
from aivis_roi.engine.economics import economics_at
from aivis_roi.engine.visibility import anchor_scale
from aivis_roi.models.results import ScenarioResult


def project_scenario(
    target_visibility: float,
    inputs: BusinessInputs,
    curve: VisibilityCurveConfig | None = None,
) -> ScenarioResult:
    """Extra visitors, orders and revenue per month at ``target_visibility``."""
    if curve is None:
        curve = VisibilityCurveConfig()

    baseline = derive_baseline(inputs, curve)
    scale = anchor_scale(inputs, curve)
    e = economics_at(target_visibility, inputs, baseline, scale, curve)

    return ScenarioResult(
        target_visibility=target_visibility,
        visitors_per_day=e.visitors_per_day,
        extra_visitors_per_month=e.extra_visitors_per_month,
        orders_per_month=e.orders_per_month,
        extra_orders_per_month=e.extra_orders_per_month,
        extra_revenue_per_month=e.extra_revenue_per_month,
    )
