"""Monthly economics at one visibility level.

Shared by the steady-state scenario and every ramp month so both run the
exact same arithmetic (the final ramp month equals the scenario bit for bit).
"""

from __future__ import annotations

from dataclasses import dataclass

from aivis_roi.config.business import BusinessInputs
from aivis_roi.config.curve import VisibilityCurveConfig
from aivis_roi.models.results import Baseline


@dataclass(frozen=True)
class MonthlyEconomics:
    """Visitors, orders and revenue for a month spent at one visibility."""

    visibility: float
    visitors_per_day: float
    extra_visitors_per_month: float
    orders_per_month: float
    extra_orders_per_month: float
    extra_revenue_per_month: float


def economics_at(
    visibility: float,
    inputs: BusinessInputs,
    baseline: Baseline,
    scale: float,
    curve: VisibilityCurveConfig,
) -> MonthlyEconomics:
    """Evaluate the model at ``visibility`` given a precomputed anchor scale.

    extra_visitors  = (visitors_per_day − visitors_today) × days
    orders          = visitors_per_day × days × cr/100
    extra_orders    = orders − orders_today
    extra_revenue   = extra_orders × aov
    """
    days = curve.days_per_month
    visitors_per_day = scale * curve.raw(visibility)
    extra_visitors = (visitors_per_day - baseline.visitors_today) * days
    orders = visitors_per_day * days * (inputs.conversion_rate / 100)
    extra_orders = orders - baseline.orders_today

    return MonthlyEconomics(
        visibility=visibility,
        visitors_per_day=visitors_per_day,
        extra_visitors_per_month=extra_visitors,
        orders_per_month=orders,
        extra_orders_per_month=extra_orders,
        extra_revenue_per_month=extra_orders * inputs.aov,
    )
