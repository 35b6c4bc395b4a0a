"""Linear ramp simulation: month-by-month earnings on the way to target.

Visibility moves in equal steps from current to target:

  visibility(m) = current + m × (target − current) / ramp_months,  m = 1..N

Month 0 is implicitly the current visibility; month N is the target.
"""

from __future__ import annotations

from aivis_roi.config.business import BusinessInputs
from aivis_roi.config.curve import VisibilityCurveConfig
from aivis_roi.config.program import PROGRAM_COST, RAMP_MONTHS
from aivis_roi.engine.baseline import derive_baseline
from aivis_roi.engine.economics import economics_at
from aivis_roi.engine.visibility import anchor_scale
from aivis_roi.errors import InvalidInputError
from aivis_roi.finance.payback import compute_payback_days, net_after_cost
from aivis_roi.models.results import MonthData, RampResult


def ramp_visibility(current: float, target: float, month: int, ramp_months: int) -> float:
    """Visibility reached at the end of ``month`` (1-indexed)."""
    if month >= ramp_months:
        # Pinned so the last month lands on the target without float drift
        return target
    return current + month * (target - current) / ramp_months


def simulate_ramp(
    target_visibility: float,
    inputs: BusinessInputs,
    ramp_months: int = RAMP_MONTHS,
    curve: VisibilityCurveConfig | None = None,
    program_cost: float = PROGRAM_COST,
) -> RampResult:
    """Simulate the ramp toward ``target_visibility`` and its payback."""
    if curve is None:
        curve = VisibilityCurveConfig()
    if ramp_months < 1:
        raise InvalidInputError(f"ramp_months must be >= 1, got {ramp_months}")

    baseline = derive_baseline(inputs, curve)
    scale = anchor_scale(inputs, curve)

    months: list[MonthData] = []
    for m in range(1, ramp_months + 1):
        visibility = ramp_visibility(inputs.current_visibility, target_visibility, m, ramp_months)
        e = economics_at(visibility, inputs, baseline, scale, curve)
        months.append(MonthData(
            month=m,
            visibility=visibility,
            visitors_per_day=e.visitors_per_day,
            extra_visitors_per_month=e.extra_visitors_per_month,
            orders_per_month=e.orders_per_month,
            extra_orders=e.extra_orders_per_month,
            extra_revenue=e.extra_revenue_per_month,
        ))

    total_extra_revenue = sum(m.extra_revenue for m in months)
    payback_days = compute_payback_days(
        [m.extra_revenue for m in months], program_cost, curve.days_per_month,
    )

    return RampResult(
        target_visibility=target_visibility,
        months=months,
        total_extra_revenue=total_extra_revenue,
        program_cost=program_cost,
        payback_days=payback_days,
        net_after_cost=net_after_cost(total_extra_revenue, program_cost),
    )
