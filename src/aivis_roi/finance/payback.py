"""Payback period against the fixed program cost.

Extra revenue is assumed to accrue evenly within a month, so the crossing
month is pro-rated linearly:

  payback_days = days × i + days × (remaining / extra_revenue[i])

where ``i`` is the 0-indexed month in which cumulative extra revenue first
covers the cost and ``remaining`` is what was still owed at its start.
"""

from __future__ import annotations

from collections.abc import Sequence

from aivis_roi.config.curve import DAYS_PER_MONTH


def compute_payback_days(
    monthly_extra_revenue: Sequence[float],
    program_cost: float,
    days_per_month: int = DAYS_PER_MONTH,
) -> float | None:
    """Days of extra revenue needed to recover ``program_cost``.

    Returns
    -------
    float | None
        Pro-rated days, or ``None`` when the cost is not recovered within
        the months given (including ramps whose extra revenue is negative).
    """
    if program_cost <= 0:
        return 0.0
    if not monthly_extra_revenue:
        return None

    # Recovered inside month 1
    first = monthly_extra_revenue[0]
    if first >= program_cost:
        return days_per_month * (program_cost / first)

    cumulative = 0.0
    for i, revenue in enumerate(monthly_extra_revenue):
        if cumulative + revenue >= program_cost:
            remaining = program_cost - cumulative
            return days_per_month * i + days_per_month * (remaining / revenue)
        cumulative += revenue

    return None


def net_after_cost(total_extra_revenue: float, program_cost: float) -> float:
    """Extra revenue earned during the ramp minus what the program cost."""
    return total_extra_revenue - program_cost
