"""Tabular views of a projection as pandas DataFrames.

Column headings match what the dashboard shows.  Values stay numeric;
formatting is applied at render time.
"""

from __future__ import annotations

import pandas as pd

from aivis_roi.models.results import ProjectionResult, RampResult

SCENARIO_COLUMNS = [
    "Scenario",
    "Target visibility",
    "Visitors/day at target",
    "Extra visitors/month",
    "Extra orders/month",
    "Extra revenue/month",
]

RAMP_COLUMNS = [
    "Month",
    "Visibility %",
    "Visitors/day",
    "Extra visitors/month",
    "Orders/month",
    "+ Orders",
    "+ Revenue",
]


def scenario_table(result: ProjectionResult) -> pd.DataFrame:
    """One row per target: steady-state lift once the target is reached."""
    rows = [
        [
            p.label,
            p.scenario.target_visibility,
            p.scenario.visitors_per_day,
            p.scenario.extra_visitors_per_month,
            p.scenario.extra_orders_per_month,
            p.scenario.extra_revenue_per_month,
        ]
        for p in result.projections
    ]
    return pd.DataFrame(rows, columns=SCENARIO_COLUMNS)


def ramp_table(ramp: RampResult) -> pd.DataFrame:
    """One row per ramp month."""
    rows = [
        [m.month, m.visibility, m.visitors_per_day, m.extra_visitors_per_month,
         m.orders_per_month, m.extra_orders, m.extra_revenue]
        for m in ramp.months
    ]
    return pd.DataFrame(rows, columns=RAMP_COLUMNS)


def payback_table(result: ProjectionResult) -> pd.DataFrame:
    """Payback and net-after-cost per target."""
    return pd.DataFrame(
        [
            {
                "Scenario": p.label,
                "Ramp extra revenue": p.ramp.total_extra_revenue,
                "Payback days": p.ramp.payback_days,
                "Net after cost": p.ramp.net_after_cost,
            }
            for p in result.projections
        ]
    )
