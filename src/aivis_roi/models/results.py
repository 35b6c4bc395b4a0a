"""Result types: the contract between engine, finance, report and dashboard.

Every record is a transient snapshot of one calculation pass; nothing here
is persisted or mutated after the engine builds it.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from aivis_roi.config.business import BusinessInputs


# ═══════════════════════════════════════════════════════════════════════════
# Baseline (today's economics)
# ═══════════════════════════════════════════════════════════════════════════

class Baseline(BaseModel):
    """What the business already gets at its current visibility."""

    visitors_today: float
    """Visitors/day implied by today's orders and conversion rate.
    = daily_orders / (conversion_rate / 100)."""

    orders_today: float
    """Orders per month today (daily_orders × days_per_month)."""


# ═══════════════════════════════════════════════════════════════════════════
# Steady-state scenario
# ═══════════════════════════════════════════════════════════════════════════

class ScenarioResult(BaseModel):
    """Monthly economics once the target visibility is reached."""

    target_visibility: float
    visitors_per_day: float
    extra_visitors_per_month: float
    orders_per_month: float
    """Gross orders/month at target, before subtracting today's orders."""
    extra_orders_per_month: float
    extra_revenue_per_month: float


# ═══════════════════════════════════════════════════════════════════════════
# Ramp
# ═══════════════════════════════════════════════════════════════════════════

class MonthData(BaseModel):
    """One month of the linear ramp from current to target visibility."""

    month: int
    """1-indexed month of the ramp."""
    visibility: float
    visitors_per_day: float
    extra_visitors_per_month: float
    orders_per_month: float
    extra_orders: float
    extra_revenue: float


class RampResult(BaseModel):
    """Month-by-month ramp plus payback against the program cost."""

    target_visibility: float
    months: list[MonthData] = Field(default_factory=list)
    total_extra_revenue: float = 0.0
    """Σ extra_revenue across the ramp months."""

    program_cost: float
    payback_days: float | None = None
    """Days of extra revenue needed to recover ``program_cost``.
    ``None`` = not recovered within the ramp horizon (never 0 for that case)."""

    net_after_cost: float = 0.0
    """total_extra_revenue − program_cost."""

    @property
    def paid_back(self) -> bool:
        return self.payback_days is not None


# ═══════════════════════════════════════════════════════════════════════════
# Full projection
# ═══════════════════════════════════════════════════════════════════════════

class TargetProjection(BaseModel):
    """Scenario and ramp for one labelled target."""

    label: str
    target_visibility: float
    scenario: ScenarioResult
    ramp: RampResult


class ProjectionResult(BaseModel):
    """Everything one calculation pass produces, in target configuration order."""

    inputs: BusinessInputs
    baseline: Baseline
    anchor_scale: float
    """Factor k that rescales the raw curve onto today's visitors."""
    program_cost: float
    ramp_months: int
    recommended_target: str
    projections: list[TargetProjection] = Field(default_factory=list)

    def get(self, label: str) -> TargetProjection:
        """Look up a projection by target label."""
        for p in self.projections:
            if p.label == label:
                return p
        raise KeyError(label)

    @property
    def labels(self) -> list[str]:
        return [p.label for p in self.projections]
