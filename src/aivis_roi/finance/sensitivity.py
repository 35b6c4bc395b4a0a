"""Sensitivity / tornado analysis over the business inputs.

Vary one input at a time, measure the change in steady-state extra revenue
for one target.  Produces tornado chart data sorted by impact.

Default sweep set:
  - aov                ± 20%
  - conversion_rate    ± 20%
  - daily_orders       ± 20%
  - current_visibility ± 10%

Conversion rate cancels out of the anchored model (visitors_today and the
order conversion at target scale by the same factor), so its bar has zero
width.  It is kept in the default set because that is a useful answer.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import ValidationError

from aivis_roi.config.business import BusinessInputs
from aivis_roi.config.projection import ProjectionConfig
from aivis_roi.engine.orchestrator import run_projection
from aivis_roi.errors import InvalidInputError


@dataclass(frozen=True)
class TornadoBar:
    """One bar in the tornado chart."""

    param_name: str
    """Human-readable parameter name."""

    param_field: str
    """Field of BusinessInputs (e.g. 'aov')."""

    base_value: float
    low_value: float
    high_value: float

    revenue_at_low: float
    """Extra revenue/month at target when param = low_value."""

    revenue_at_high: float

    payback_at_low: float | None
    payback_at_high: float | None

    delta_revenue: float
    """abs(revenue_at_high − revenue_at_low): total swing width."""


@dataclass
class SensitivityResult:
    """Complete sensitivity analysis output for one target."""

    target_label: str
    base_revenue: float
    """Extra revenue/month at target for the unmodified inputs."""

    bars: list[TornadoBar] = field(default_factory=list)
    """Tornado bars sorted by delta_revenue (descending)."""

    skipped: list[str] = field(default_factory=list)
    """Parameters whose swept values were invalid (e.g. visibility > 100)."""


DEFAULT_SWEEPS: list[tuple[str, str, float, float]] = [
    ("Average order value", "aov", -0.20, 0.20),
    ("Conversion rate", "conversion_rate", -0.20, 0.20),
    ("Daily orders", "daily_orders", -0.20, 0.20),
    ("Current visibility", "current_visibility", -0.10, 0.10),
]


def _with_business(config: ProjectionConfig, field_name: str, value: float) -> ProjectionConfig:
    """Copy of ``config`` with one business input replaced (re-validated)."""
    business = BusinessInputs(**{**config.business.model_dump(), field_name: value})
    return config.model_copy(update={"business": business})


def _evaluate(config: ProjectionConfig, target_label: str) -> tuple[float, float | None]:
    projection = run_projection(config).get(target_label)
    return projection.scenario.extra_revenue_per_month, projection.ramp.payback_days


def run_sensitivity(
    config: ProjectionConfig,
    target_label: str,
    sweeps: list[tuple[str, str, float, float]] | None = None,
) -> SensitivityResult:
    """Run one-at-a-time sensitivity for ``target_label``.

    Parameters
    ----------
    config : ProjectionConfig
        Base configuration.
    target_label : str
        Which configured target to measure (e.g. "Baseline").
    sweeps : list[tuple[name, field, low_pct, high_pct]] | None
        Parameter sweeps. None = use DEFAULT_SWEEPS.

    Returns
    -------
    SensitivityResult
        Tornado bars sorted by revenue impact.
    """
    if sweeps is None:
        sweeps = DEFAULT_SWEEPS

    base_revenue, _ = _evaluate(config, target_label)
    result = SensitivityResult(target_label=target_label, base_revenue=base_revenue)

    for name, field_name, low_pct, high_pct in sweeps:
        base_val = float(getattr(config.business, field_name))
        low_val = base_val * (1 + low_pct)
        high_val = base_val * (1 + high_pct)

        try:
            revenue_low, payback_low = _evaluate(_with_business(config, field_name, low_val), target_label)
            revenue_high, payback_high = _evaluate(_with_business(config, field_name, high_val), target_label)
        except (ValidationError, InvalidInputError):
            result.skipped.append(name)
            continue

        result.bars.append(TornadoBar(
            param_name=name,
            param_field=field_name,
            base_value=base_val,
            low_value=low_val,
            high_value=high_val,
            revenue_at_low=revenue_low,
            revenue_at_high=revenue_high,
            payback_at_low=payback_low,
            payback_at_high=payback_high,
            delta_revenue=abs(revenue_high - revenue_low),
        ))

    # Sort by impact (largest swing first)
    result.bars.sort(key=lambda b: b.delta_revenue, reverse=True)
    return result
