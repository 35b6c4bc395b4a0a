"""Today's baseline: visitors and orders implied by the observed economics."""

from __future__ import annotations

from aivis_roi.config.business import BusinessInputs
from aivis_roi.config.curve import VisibilityCurveConfig
from aivis_roi.errors import InvalidInputError
from aivis_roi.models.results import Baseline


def derive_baseline(inputs: BusinessInputs, curve: VisibilityCurveConfig | None = None) -> Baseline:
    """Visitors/day and orders/month today.

    visitors_today = daily_orders / (conversion_rate / 100)
    orders_today   = daily_orders × days_per_month
    """
    if curve is None:
        curve = VisibilityCurveConfig()

    # Validated inputs can't get here with cr <= 0; model_construct() ones can.
    if not inputs.conversion_rate > 0:
        raise InvalidInputError(
            f"conversion_rate must be > 0 to derive visitors from orders, got {inputs.conversion_rate}"
        )

    return Baseline(
        visitors_today=inputs.daily_orders / (inputs.conversion_rate / 100),
        orders_today=inputs.daily_orders * curve.days_per_month,
    )
