"""Anchored linear visibility → visitors model.

The raw line ``raw(v) = intercept + slope × v`` fixes the curve's shape.  It
is rescaled by

  k = visitors_today / raw(current_visibility)

so that evaluating it at the business's current visibility reproduces the
visitors/day observed today exactly.  k is undefined at the raw line's root
(≈13.42% with the default constants).
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike

from aivis_roi.config.business import BusinessInputs
from aivis_roi.config.curve import VisibilityCurveConfig
from aivis_roi.engine.baseline import derive_baseline
from aivis_roi.errors import InvalidInputError

# raw(current) closer to zero than this is treated as the root.
ROOT_TOLERANCE = 1e-9


def anchor_scale(inputs: BusinessInputs, curve: VisibilityCurveConfig | None = None) -> float:
    """Scale factor k mapping the raw curve onto today's visitors."""
    if curve is None:
        curve = VisibilityCurveConfig()

    raw_current = curve.raw(inputs.current_visibility)
    if math.isclose(raw_current, 0.0, abs_tol=ROOT_TOLERANCE):
        raise InvalidInputError(
            f"current_visibility {inputs.current_visibility}% is the root of the visitors curve "
            f"(≈{curve.root_visibility:.2f}%); the curve cannot be anchored there"
        )

    visitors_today = derive_baseline(inputs, curve).visitors_today
    return visitors_today / raw_current


def visitors_at(
    visibility: float,
    inputs: BusinessInputs,
    curve: VisibilityCurveConfig | None = None,
) -> float:
    """Projected visitors/day at ``visibility`` for this business."""
    if curve is None:
        curve = VisibilityCurveConfig()
    return anchor_scale(inputs, curve) * curve.raw(visibility)


def visitors_curve(
    visibilities: ArrayLike,
    inputs: BusinessInputs,
    curve: VisibilityCurveConfig | None = None,
) -> np.ndarray:
    """Vectorised ``visitors_at`` over an array of visibilities (for charts)."""
    if curve is None:
        curve = VisibilityCurveConfig()
    v = np.asarray(visibilities, dtype=float)
    return anchor_scale(inputs, curve) * (curve.intercept + curve.slope * v)
