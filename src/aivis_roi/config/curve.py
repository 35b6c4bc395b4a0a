"""Visibility → visitors curve assumptions."""

from pydantic import BaseModel, ConfigDict, Field

RAW_INTERCEPT = -850.0
RAW_SLOPE = 63.333
DAYS_PER_MONTH = 30


class VisibilityCurveConfig(BaseModel):
    """Shape of the raw linear visitors curve.

    ``raw(v) = intercept + slope × v``.  The engine rescales this line so it
    passes through the business's observed visitors/day at its current
    visibility; only the shape (root and slope sign) survives the rescale.
    """

    model_config = ConfigDict(frozen=True)

    intercept: float = Field(default=RAW_INTERCEPT, allow_inf_nan=False, description="Raw visitors/day at 0% visibility")
    slope: float = Field(
        default=RAW_SLOPE, gt=0, allow_inf_nan=False,
        description="Raw visitors/day gained per visibility point. Must be positive "
                    "so visitors grow with visibility.",
    )
    days_per_month: int = Field(
        default=DAYS_PER_MONTH, ge=1, le=31,
        description="Month length convention used to turn daily figures into monthly ones.",
    )

    def raw(self, visibility: float) -> float:
        """Un-anchored visitors/day at ``visibility``."""
        return self.intercept + self.slope * visibility

    @property
    def root_visibility(self) -> float:
        """Visibility where the raw line crosses zero (≈13.42% by default)."""
        return -self.intercept / self.slope
