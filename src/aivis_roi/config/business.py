"""Business economics: the four observed inputs the projection is anchored on."""

from pydantic import BaseModel, ConfigDict, Field


class BusinessInputs(BaseModel):
    """Order economics supplied by the caller.

    Immutable for the duration of one calculation pass; edit by building a
    new instance (which re-runs validation).
    """

    model_config = ConfigDict(frozen=True)

    aov: float = Field(
        default=28.0, gt=0, allow_inf_nan=False,
        description="Average order value (currency per order).",
    )
    conversion_rate: float = Field(
        default=1.5, gt=0, le=100, allow_inf_nan=False,
        description="Percent of visitors who place an order, in (0, 100]. "
                    "1.5 means 1.5%, not 0.015.",
    )
    daily_orders: float = Field(
        default=27.0, ge=0, allow_inf_nan=False,
        description="Orders placed per day today.",
    )
    current_visibility: float = Field(
        default=33.0, ge=0, le=100, allow_inf_nan=False,
        description="Current AI-search visibility score in percent, [0, 100].",
    )
