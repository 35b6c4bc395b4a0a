"""Named visibility targets evaluated side by side."""

from pydantic import BaseModel, ConfigDict, Field


class TargetScenario(BaseModel):
    """A labelled target visibility (e.g. Baseline → 65%)."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(min_length=1)
    target_visibility: float = Field(ge=0, le=100, allow_inf_nan=False, description="Target visibility in percent")


DEFAULT_TARGETS: tuple[TargetScenario, ...] = (
    TargetScenario(label="Conservative", target_visibility=50.0),
    TargetScenario(label="Baseline", target_visibility=65.0),
    TargetScenario(label="Aggressive", target_visibility=75.0),
)
