"""Top-level projection config: bundles every input of one calculation pass."""

from pydantic import BaseModel, Field, model_validator

from aivis_roi.config.business import BusinessInputs
from aivis_roi.config.curve import VisibilityCurveConfig
from aivis_roi.config.program import ProgramConfig
from aivis_roi.config.targets import DEFAULT_TARGETS, TargetScenario


class ProjectionConfig(BaseModel):
    """Complete input bundle for one projection run."""

    business: BusinessInputs = Field(default_factory=BusinessInputs)
    curve: VisibilityCurveConfig = Field(default_factory=VisibilityCurveConfig)
    program: ProgramConfig = Field(default_factory=ProgramConfig)
    targets: list[TargetScenario] = Field(default_factory=lambda: list(DEFAULT_TARGETS), min_length=1)

    @model_validator(mode="after")
    def _check_targets(self) -> "ProjectionConfig":
        labels = [t.label for t in self.targets]
        duplicates = sorted({label for label in labels if labels.count(label) > 1})
        if duplicates:
            raise ValueError(f"Duplicate target labels: {', '.join(duplicates)}")
        if self.program.recommended_target not in labels:
            raise ValueError(
                f"recommended_target {self.program.recommended_target!r} is not one of "
                f"the configured targets ({', '.join(labels)})"
            )
        return self
