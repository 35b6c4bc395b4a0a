"""Result models: projection output contracts."""

from aivis_roi.models.results import (
    Baseline,
    MonthData,
    ProjectionResult,
    RampResult,
    ScenarioResult,
    TargetProjection,
)

__all__ = [
    "Baseline",
    "MonthData",
    "ProjectionResult",
    "RampResult",
    "ScenarioResult",
    "TargetProjection",
]
