"""Configuration models: every input of a projection run."""

from aivis_roi.config.business import BusinessInputs
from aivis_roi.config.curve import DAYS_PER_MONTH, RAW_INTERCEPT, RAW_SLOPE, VisibilityCurveConfig
from aivis_roi.config.program import (
    MONTHLY_FEE,
    PROGRAM_COST,
    RAMP_MONTHS,
    TERM_MONTHS,
    ProgramConfig,
    ProgramDeliverable,
)
from aivis_roi.config.targets import DEFAULT_TARGETS, TargetScenario
from aivis_roi.config.projection import ProjectionConfig

__all__ = [
    "BusinessInputs",
    "VisibilityCurveConfig",
    "ProgramConfig",
    "ProgramDeliverable",
    "TargetScenario",
    "ProjectionConfig",
    "DEFAULT_TARGETS",
    "DAYS_PER_MONTH",
    "RAW_INTERCEPT",
    "RAW_SLOPE",
    "MONTHLY_FEE",
    "TERM_MONTHS",
    "PROGRAM_COST",
    "RAMP_MONTHS",
]
