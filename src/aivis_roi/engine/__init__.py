"""Engine: the projection model: baseline, visitors curve, scenarios, ramps."""

from aivis_roi.engine.baseline import derive_baseline
from aivis_roi.engine.visibility import anchor_scale, visitors_at, visitors_curve
from aivis_roi.engine.scenario import project_scenario
from aivis_roi.engine.ramp import ramp_visibility, simulate_ramp
from aivis_roi.engine.orchestrator import run_projection

__all__ = [
    "derive_baseline",
    "anchor_scale",
    "visitors_at",
    "visitors_curve",
    "project_scenario",
    "ramp_visibility",
    "simulate_ramp",
    "run_projection",
]
