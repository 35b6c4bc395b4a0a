"""Projection orchestrator: one full calculation pass over all targets.

Entry point: ``run_projection(config)``.  Callers re-run it whenever any
input changes; each pass is pure and cheap (O(targets × ramp_months)).
"""

from __future__ import annotations

from loguru import logger

from aivis_roi.config.projection import ProjectionConfig
from aivis_roi.engine.baseline import derive_baseline
from aivis_roi.engine.ramp import simulate_ramp
from aivis_roi.engine.scenario import project_scenario
from aivis_roi.engine.visibility import anchor_scale
from aivis_roi.models.results import ProjectionResult, TargetProjection


def run_projection(config: ProjectionConfig | None = None) -> ProjectionResult:
    """Baseline, steady-state scenario and ramp for every configured target."""
    if config is None:
        config = ProjectionConfig()

    inputs = config.business
    curve = config.curve
    program = config.program

    baseline = derive_baseline(inputs, curve)
    scale = anchor_scale(inputs, curve)

    if inputs.current_visibility < curve.root_visibility:
        logger.warning(
            "current_visibility {:.2f}% is below the curve root ({:.2f}%); the anchored curve is "
            "inverted and projects fewer visitors at higher visibility",
            inputs.current_visibility, curve.root_visibility,
        )

    projections: list[TargetProjection] = []
    for target in config.targets:
        if target.target_visibility < inputs.current_visibility:
            logger.warning(
                "{} target {:.1f}% is below current visibility {:.1f}%",
                target.label, target.target_visibility, inputs.current_visibility,
            )
        scenario = project_scenario(target.target_visibility, inputs, curve)
        ramp = simulate_ramp(
            target.target_visibility, inputs,
            ramp_months=program.ramp_months, curve=curve, program_cost=program.program_cost,
        )
        projections.append(TargetProjection(
            label=target.label,
            target_visibility=target.target_visibility,
            scenario=scenario,
            ramp=ramp,
        ))
        logger.debug(
            "{} → {:.1f}%: extra revenue/month {:.2f}, ramp total {:.2f}, payback {}",
            target.label, target.target_visibility, scenario.extra_revenue_per_month,
            ramp.total_extra_revenue, ramp.payback_days,
        )

    return ProjectionResult(
        inputs=inputs,
        baseline=baseline,
        anchor_scale=scale,
        program_cost=program.program_cost,
        ramp_months=program.ramp_months,
        recommended_target=program.recommended_target,
        projections=projections,
    )
