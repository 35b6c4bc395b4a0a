"""Narrative generator: plain-English summary of a projection.

Converts a ``ProjectionResult`` into a structured text block: today's
baseline, steady-state lift per target, the ramp and payback, and the net
position after the program cost.
"""

from __future__ import annotations

from aivis_roi.models.results import ProjectionResult
from aivis_roi.report.formatting import fmt_currency, fmt_days, fmt_number, fmt_percent


def _heading(title: str) -> list[str]:
    return ["=" * 60, title, "=" * 60]


def generate_narrative(result: ProjectionResult) -> str:
    """Generate a plain-English narrative from a projection result."""
    inputs = result.inputs
    b = result.baseline

    sections: list[str] = []

    # ── 1. Today ──
    sections += _heading("YOUR BUSINESS TODAY")
    sections.append(
        f"Visibility: {fmt_percent(inputs.current_visibility)}\n"
        f"Visitors/day today: {fmt_number(b.visitors_today)}\n"
        f"Orders/month today: {fmt_number(b.orders_today)}\n"
        f"AOV: {fmt_currency(inputs.aov)} · CR held at {inputs.conversion_rate}%"
    )

    # ── 2. Projected lift ──
    sections.append("")
    sections += _heading("PROJECTED LIFT (PER MONTH AT TARGET)")
    for p in result.projections:
        s = p.scenario
        sections.append(
            f"  {p.label:14s} → {fmt_percent(p.target_visibility):>6s}  "
            f"+{fmt_number(s.extra_visitors_per_month)} visitors  "
            f"+{fmt_number(s.extra_orders_per_month)} orders  "
            f"+{fmt_currency(s.extra_revenue_per_month)}"
        )

    # ── 3. Ramp & payback ──
    sections.append("")
    sections += _heading(f"{result.ramp_months}-MONTH RAMP & PAYBACK")
    sections.append(f"Program cost: {fmt_currency(result.program_cost)}")
    for p in result.projections:
        r = p.ramp
        payback = fmt_days(r.payback_days) if r.paid_back else "NOT within the ramp"
        sections.append(
            f"  {p.label:14s} ramp total {fmt_currency(r.total_extra_revenue)}, "
            f"paid back in {payback}, net {fmt_currency(r.net_after_cost)}"
        )

    unrecovered = [p.label for p in result.projections if not p.ramp.paid_back]
    if unrecovered:
        sections.append(
            f"\nWarning: the program cost is not recovered during the ramp for "
            f"{', '.join(unrecovered)}."
        )

    # ── 4. Recommendation ──
    sections.append("")
    sections += _heading("RECOMMENDATION")
    try:
        rec = result.get(result.recommended_target)
    except KeyError:
        rec = None
    if rec is not None:
        sections.append(
            f"The plan is scoped for the {rec.label} target ({fmt_percent(rec.target_visibility)}): "
            f"{fmt_currency(rec.scenario.extra_revenue_per_month)} extra revenue per month "
            f"once reached."
        )

    return "\n".join(sections)
