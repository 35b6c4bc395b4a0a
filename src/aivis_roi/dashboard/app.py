"""AI Search Visibility ROI: Streamlit dashboard.

Layout: sidebar business inputs → main area with today's baseline, projected
lift per target, month-by-month ramp tables, payback cards and the quote.

Run with:
    streamlit run src/aivis_roi/dashboard/app.py
"""

from __future__ import annotations

import numpy as np
import plotly.graph_objects as go
import streamlit as st
from loguru import logger
from pydantic import ValidationError

from aivis_roi.config import BusinessInputs, ProgramConfig, ProjectionConfig, VisibilityCurveConfig
from aivis_roi.engine.orchestrator import run_projection
from aivis_roi.engine.visibility import visitors_curve
from aivis_roi.errors import InvalidInputError
from aivis_roi.finance.sensitivity import run_sensitivity
from aivis_roi.log import configure_logging
from aivis_roi.report.formatting import fmt_currency, fmt_days, fmt_number, fmt_percent
from aivis_roi.report.tables import ramp_table, scenario_table

# ---------------------------------------------------------------------------
# Default instances: single source of truth for sidebar defaults
# ---------------------------------------------------------------------------
_DEF_B = BusinessInputs()
_DEF_PROG = ProgramConfig()
_DEF_CURVE = VisibilityCurveConfig()

configure_logging("INFO")

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="AI Search Visibility ROI", page_icon="📈", layout="wide")

st.title("AI Search Visibility ROI")
st.caption(
    "We turn visibility into visitors using your real data, then into orders using your CR, "
    "then into revenue using your AOV."
)

# ---------------------------------------------------------------------------
# SIDEBAR: Inputs
# ---------------------------------------------------------------------------
st.sidebar.header("Your business metrics")

with st.sidebar.expander("Business", expanded=True):
    b_aov = st.number_input("Average Order Value (AOV) $", 0.01, 100_000.0, _DEF_B.aov, 1.0)
    b_cr = st.number_input("Conversion Rate (%)", 0.01, 100.0, _DEF_B.conversion_rate, 0.1)
    b_orders = st.number_input("Daily Orders Today", 0.0, 1_000_000.0, _DEF_B.daily_orders, 1.0)
    b_vis = st.number_input("Current Visibility (%)", 0.0, 100.0, _DEF_B.current_visibility, 1.0)

with st.sidebar.expander("Curve assumptions"):
    c_intercept = st.number_input("Raw intercept", -100_000.0, 100_000.0, _DEF_CURVE.intercept, 10.0)
    c_slope = st.number_input("Raw slope", 0.001, 100_000.0, _DEF_CURVE.slope, 1.0, format="%.3f")

try:
    config = ProjectionConfig(
        business=BusinessInputs(
            aov=b_aov, conversion_rate=b_cr, daily_orders=b_orders, current_visibility=b_vis,
        ),
        curve=VisibilityCurveConfig(intercept=c_intercept, slope=c_slope),
        program=_DEF_PROG,
    )
    result = run_projection(config)
except (ValidationError, InvalidInputError) as exc:
    logger.warning("Projection rejected: {}", exc)
    st.error(f"Can't project with these inputs: {exc}")
    st.stop()

# ---------------------------------------------------------------------------
# Today
# ---------------------------------------------------------------------------
c1, c2 = st.columns(2)
c1.metric("Visitors/day today", fmt_number(result.baseline.visitors_today))
c2.metric("Orders/month today", fmt_number(result.baseline.orders_today))

# ---------------------------------------------------------------------------
# Projected lift
# ---------------------------------------------------------------------------
st.header(f"Projected lift (per month at target after month {result.ramp_months})")
st.caption("Numbers show the extra visitors, orders, and revenue per month once you reach the target visibility.")

lift = scenario_table(result)
st.dataframe(
    lift.style.format({
        "Target visibility": fmt_percent,
        "Visitors/day at target": fmt_number,
        "Extra visitors/month": fmt_number,
        "Extra orders/month": fmt_number,
        "Extra revenue/month": fmt_currency,
    }),
    hide_index=True,
    use_container_width=True,
)
st.caption(
    f"Small print: CR held at {config.business.conversion_rate}%. AOV {fmt_currency(config.business.aov)}. "
    f"Current visibility {config.business.current_visibility}%."
)

with st.expander("Visibility → visitors curve"):
    grid = np.linspace(0, 100, 101)
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=grid, y=visitors_curve(grid, config.business, config.curve),
                             mode="lines", name="Visitors/day"))
    fig.add_trace(go.Scatter(
        x=[config.business.current_visibility] + [p.target_visibility for p in result.projections],
        y=[result.baseline.visitors_today] + [p.scenario.visitors_per_day for p in result.projections],
        mode="markers+text",
        text=["Today"] + result.labels,
        textposition="top center",
        name="Anchors",
    ))
    fig.update_layout(xaxis_title="Visibility %", yaxis_title="Visitors/day", height=360,
                      margin=dict(l=10, r=10, t=10, b=10))
    st.plotly_chart(fig, use_container_width=True)

# ---------------------------------------------------------------------------
# Month-by-month ramp
# ---------------------------------------------------------------------------
st.header(f"Month-by-month during the {result.ramp_months}-month ramp")
st.caption(
    "You earn a portion each month as visibility rises. Totals below are the sum earned "
    "during the ramp before steady state."
)

for p in result.projections:
    st.subheader(f"{p.label} to {p.target_visibility:g}%")
    st.dataframe(
        ramp_table(p.ramp).style.format({
            "Visibility %": fmt_percent,
            "Visitors/day": fmt_number,
            "Extra visitors/month": fmt_number,
            "Orders/month": fmt_number,
            "+ Orders": fmt_number,
            "+ Revenue": fmt_currency,
        }),
        hide_index=True,
        use_container_width=True,
    )
    st.markdown(f"**Total extra revenue in ramp: {fmt_currency(p.ramp.total_extra_revenue)}**")

# ---------------------------------------------------------------------------
# Payback
# ---------------------------------------------------------------------------
st.header("Paid back in")
cols = st.columns(len(result.projections))
for col, p in zip(cols, result.projections):
    col.metric(p.label, fmt_days(p.ramp.payback_days))

st.caption(
    f"Net during the {result.ramp_months}-month ramp after costs: "
    + ", ".join(f"{p.label} {fmt_currency(p.ramp.net_after_cost)}" for p in result.projections)
    + "."
)

with st.expander("Sensitivity (one input at a time)"):
    sens_label = st.selectbox("Target", result.labels, index=result.labels.index(result.recommended_target))
    sens = run_sensitivity(config, sens_label)
    fig_t = go.Figure()
    for bar in reversed(sens.bars):
        fig_t.add_trace(go.Bar(
            y=[bar.param_name], x=[bar.revenue_at_low - sens.base_revenue],
            orientation="h", marker_color="#e17055", showlegend=False,
        ))
        fig_t.add_trace(go.Bar(
            y=[bar.param_name], x=[bar.revenue_at_high - sens.base_revenue],
            orientation="h", marker_color="#00b894", showlegend=False,
        ))
    fig_t.update_layout(barmode="overlay", xaxis_title="Δ extra revenue/month ($)", height=300,
                        margin=dict(l=10, r=10, t=10, b=10))
    st.plotly_chart(fig_t, use_container_width=True)
    if sens.skipped:
        st.caption(f"Skipped (swept value out of range): {', '.join(sens.skipped)}")

# ---------------------------------------------------------------------------
# Quote
# ---------------------------------------------------------------------------
st.header("Get Quote")
program = config.program
st.write(f"We aim for the {program.recommended_target} target. We offer one plan and one quote.")

if "show_quote" not in st.session_state:
    st.session_state.show_quote = False
if st.button("Get Quote", type="primary"):
    st.session_state.show_quote = True

if st.session_state.show_quote:
    st.caption(f"Best results with the {program.term_months}-month plan.")
    st.metric("Price", fmt_currency(program.monthly_fee),
              help=f"per month for {program.term_months} months")
    st.markdown("**What we do for you**")
    st.markdown("\n".join(
        f"- {d.quantity} {d.description} each month." for d in program.deliverables
    ))
    st.caption(f"This scope is designed to reach the {program.recommended_target} outcome when executed well.")
