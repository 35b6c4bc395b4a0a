"""Report layer: formatting, tables and plain-English narrative."""

from aivis_roi.report.formatting import fmt_currency, fmt_days, fmt_number, fmt_percent
from aivis_roi.report.narrative import generate_narrative
from aivis_roi.report.tables import payback_table, ramp_table, scenario_table

__all__ = [
    "fmt_currency",
    "fmt_days",
    "fmt_number",
    "fmt_percent",
    "generate_narrative",
    "payback_table",
    "ramp_table",
    "scenario_table",
]
