"""Display formatting for counts, money, percentages and payback days."""

from __future__ import annotations

import math


def _round_half_up(val: float) -> int:
    # Half-up like a calculator, not Python's banker's rounding
    return math.floor(val + 0.5)


def fmt_number(val: float) -> str:
    """Whole number with thousands separators: 88293.4 → '88,293'."""
    return f"{_round_half_up(val):,}"


def fmt_currency(val: float) -> str:
    """Whole dollars: 37083.2 → '$37,083', -1200 → '-$1,200'."""
    rounded = _round_half_up(val)
    if rounded < 0:
        return f"-${-rounded:,}"
    return f"${rounded:,}"


def fmt_percent(val: float) -> str:
    """One decimal: 43.6667 → '43.7%'."""
    return f"{val:.1f}%"


def fmt_days(days: float | None) -> str:
    """Payback days, or a marker when the cost isn't recovered in the ramp."""
    if days is None:
        return "Not within ramp"
    return f"{_round_half_up(days)} days"
