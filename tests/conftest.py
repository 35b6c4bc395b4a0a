"""Shared test fixtures: the reference business from the calculator defaults."""

from __future__ import annotations

import pytest

from aivis_roi.config import (
    BusinessInputs,
    ProgramConfig,
    ProjectionConfig,
    VisibilityCurveConfig,
)


@pytest.fixture
def business() -> BusinessInputs:
    # 27 orders/day at 1.5% CR → 1,800 visitors/day; 810 orders/month
    return BusinessInputs(
        aov=28.0,
        conversion_rate=1.5,
        daily_orders=27.0,
        current_visibility=33.0,
    )


@pytest.fixture
def curve() -> VisibilityCurveConfig:
    return VisibilityCurveConfig(intercept=-850.0, slope=63.333, days_per_month=30)


@pytest.fixture
def program() -> ProgramConfig:
    return ProgramConfig(monthly_fee=1_850.0, term_months=3, ramp_months=3)


@pytest.fixture
def config(business: BusinessInputs, curve: VisibilityCurveConfig, program: ProgramConfig) -> ProjectionConfig:
    return ProjectionConfig(business=business, curve=curve, program=program)
