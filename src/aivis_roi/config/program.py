"""Service program: fee, term, ramp length and quoted scope."""

from pydantic import BaseModel, ConfigDict, Field

MONTHLY_FEE = 1850.0
TERM_MONTHS = 3
PROGRAM_COST = MONTHLY_FEE * TERM_MONTHS  # 5,550
RAMP_MONTHS = 3


class ProgramDeliverable(BaseModel):
    """One line of the quoted monthly scope."""

    model_config = ConfigDict(frozen=True)

    quantity: str = Field(description="Amount per month, e.g. '20' or '300 to 500'")
    description: str


def _default_deliverables() -> list[ProgramDeliverable]:
    return [
        ProgramDeliverable(quantity="300 to 500", description="quality engagements on Reddit and Quora"),
        ProgramDeliverable(quantity="20", description="blog articles"),
        ProgramDeliverable(quantity="5", description="website category pages"),
    ]


class ProgramConfig(BaseModel):
    """The single plan on offer.

    ``program_cost`` (fee × term) is what the ramp's extra revenue has to
    recover for payback.
    """

    model_config = ConfigDict(frozen=True)

    monthly_fee: float = Field(default=MONTHLY_FEE, gt=0, allow_inf_nan=False, description="Fee per month")
    term_months: int = Field(default=TERM_MONTHS, ge=1, le=36, description="Months billed")
    ramp_months: int = Field(
        default=RAMP_MONTHS, ge=1, le=36,
        description="Months for visibility to move linearly from current to target.",
    )
    recommended_target: str = Field(
        default="Aggressive",
        description="Label of the target the plan is scoped to reach.",
    )
    deliverables: list[ProgramDeliverable] = Field(default_factory=_default_deliverables)

    @property
    def program_cost(self) -> float:
        return self.monthly_fee * self.term_months
