"""
Growth projector: future value of a lump sum plus level monthly contributions.

    r = annual_return_percent / 100 / 12
    n = years * 12
    FV = initial * (1+r)^n + monthly * ((1+r)^n - 1) / r

The annuity term is the exact sum of the geometric series produced by
compounding month by month with the contribution added at month end,
so no loop is needed.
"""

import math
from dataclasses import dataclass

from investmate.engine.errors import OutOfRangeInput

MAX_YEARS = 100
ZERO_RATE_EPSILON = 1e-12


@dataclass(frozen=True)
class ProjectionInput:
    initial_amount: float
    monthly_contribution: float
    annual_return_percent: float
    years: int

    def __post_init__(self) -> None:
        if self.initial_amount < 0:
            raise OutOfRangeInput("initial_amount must not be negative.", field="initial_amount")
        if self.monthly_contribution < 0:
            raise OutOfRangeInput("monthly_contribution must not be negative.", field="monthly_contribution")
        if not 0 <= self.years <= MAX_YEARS:
            raise OutOfRangeInput(f"years must be between 0 and {MAX_YEARS}.", field="years")
        if self.annual_return_percent <= -100:
            raise OutOfRangeInput("annual return must be greater than -100%.", field="expected_return")

    @property
    def monthly_rate(self) -> float:
        return self.annual_return_percent / 100.0 / 12.0

    @property
    def months(self) -> int:
        return self.years * 12


@dataclass(frozen=True)
class ProjectionResult:
    inputs: ProjectionInput
    total_contributed: float
    projected_total: float
    projected_earnings: float
    earnings_share_percent: float


def project_growth(inputs: ProjectionInput) -> ProjectionResult:
    r = inputs.monthly_rate
    n = inputs.months

    # log1p/expm1 keep (1+r)^n - 1 accurate when r is tiny.
    exponent = n * math.log1p(r)
    try:
        growth = math.exp(exponent)
        growth_minus_one = math.expm1(exponent)
    except OverflowError:
        raise OutOfRangeInput("projection exceeds representable range.", field="expected_return") from None

    fv_lump = inputs.initial_amount * growth
    if abs(r) < ZERO_RATE_EPSILON:
        fv_annuity = inputs.monthly_contribution * n
    else:
        fv_annuity = inputs.monthly_contribution * (growth_minus_one / r)

    total = fv_lump + fv_annuity
    if not math.isfinite(total):
        raise OutOfRangeInput("projection exceeds representable range.", field="expected_return")

    contributed = inputs.initial_amount + inputs.monthly_contribution * n
    earnings = total - contributed
    share = (earnings / total) * 100.0 if total > 0 else 0.0

    return ProjectionResult(
        inputs=inputs,
        total_contributed=contributed,
        projected_total=total,
        projected_earnings=earnings,
        earnings_share_percent=share,
    )
