"""Allocation selector: time horizon -> stocks/bonds/cash band."""

from dataclasses import dataclass

from investmate.engine.tables import (
    ALLOCATION_BANDS,
    DEFAULT_HORIZON_YEARS,
    HORIZON_YEARS,
    PLAN_GROWTH_RATE,
    PLAN_NEXT_STEPS,
    PLAN_STRATEGIES,
    AllocationBand,
)


@dataclass(frozen=True)
class Horizon:
    raw: str
    years: int
    recognized: bool


@dataclass(frozen=True)
class InvestmentPlan:
    goal: str
    horizon: Horizon
    current_amount: float
    monthly_investment: float
    band: AllocationBand
    estimated_growth_rate: str = PLAN_GROWTH_RATE
    key_strategies: tuple[str, ...] = PLAN_STRATEGIES
    next_steps: str = PLAN_NEXT_STEPS

    @property
    def annual_contribution(self) -> float:
        return self.monthly_investment * 12


def normalize_horizon(horizon: str | None) -> Horizon:
    raw = str(horizon or "").strip()
    years = HORIZON_YEARS.get(raw)
    if years is None:
        return Horizon(raw=raw, years=DEFAULT_HORIZON_YEARS, recognized=False)
    return Horizon(raw=raw, years=years, recognized=True)


def select_allocation(years: int) -> AllocationBand:
    # the last band is unbounded, so exactly one always matches
    return next(band for band in ALLOCATION_BANDS if years <= band.years_threshold)


def build_investment_plan(
    goal: str,
    time_horizon: str,
    current_amount: float,
    monthly_capacity: float,
) -> InvestmentPlan:
    horizon = normalize_horizon(time_horizon)
    return InvestmentPlan(
        goal=goal,
        horizon=horizon,
        current_amount=current_amount,
        monthly_investment=monthly_capacity,
        band=select_allocation(horizon.years),
    )
