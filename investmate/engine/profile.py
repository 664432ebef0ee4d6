"""Mock investment profile and automated-investing plan drafts."""

import uuid
from dataclasses import dataclass, replace
from datetime import date

from investmate.engine.errors import InvalidChoice, OutOfRangeInput, ProfileNotFound
from investmate.engine.tables import (
    PROFILES,
    RECOMMENDED_SAVINGS_RATE,
    InvestmentType,
    Strategy,
)


@dataclass(frozen=True)
class InvestmentProfile:
    total_balance: float
    savings_allocation: float
    stock_allocation: float
    risk_tolerance: str
    monthly_savings: float
    age_group: str

    @property
    def recommended_savings(self) -> float:
        return self.total_balance * RECOMMENDED_SAVINGS_RATE


@dataclass(frozen=True)
class AutomatedPlan:
    monthly_amount: float
    investment_type: InvestmentType
    strategy: Strategy
    start_date: date
    plan_id: str | None = None

    @property
    def projected_annual(self) -> float:
        return self.monthly_amount * 12


def load_profile(profile_id: str = "default") -> InvestmentProfile:
    # Static until profiles are backed by the account service.
    row = PROFILES.get(profile_id)
    if row is None:
        raise ProfileNotFound(f"Investment profile '{profile_id}' not found.", field="profile_id")
    return InvestmentProfile(**row)


def draft_automated_plan(
    monthly_amount: float,
    investment_type: str,
    strategy: str,
    start_date: str,
) -> AutomatedPlan:
    if monthly_amount <= 0:
        raise OutOfRangeInput("monthly_amount must be greater than zero.", field="monthly_amount")

    kind = InvestmentType.parse(investment_type)
    if kind is None:
        options = ", ".join(t.value for t in InvestmentType)
        raise InvalidChoice(f"investment_type must be one of: {options}.", field="investment_type")

    style = Strategy.parse(strategy)
    if style is None:
        options = ", ".join(s.value for s in Strategy)
        raise InvalidChoice(f"strategy must be one of: {options}.", field="strategy")

    try:
        start = date.fromisoformat(str(start_date).strip())
    except ValueError:
        raise InvalidChoice(f"start_date must be an ISO date (YYYY-MM-DD), got {start_date!r}.",
                            field="start_date") from None

    return AutomatedPlan(monthly_amount=monthly_amount, investment_type=kind, strategy=style, start_date=start)


def create_automated_plan(draft: AutomatedPlan) -> AutomatedPlan:
    """Assign a plan id. Nothing is scheduled and no money moves."""
    return replace(draft, plan_id=f"plan_{uuid.uuid4().hex[:10]}")
