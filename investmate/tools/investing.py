"""Investing tools: profile, recommendations, growth projection, automated plans."""

import json

import structlog

from investmate.app import mcp
from investmate.cache.client import cache_get, cache_set, make_key
from investmate.config import settings
from investmate.engine.allocation import build_investment_plan
from investmate.engine.errors import InvestMateError
from investmate.engine.formatting import currency, percent, whole_percent
from investmate.engine.growth import ProjectionInput, project_growth
from investmate.engine.parsing import parse_amount, parse_decimal, parse_whole_number
from investmate.engine.profile import create_automated_plan, draft_automated_plan, load_profile
from investmate.tools.common import rejected

log = structlog.get_logger()


@mcp.tool()
async def get_investment_profile(profile_id: str = "default") -> str:
    """
    Get the user's current investment profile: total balance, how it is split between
    savings and stocks, risk tolerance, monthly savings, age group, and a recommended
    savings amount (20% of the total balance). Call this first when the user asks about
    their own situation.
    """
    key = make_key("get_investment_profile", profile_id=profile_id)
    if hit := await cache_get(key):
        return hit

    try:
        profile = load_profile(profile_id)
    except InvestMateError as exc:
        return rejected("get_investment_profile", exc)

    result = json.dumps({
        "total_balance":       profile.total_balance,
        "savings_allocation":  profile.savings_allocation,
        "stock_allocation":    profile.stock_allocation,
        "risk_tolerance":      profile.risk_tolerance,
        "monthly_savings":     profile.monthly_savings,
        "age_group":           profile.age_group,
        "recommended_savings": profile.recommended_savings,
    })
    await cache_set(key, result, ttl=settings.redis_ttl_reference)
    return result


@mcp.tool()
async def analyze_investment_recommendations(
    goal: str,
    time_horizon: str,
    current_amount: str | float,
    monthly_capacity: str | float,
) -> str:
    """
    Recommend a stocks/bonds/cash allocation for an investment goal.

    goal: e.g. retirement | home_down_payment | general_wealth
    time_horizon: years as one of 1 | 1-3 | 3-5 | 5 | 10 | 20 | 20+
                  (anything else is treated as 10 years and flagged horizon_recognized=false)
    current_amount: amount available to invest now in USD
    monthly_capacity: amount the user can invest each month in USD

    Horizons up to 5 years get 30/50/20, up to 15 years 60/30/10, longer 80/15/5.
    """
    key = make_key(
        "analyze_investment_recommendations",
        goal=goal, time_horizon=time_horizon,
        current_amount=current_amount, monthly_capacity=monthly_capacity,
    )
    if hit := await cache_get(key):
        return hit

    try:
        current = parse_amount(current_amount, "current_amount")
        monthly = parse_amount(monthly_capacity, "monthly_capacity")
    except InvestMateError as exc:
        return rejected("analyze_investment_recommendations", exc)

    plan = build_investment_plan(goal, time_horizon, current, monthly)
    if not plan.horizon.recognized:
        log.info("tool.horizon_defaulted", raw=plan.horizon.raw, years=plan.horizon.years)

    result = json.dumps({
        "goal":               plan.goal,
        "time_horizon":       time_horizon,
        "horizon_years":      plan.horizon.years,
        "horizon_recognized": plan.horizon.recognized,
        "current_amount":     plan.current_amount,
        "recommended_allocation": {
            "stocks": whole_percent(plan.band.stocks),
            "bonds":  whole_percent(plan.band.bonds),
            "cash":   whole_percent(plan.band.cash),
        },
        "annual_contribution":   plan.annual_contribution,
        "monthly_investment":    plan.monthly_investment,
        "estimated_growth_rate": plan.estimated_growth_rate,
        "key_strategies":        list(plan.key_strategies),
        "next_steps":            plan.next_steps,
    })
    await cache_set(key, result, ttl=settings.redis_ttl_tool_call)
    return result


@mcp.tool()
async def calculate_investment_projection(
    initial_amount: str | float,
    monthly_addition: str | float,
    expected_return: str | float,
    years: str | int,
) -> str:
    """
    Project how an investment could grow with monthly compounding.

    initial_amount: starting amount in USD
    monthly_addition: amount added at the end of each month in USD
    expected_return: expected annual return percentage, e.g. "7" for 7% (may be 0 or negative)
    years: whole number of years to project, 0 to 100

    Returns total contributed, projected total, projected earnings, and what share of the
    total is earnings. Invalid or out-of-range input returns an error instead of a projection.
    """
    key = make_key(
        "calculate_investment_projection",
        initial_amount=initial_amount, monthly_addition=monthly_addition,
        expected_return=expected_return, years=years,
    )
    if hit := await cache_get(key):
        return hit

    try:
        inputs = ProjectionInput(
            initial_amount=parse_amount(initial_amount, "initial_amount"),
            monthly_contribution=parse_amount(monthly_addition, "monthly_addition"),
            annual_return_percent=parse_decimal(expected_return, "expected_return"),
            years=parse_whole_number(years, "years"),
        )
        projection = project_growth(inputs)
    except InvestMateError as exc:
        return rejected("calculate_investment_projection", exc)

    log.info(
        "tool.projection",
        years=inputs.years,
        annual_return=inputs.annual_return_percent,
        projected_total=round(projection.projected_total, 2),
    )
    result = json.dumps({
        "initial_investment":   inputs.initial_amount,
        "monthly_contribution": inputs.monthly_contribution,
        "total_contributed":    currency(projection.total_contributed),
        "projected_earnings":   currency(projection.projected_earnings),
        "projected_total":      currency(projection.projected_total),
        "years":                inputs.years,
        "annual_return_rate":   percent(inputs.annual_return_percent),
        "power_of_compounding": f"{percent(projection.earnings_share_percent)} of total is earnings",
    })
    await cache_set(key, result, ttl=settings.redis_ttl_tool_call)
    return result


@mcp.tool()
async def start_automated_investing(
    monthly_amount: str | float,
    investment_type: str,
    strategy: str,
    start_date: str,
    confirm: bool = False,
) -> str:
    """
    Set up automated monthly investing. This is a write operation: call it first with
    confirm=false, show the returned summary to the user, and only call again with
    confirm=true after they explicitly agree.

    monthly_amount: amount to invest each month in USD
    investment_type: savings | etf_portfolio | diversified
    strategy: conservative | moderate | aggressive
    start_date: first investment date, YYYY-MM-DD
    """
    try:
        draft = draft_automated_plan(
            parse_amount(monthly_amount, "monthly_amount"),
            investment_type,
            strategy,
            start_date,
        )
    except InvestMateError as exc:
        return rejected("start_automated_investing", exc)

    summary = (
        f"Set up automatic monthly investment of {currency(draft.monthly_amount)} "
        f"to {draft.investment_type.value} with {draft.strategy.value} strategy"
    )
    if not confirm:
        return json.dumps({"requires_confirmation": True, "summary": summary})

    plan = create_automated_plan(draft)
    log.info(
        "tool.automated_plan_created",
        plan_id=plan.plan_id,
        investment_type=plan.investment_type.value,
        strategy=plan.strategy.value,
    )
    return json.dumps({
        "success": True,
        "plan_id": plan.plan_id,
        "message": (
            f"Automated investment plan created: {currency(plan.monthly_amount)}/month "
            f"starting {plan.start_date.isoformat()}"
        ),
        "details": {
            "monthly_amount":   currency(plan.monthly_amount),
            "investment_type":  plan.investment_type.value,
            "strategy":         plan.strategy.value,
            "start_date":       plan.start_date.isoformat(),
            "projected_annual": currency(plan.projected_annual),
        },
    })
