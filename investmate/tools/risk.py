"""Risk tools: questionnaire and behavioral risk profiles."""

import json
from typing import Any

import structlog

from investmate.app import mcp
from investmate.cache.client import cache_get, cache_set, make_key
from investmate.config import settings
from investmate.engine.errors import InvestMateError, MissingTierGuidance
from investmate.engine.parsing import parse_decimal, parse_whole_number
from investmate.engine.risk import RiskAssessment, score_behavior, score_questionnaire, tier_guidance
from investmate.tools.common import rejected

log = structlog.get_logger()


def _assessment(tool: str, assessment: RiskAssessment) -> dict[str, Any]:
    out: dict[str, Any] = {
        "risk_score":             assessment.score,
        "recommended_risk_level": assessment.tier.value,
        "score_components":       assessment.components,
        "degraded":               assessment.degraded,
        "unrecognized_answers":   list(assessment.unrecognized),
    }
    if assessment.degraded:
        log.info("tool.risk_degraded", tool=tool, unrecognized=list(assessment.unrecognized))

    try:
        guidance = tier_guidance(assessment.tier)
    except MissingTierGuidance as exc:
        log.warning("tool.guidance_missing", tool=tool, tier=assessment.tier.value)
        out["guidance_error"] = exc.as_payload()
        return out

    out["allocation_suggestion"] = guidance.allocation
    out["best_fit_strategies"] = list(guidance.strategies)
    return out


@mcp.tool()
async def assess_investment_risk_profile(
    age: int,
    years_to_retirement: int,
    market_downturn_comfort: str,
    previous_experience: str,
) -> str:
    """
    Score the user's risk tolerance from a short questionnaire and suggest a matching
    allocation range and strategies.

    age: user's age, 0 to 119
    years_to_retirement: years until the retirement goal (echoed back, not scored)
    market_downturn_comfort: how comfortable with a 20% market drop?
        very_uncomfortable | somewhat_uncomfortable | neutral | comfortable | very_comfortable
    previous_experience: none | minimal | moderate | extensive

    Levels: above 60 Moderate-to-Aggressive, above 40 Moderate, otherwise Conservative.
    An unrecognized answer scores 0 and is listed in unrecognized_answers with degraded=true;
    ask the user again rather than relying on a degraded score.
    """
    key = make_key(
        "assess_investment_risk_profile",
        age=age, years_to_retirement=years_to_retirement,
        market_downturn_comfort=market_downturn_comfort, previous_experience=previous_experience,
    )
    if hit := await cache_get(key):
        return hit

    try:
        assessment = score_questionnaire(
            parse_whole_number(age, "age"),
            market_downturn_comfort,
            previous_experience,
        )
    except InvestMateError as exc:
        return rejected("assess_investment_risk_profile", exc)

    result = json.dumps({
        "age":                 age,
        "years_to_retirement": years_to_retirement,
        **_assessment("assess_investment_risk_profile", assessment),
    })
    await cache_set(key, result, ttl=settings.redis_ttl_tool_call)
    return result


@mcp.tool()
async def assess_behavioral_risk_profile(
    income_stability: str,
    transaction_frequency: str,
    savings_consistency: str,
    emergency_fund_months: float,
) -> str:
    """
    Score risk capacity from observed money habits rather than a questionnaire.

    income_stability: unstable | moderate | stable
    transaction_frequency: high | medium | low  (fewer transactions scores higher)
    savings_consistency: inconsistent | moderate | excellent
    emergency_fund_months: months of expenses held in an emergency fund

    Levels: 70+ Aggressive, 50+ Moderate-to-Aggressive, 35+ Moderate, otherwise Conservative.
    There is no allocation guidance for the Aggressive level yet; the result then carries
    guidance_error instead of allocation_suggestion.
    """
    key = make_key(
        "assess_behavioral_risk_profile",
        income_stability=income_stability, transaction_frequency=transaction_frequency,
        savings_consistency=savings_consistency, emergency_fund_months=emergency_fund_months,
    )
    if hit := await cache_get(key):
        return hit

    try:
        assessment = score_behavior(
            income_stability,
            transaction_frequency,
            savings_consistency,
            parse_decimal(emergency_fund_months, "emergency_fund_months"),
        )
    except InvestMateError as exc:
        return rejected("assess_behavioral_risk_profile", exc)

    result = json.dumps(_assessment("assess_behavioral_risk_profile", assessment))
    await cache_set(key, result, ttl=settings.redis_ttl_tool_call)
    return result
