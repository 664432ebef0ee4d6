"""
Risk scorer.

Two additive models that must not be mixed up:
  questionnaire  age + downturn comfort + experience, three tiers (> 60, > 40)
  behavioral     income + spending + saving + emergency fund, four tiers (>= 70, >= 50, >= 35)

Unrecognized categorical answers score 0 and mark the assessment degraded.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from investmate.engine.errors import MissingTierGuidance, OutOfRangeInput
from investmate.engine.tables import (
    AGE_POINTS,
    AGE_POINTS_DEFAULT,
    BEHAVIORAL_TIERS,
    COMFORT_POINTS,
    EMERGENCY_FUND_POINTS,
    EMERGENCY_FUND_POINTS_DEFAULT,
    EXPERIENCE_POINTS,
    INCOME_STABILITY_POINTS,
    MAX_AGE,
    QUESTIONNAIRE_TIERS,
    SAVINGS_CONSISTENCY_POINTS,
    TIER_ALLOCATIONS,
    TIER_STRATEGIES,
    TRANSACTION_FREQUENCY_POINTS,
    Choice,
    DownturnComfort,
    Experience,
    IncomeStability,
    RiskTier,
    SavingsConsistency,
    TransactionFrequency,
)


@dataclass(frozen=True)
class RiskAssessment:
    score: int
    tier: RiskTier
    components: dict[str, int]
    unrecognized: tuple[str, ...] = field(default=())

    @property
    def degraded(self) -> bool:
        return bool(self.unrecognized)


@dataclass(frozen=True)
class TierGuidance:
    tier: RiskTier
    allocation: dict[str, str]
    strategies: tuple[str, ...]


# ── Components ────────────────────────────────────────────────────────────────

def age_points(age: int) -> int:
    if not 0 <= age <= MAX_AGE:
        raise OutOfRangeInput(f"age must be between 0 and {MAX_AGE}, got {age}.", field="age")
    for upper, points in AGE_POINTS:
        if age < upper:
            return points
    return AGE_POINTS_DEFAULT


def emergency_fund_points(months: float) -> int:
    if months < 0:
        raise OutOfRangeInput(
            f"emergency_fund_months must not be negative, got {months}.",
            field="emergency_fund_months",
        )
    for minimum, points in EMERGENCY_FUND_POINTS:
        if months >= minimum:
            return points
    return EMERGENCY_FUND_POINTS_DEFAULT


def _choice_points(
    name: str,
    raw: str | None,
    choices: type[Choice],
    table: Mapping[Enum, int],
    components: dict[str, int],
    unrecognized: list[str],
) -> None:
    choice = choices.parse(raw)
    if choice is None:
        unrecognized.append(name)
        components[name] = 0
    else:
        components[name] = table[choice]


# ── Tiers ─────────────────────────────────────────────────────────────────────

def questionnaire_tier(score: int) -> RiskTier:
    for lower, tier in QUESTIONNAIRE_TIERS:
        if score > lower:
            return tier
    return RiskTier.CONSERVATIVE


def behavioral_tier(score: int) -> RiskTier:
    for lower, tier in BEHAVIORAL_TIERS:
        if score >= lower:
            return tier
    return RiskTier.CONSERVATIVE


def tier_guidance(tier: RiskTier) -> TierGuidance:
    allocation = TIER_ALLOCATIONS.get(tier)
    strategies = TIER_STRATEGIES.get(tier)
    if allocation is None or strategies is None:
        raise MissingTierGuidance(f"No allocation guidance is defined for the {tier.value} tier.")
    return TierGuidance(tier=tier, allocation=dict(allocation), strategies=strategies)


# ── Scorers ───────────────────────────────────────────────────────────────────

def score_questionnaire(age: int, downturn_comfort: str | None, experience: str | None) -> RiskAssessment:
    components = {"age": age_points(age)}
    unrecognized: list[str] = []
    _choice_points("market_downturn_comfort", downturn_comfort, DownturnComfort,
                   COMFORT_POINTS, components, unrecognized)
    _choice_points("previous_experience", experience, Experience,
                   EXPERIENCE_POINTS, components, unrecognized)

    score = sum(components.values())
    return RiskAssessment(
        score=score,
        tier=questionnaire_tier(score),
        components=components,
        unrecognized=tuple(unrecognized),
    )


def score_behavior(
    income_stability: str | None,
    transaction_frequency: str | None,
    savings_consistency: str | None,
    emergency_fund_months: float,
) -> RiskAssessment:
    components: dict[str, int] = {}
    unrecognized: list[str] = []
    _choice_points("income_stability", income_stability, IncomeStability,
                   INCOME_STABILITY_POINTS, components, unrecognized)
    _choice_points("transaction_frequency", transaction_frequency, TransactionFrequency,
                   TRANSACTION_FREQUENCY_POINTS, components, unrecognized)
    _choice_points("savings_consistency", savings_consistency, SavingsConsistency,
                   SAVINGS_CONSISTENCY_POINTS, components, unrecognized)
    components["emergency_fund_months"] = emergency_fund_points(emergency_fund_months)

    score = sum(components.values())
    return RiskAssessment(
        score=score,
        tier=behavioral_tier(score),
        components=components,
        unrecognized=tuple(unrecognized),
    )
