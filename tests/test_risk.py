import pytest

from investmate.engine.errors import MissingTierGuidance, OutOfRangeInput
from investmate.engine.risk import (
    age_points,
    behavioral_tier,
    emergency_fund_points,
    questionnaire_tier,
    score_behavior,
    score_questionnaire,
    tier_guidance,
)
from investmate.engine.tables import DownturnComfort, Experience, RiskTier


# ── Questionnaire ─────────────────────────────────────────────────────────────

@pytest.mark.parametrize("age, points", [(0, 70), (34, 70), (35, 50), (49, 50), (50, 30), (119, 30)])
def test_age_boundaries(age, points):
    assert age_points(age) == points


@pytest.mark.parametrize("age", [-1, 120, 150])
def test_age_outside_range_is_rejected(age):
    with pytest.raises(OutOfRangeInput):
        age_points(age)


def test_reference_questionnaire():
    result = score_questionnaire(28, "comfortable", "minimal")
    assert result.score == 70 + 60 - 10
    assert result.tier is RiskTier.MODERATE_TO_AGGRESSIVE
    assert not result.degraded


def test_conservative_questionnaire():
    result = score_questionnaire(62, "very_uncomfortable", "none")
    assert result.score == 20
    assert result.tier is RiskTier.CONSERVATIVE


@pytest.mark.parametrize(
    "score, tier",
    [
        (61, RiskTier.MODERATE_TO_AGGRESSIVE),
        (60, RiskTier.MODERATE),
        (41, RiskTier.MODERATE),
        (40, RiskTier.CONSERVATIVE),
        (-10, RiskTier.CONSERVATIVE),
    ],
)
def test_questionnaire_tier_thresholds(score, tier):
    assert questionnaire_tier(score) is tier


def test_questionnaire_never_reaches_aggressive():
    best = score_questionnaire(20, "very_comfortable", "extensive")
    assert best.score == 160
    assert best.tier is RiskTier.MODERATE_TO_AGGRESSIVE


def test_unrecognized_answers_score_zero_and_degrade():
    result = score_questionnaire(40, "terrified", "some")
    assert result.score == 50
    assert result.degraded
    assert result.unrecognized == ("market_downturn_comfort", "previous_experience")
    assert result.components["market_downturn_comfort"] == 0


def test_answers_are_case_and_spacing_tolerant():
    assert DownturnComfort.parse("Very Comfortable") is DownturnComfort.VERY_COMFORTABLE
    assert DownturnComfort.parse("somewhat-uncomfortable") is DownturnComfort.SOMEWHAT_UNCOMFORTABLE
    assert Experience.parse(" EXTENSIVE ") is Experience.EXTENSIVE
    assert Experience.parse(None) is None


# ── Behavioral ────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "months, points",
    [(0, 5), (2.9, 5), (3, 10), (5.99, 10), (6, 15), (11.5, 15), (12, 20), (48, 20)],
)
def test_emergency_fund_thresholds(months, points):
    assert emergency_fund_points(months) == points


def test_negative_emergency_fund_is_rejected():
    with pytest.raises(OutOfRangeInput):
        emergency_fund_points(-1)


@pytest.mark.parametrize(
    "score, tier",
    [
        (70, RiskTier.AGGRESSIVE),
        (69, RiskTier.MODERATE_TO_AGGRESSIVE),
        (50, RiskTier.MODERATE_TO_AGGRESSIVE),
        (49, RiskTier.MODERATE),
        (35, RiskTier.MODERATE),
        (34, RiskTier.CONSERVATIVE),
    ],
)
def test_behavioral_tier_thresholds(score, tier):
    assert behavioral_tier(score) is tier


def test_behavioral_extremes():
    low = score_behavior("unstable", "high", "inconsistent", 0)
    assert low.score == 30
    assert low.tier is RiskTier.CONSERVATIVE

    high = score_behavior("stable", "low", "excellent", 12)
    assert high.score == 110
    assert high.tier is RiskTier.AGGRESSIVE


def test_transaction_frequency_is_inverted():
    busy = score_behavior("moderate", "high", "moderate", 6)
    quiet = score_behavior("moderate", "low", "moderate", 6)
    assert quiet.score - busy.score == 20


def test_tier_functions_are_distinct():
    assert questionnaire_tier(45) is RiskTier.MODERATE
    assert behavioral_tier(45) is RiskTier.MODERATE
    assert questionnaire_tier(38) is RiskTier.CONSERVATIVE
    assert behavioral_tier(38) is RiskTier.MODERATE
    assert questionnaire_tier(55) is RiskTier.MODERATE
    assert behavioral_tier(55) is RiskTier.MODERATE_TO_AGGRESSIVE


# ── Guidance ──────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "tier", [RiskTier.CONSERVATIVE, RiskTier.MODERATE, RiskTier.MODERATE_TO_AGGRESSIVE]
)
def test_guidance_defined_for_three_tiers(tier):
    guidance = tier_guidance(tier)
    assert set(guidance.allocation) == {"stocks", "bonds", "cash"}
    assert len(guidance.strategies) == 3


def test_aggressive_guidance_is_an_explicit_error():
    with pytest.raises(MissingTierGuidance) as err:
        tier_guidance(RiskTier.AGGRESSIVE)
    assert err.value.code == "missing_tier_guidance"
