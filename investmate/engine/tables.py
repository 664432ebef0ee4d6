"""
Immutable lookup tables and closed choice sets.

Built once at import and never mutated. Percentages are stored as whole
numbers so band totals are exact.
"""

import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TypeVar

_C = TypeVar("_C", bound="Choice")


class Choice(str, Enum):
    """String enum whose parse() maps free text to a member, or None."""

    @classmethod
    def parse(cls: type[_C], value: str | None) -> _C | None:
        key = str(value or "").strip().lower().replace("-", "_").replace(" ", "_")
        try:
            return cls(key)
        except ValueError:
            return None


# ── Questionnaire risk factors ────────────────────────────────────────────────

class DownturnComfort(Choice):
    VERY_UNCOMFORTABLE     = "very_uncomfortable"
    SOMEWHAT_UNCOMFORTABLE = "somewhat_uncomfortable"
    NEUTRAL                = "neutral"
    COMFORTABLE            = "comfortable"
    VERY_COMFORTABLE       = "very_comfortable"


class Experience(Choice):
    NONE      = "none"
    MINIMAL   = "minimal"
    MODERATE  = "moderate"
    EXTENSIVE = "extensive"


MAX_AGE = 119

# (exclusive upper age bound, points); ages past the last bound score 30
AGE_POINTS: tuple[tuple[int, int], ...] = ((35, 70), (50, 50))
AGE_POINTS_DEFAULT = 30

COMFORT_POINTS = MappingProxyType({
    DownturnComfort.VERY_UNCOMFORTABLE:     10,
    DownturnComfort.SOMEWHAT_UNCOMFORTABLE: 25,
    DownturnComfort.NEUTRAL:                40,
    DownturnComfort.COMFORTABLE:            60,
    DownturnComfort.VERY_COMFORTABLE:       75,
})

EXPERIENCE_POINTS = MappingProxyType({
    Experience.NONE:      -20,
    Experience.MINIMAL:   -10,
    Experience.MODERATE:    0,
    Experience.EXTENSIVE:  15,
})


# ── Behavioral risk factors ───────────────────────────────────────────────────

class IncomeStability(Choice):
    UNSTABLE = "unstable"
    MODERATE = "moderate"
    STABLE   = "stable"


class TransactionFrequency(Choice):
    HIGH   = "high"
    MEDIUM = "medium"
    LOW    = "low"


class SavingsConsistency(Choice):
    INCONSISTENT = "inconsistent"
    MODERATE     = "moderate"
    EXCELLENT    = "excellent"


INCOME_STABILITY_POINTS = MappingProxyType({
    IncomeStability.UNSTABLE: 15,
    IncomeStability.MODERATE: 28,
    IncomeStability.STABLE:   40,
})

# Inverted: fewer transactions reads as steadier spending.
TRANSACTION_FREQUENCY_POINTS = MappingProxyType({
    TransactionFrequency.HIGH:    5,
    TransactionFrequency.MEDIUM: 15,
    TransactionFrequency.LOW:    25,
})

SAVINGS_CONSISTENCY_POINTS = MappingProxyType({
    SavingsConsistency.INCONSISTENT:  5,
    SavingsConsistency.MODERATE:     15,
    SavingsConsistency.EXCELLENT:    25,
})

# (minimum months, points), checked in order
EMERGENCY_FUND_POINTS: tuple[tuple[float, int], ...] = ((12, 20), (6, 15), (3, 10))
EMERGENCY_FUND_POINTS_DEFAULT = 5


# ── Tiers ─────────────────────────────────────────────────────────────────────

class RiskTier(str, Enum):
    CONSERVATIVE           = "Conservative"
    MODERATE               = "Moderate"
    MODERATE_TO_AGGRESSIVE = "Moderate-to-Aggressive"
    AGGRESSIVE             = "Aggressive"


# Questionnaire: (exclusive lower score bound, tier)
QUESTIONNAIRE_TIERS: tuple[tuple[int, RiskTier], ...] = (
    (60, RiskTier.MODERATE_TO_AGGRESSIVE),
    (40, RiskTier.MODERATE),
)

# Behavioral: (inclusive lower score bound, tier)
BEHAVIORAL_TIERS: tuple[tuple[int, RiskTier], ...] = (
    (70, RiskTier.AGGRESSIVE),
    (50, RiskTier.MODERATE_TO_AGGRESSIVE),
    (35, RiskTier.MODERATE),
)

# No Aggressive row: that tier is only reachable from the behavioral scorer.
TIER_ALLOCATIONS = MappingProxyType({
    RiskTier.CONSERVATIVE:           MappingProxyType({"stocks": "30-40%", "bonds": "50-60%", "cash": "10-20%"}),
    RiskTier.MODERATE:               MappingProxyType({"stocks": "50-60%", "bonds": "30-40%", "cash": "5-10%"}),
    RiskTier.MODERATE_TO_AGGRESSIVE: MappingProxyType({"stocks": "70-80%", "bonds": "15-25%", "cash": "5%"}),
})

TIER_STRATEGIES = MappingProxyType({
    RiskTier.CONSERVATIVE: (
        "Focus on bonds and dividend-paying stocks",
        "Monthly automated investing",
        "Rebalance annually",
    ),
    RiskTier.MODERATE: (
        "Mix of growth stocks and stable bonds",
        "Dollar-cost averaging",
        "Review quarterly",
    ),
    RiskTier.MODERATE_TO_AGGRESSIVE: (
        "Growth-focused with some international exposure",
        "Automatic reinvestment of dividends",
        "Stay the course during market dips",
    ),
})


# ── Time horizon and allocation bands ─────────────────────────────────────────

HORIZON_YEARS = MappingProxyType({
    "1":   2,
    "1-3": 2,
    "5":   5,
    "3-5": 5,
    "10":  10,
    "20":  20,
    "20+": 20,
})
DEFAULT_HORIZON_YEARS = 10


@dataclass(frozen=True)
class AllocationBand:
    years_threshold: float
    stocks_pct: int
    bonds_pct: int
    cash_pct: int

    @property
    def stocks(self) -> float:
        return self.stocks_pct / 100

    @property
    def bonds(self) -> float:
        return self.bonds_pct / 100

    @property
    def cash(self) -> float:
        return self.cash_pct / 100


ALLOCATION_BANDS: tuple[AllocationBand, ...] = (
    AllocationBand(5,        30, 50, 20),
    AllocationBand(15,       60, 30, 10),
    AllocationBand(math.inf, 80, 15, 5),
)

PLAN_GROWTH_RATE = "6-8% annually"
PLAN_STRATEGIES = ("Dollar-cost averaging", "Automatic rebalancing", "Tax-efficient investing")
PLAN_NEXT_STEPS = "Review fund options, set up automatic transfers, monitor quarterly"


# ── Automated investing ───────────────────────────────────────────────────────

class InvestmentType(Choice):
    SAVINGS       = "savings"
    ETF_PORTFOLIO = "etf_portfolio"
    DIVERSIFIED   = "diversified"


class Strategy(Choice):
    CONSERVATIVE = "conservative"
    MODERATE     = "moderate"
    AGGRESSIVE   = "aggressive"


# ── Profiles ──────────────────────────────────────────────────────────────────

RECOMMENDED_SAVINGS_RATE = 0.20

PROFILES = MappingProxyType({
    "default": MappingProxyType({
        "total_balance":      5000.0,
        "savings_allocation": 3000.0,
        "stock_allocation":   2000.0,
        "risk_tolerance":     "moderate",
        "monthly_savings":    500.0,
        "age_group":          "30s",
    }),
})


# ── Concepts ──────────────────────────────────────────────────────────────────

CONCEPT_KEY_POINTS = (
    "Understanding this concept helps you make better investment decisions",
    "Don't feel rushed - investing is a marathon, not a sprint",
    "Ask questions anytime - financial literacy is your superpower",
)

CONCEPTS = MappingProxyType({
    "etf": (
        "An ETF (Exchange-Traded Fund) is like a basket of stocks bundled together. "
        "Instead of buying individual companies, you buy a tiny piece of many companies "
        "at once. It's like ordering a sampler platter instead of one dish!"
    ),
    "dividend": (
        "A dividend is a small payment companies give to shareholders (owners). "
        "Think of it as the company saying 'thank you' for investing in us. "
        "You get paid just for holding the stock!"
    ),
    "diversification": (
        "Diversification means not putting all your eggs in one basket. Instead of "
        "investing only in tech stocks, you spread money across different types of "
        "investments, industries, and risk levels."
    ),
    "compound_interest": (
        "Compound interest is when your earnings make their own earnings. Your money "
        "grows faster because you're earning 'interest on interest.' Albert Einstein "
        "called it the 8th wonder of the world!"
    ),
    "dollar_cost_averaging": (
        "Instead of trying to time the market perfectly, you invest a fixed amount "
        "regularly (monthly). By averaging out the price over time, you reduce the "
        "risk of buying at the peak."
    ),
})
