"""Education tools: plain-language concept explanations."""

import json

from investmate.app import mcp
from investmate.cache.client import cache_get, cache_set, make_key
from investmate.config import settings
from investmate.engine.education import explain_concept


@mcp.tool()
async def explain_investment_concept(concept: str) -> str:
    """
    Explain an investment concept in simple, jargon-free language.
    Known concepts: etf | dividend | diversification | compound_interest | dollar_cost_averaging
    (case and spacing do not matter, so "ETF" or "compound interest" work too).
    Unknown concepts return known=false with a list of concepts to try.
    """
    key = make_key("explain_investment_concept", concept=concept)
    if hit := await cache_get(key):
        return hit

    result = json.dumps(explain_concept(concept))
    await cache_set(key, result, ttl=settings.redis_ttl_reference)
    return result
