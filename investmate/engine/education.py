from typing import Any

from investmate.engine.tables import CONCEPT_KEY_POINTS, CONCEPTS


def _concept_key(concept: str) -> str:
    return str(concept or "").strip().lower().replace("-", "_").replace(" ", "_")


def explain_concept(concept: str) -> dict[str, Any]:
    key = _concept_key(concept)
    explanation = CONCEPTS.get(key)
    if explanation is None:
        known = ", ".join(CONCEPTS)
        return {
            "concept": concept,
            "known": False,
            "explanation": (
                "I don't have that concept in my database, but I'd be happy to explain it! "
                f"Try asking about: {known}."
            ),
        }
    return {
        "concept": key,
        "known": True,
        "explanation": explanation,
        "key_points": list(CONCEPT_KEY_POINTS),
    }
