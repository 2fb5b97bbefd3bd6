"""
Verdict mapping.
Turns an AI-likelihood percentage into one of three labels.
"""
from enum import Enum


class Verdict(Enum):
    """Categorical outcome of an analysis."""
    AI_GENERATED = "AI Generated"
    HUMAN_WRITTEN = "Human Written"
    UNCERTAIN = "Uncertain"


class VerdictThresholds:
    """Inclusive percentage boundaries."""
    AI_GENERATED = 60.0
    HUMAN_WRITTEN = 40.0


def get_verdict(ai_percentage: float) -> Verdict:
    """
    Determine verdict from an AI percentage.

    Args:
        ai_percentage: AI likelihood (0-100)

    Returns:
        Verdict enum value
    """
    if ai_percentage >= VerdictThresholds.AI_GENERATED:
        return Verdict.AI_GENERATED
    elif ai_percentage <= VerdictThresholds.HUMAN_WRITTEN:
        return Verdict.HUMAN_WRITTEN
    else:
        return Verdict.UNCERTAIN


def score_to_verdict(ai_percentage: float) -> str:
    """Get verdict label string from a percentage."""
    return get_verdict(ai_percentage).value
