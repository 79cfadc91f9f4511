"""Proficiency policy: score tiers and post-answer score adjustment.

Scores move in coarse half steps between 0 and 1, so a word answered
correctly twice from scratch becomes Easy, and a wrong answer pulls it back
toward Hard where it is picked for quizzes first.
"""

from enum import Enum

MIN_SCORE = 0.0
MAX_SCORE = 1.0
SCORE_STEP = 0.5

MEDIUM_THRESHOLD = 0.5
EASY_THRESHOLD = 1.0


class Tier(str, Enum):
    """Difficulty bucket shown in quiz prompts."""
    HARD = 'Hard'
    MEDIUM = 'Medium'
    EASY = 'Easy'


def tier_for(score: float) -> Tier:
    """Map a word score to its tier.

    Example:
        tier_for(0.0) → Tier.HARD
        tier_for(0.5) → Tier.MEDIUM
        tier_for(1.0) → Tier.EASY
    """
    if score < MEDIUM_THRESHOLD:
        return Tier.HARD
    if score < EASY_THRESHOLD:
        return Tier.MEDIUM
    return Tier.EASY


def adjust_score(score: float, correct: bool) -> float:
    """Return the score after one answer.

    A correct answer raises the score by one step only while it is below
    MAX_SCORE; a wrong answer lowers it only while it is above MIN_SCORE.
    The result never crosses either bound.
    """
    if correct:
        if score < MAX_SCORE:
            return min(MAX_SCORE, score + SCORE_STEP)
        return score
    if score > MIN_SCORE:
        return max(MIN_SCORE, score - SCORE_STEP)
    return score
