import math

from .models import Difficulty

CHARS_PER_MINUTE = 50


def classify(text: str) -> Difficulty:
    """
    Rate typing difficulty by mean word length over whitespace-split tokens.

    Under 4 characters is easy, under 6 is medium, anything longer is hard.
    Sentence count, vocabulary and learner age are deliberately ignored.
    Raises ValueError for empty text; callers must route empty provider
    output to fallback content instead.
    """
    words = text.split()
    if not words:
        raise ValueError("Cannot classify difficulty of empty text")

    mean_length = sum(len(word) for word in words) / len(words)
    if mean_length < 4:
        return Difficulty.EASY
    if mean_length < 6:
        return Difficulty.MEDIUM
    return Difficulty.HARD


def estimate_minutes(content: str) -> int:
    """Rough typing time: one minute per 50 characters, at least one minute."""
    return max(1, math.ceil(len(content) / CHARS_PER_MINUTE))
