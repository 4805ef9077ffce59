import pytest

from lesson_engine.difficulty import classify, estimate_minutes
from lesson_engine.models import Difficulty


def test_mean_word_length_thresholds() -> None:
    assert classify("cat dog sun") is Difficulty.EASY
    assert classify("apple mango lemon") is Difficulty.MEDIUM
    assert classify("giraffe dolphin penguin") is Difficulty.HARD


def test_threshold_boundaries_round_up() -> None:
    assert classify("frog lake") is Difficulty.MEDIUM        # exactly 4
    assert classify("planet rocket") is Difficulty.HARD      # exactly 6


def test_newlines_count_as_whitespace() -> None:
    assert classify("cat\ndog\nsun") is Difficulty.EASY


@pytest.mark.parametrize("text", ["", "   ", "\n\n"])
def test_empty_text_is_rejected(text: str) -> None:
    with pytest.raises(ValueError):
        classify(text)


def test_estimate_minutes() -> None:
    assert estimate_minutes("") == 1
    assert estimate_minutes("a" * 50) == 1
    assert estimate_minutes("a" * 51) == 2
    assert estimate_minutes("a" * 260) == 6
