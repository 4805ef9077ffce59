import pytest

from lesson_engine.fallback import FALLBACK_CONTENT, fallback, fallback_content, fallback_key
from lesson_engine.models import Difficulty, TopicCategory


def test_fallback_session_shape() -> None:
    session = fallback("Animal Adventures", 1)
    assert session.session_number == 1
    assert session.content == FALLBACK_CONTENT["animals"][1 % 4]
    assert session.difficulty is Difficulty.EASY
    assert session.estimated_minutes == 5
    assert session.learning_objective == "Session 1"
    assert session.used_fallback is True


@pytest.mark.parametrize("title", ["Animal Adventures", "Learn About Space", "Ocean Exploration", "Dinosaur Discovery", "Let's Make a Story"])
def test_fallback_repeats_with_list_period(title: str) -> None:
    period = len(FALLBACK_CONTENT[fallback_key(title)])
    for number in range(1, 9):
        assert fallback(title, number).content == fallback(title, number + period).content


def test_fallback_wraps_instead_of_clamping() -> None:
    story = FALLBACK_CONTENT["story"]
    assert fallback_content(TopicCategory.STORY, 4) == story[0]
    assert fallback_content(TopicCategory.STORY, 5) == story[1]


def test_title_key_priority() -> None:
    assert fallback_key("Sea Animals") == "animals"
    assert fallback_key("Space Dinosaurs") == "space"
    assert fallback_key("Deep Sea Dive") == "ocean"
    assert fallback_key("Dinosaur Discovery") == "dinosaurs"
    assert fallback_key("Build Your Own World") == "story"


def test_category_keys() -> None:
    assert fallback_key(TopicCategory.OCEAN) == "ocean"
    assert fallback_key(TopicCategory.DINOSAURS) == "dinosaurs"
    assert fallback_key(TopicCategory.CREATIVE) == "story"
    assert fallback_key(TopicCategory.OTHER) == "story"
