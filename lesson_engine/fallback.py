"""
Deterministic lesson content for when the content provider can't be used.

The learner should never see a technical error, only (possibly less
varied) lesson content.
"""

from typing import Dict, List, Union

from .models import Difficulty, LessonSession, TopicCategory

FALLBACK_MINUTES = 5

FALLBACK_CONTENT: Dict[str, List[str]] = {
    "story": [
        "once there was a brave hero",
        "the hero went on a journey",
        "they met new friends",
        "together they had adventures",
    ],
    "space": [
        "the sun is a star",
        "earth is our home planet",
        "the moon orbits earth",
        "there are eight planets",
    ],
    "animals": [
        "lions live in africa",
        "elephants are very big",
        "dolphins swim in the ocean",
        "birds can fly in the sky",
    ],
    "ocean": [
        "whales are the biggest animals",
        "dolphins are very smart",
        "fish have gills to breathe",
        "coral reefs are colorful",
    ],
    "dinosaurs": [
        "dinosaurs lived long ago",
        "the t-rex was very big",
        "some dinosaurs ate plants",
        "dinosaurs left fossils behind",
    ],
}

_CATEGORY_KEYS: Dict[TopicCategory, str] = {
    TopicCategory.STORY: "story",
    TopicCategory.SPACE: "space",
    TopicCategory.ANIMALS: "animals",
    TopicCategory.OCEAN: "ocean",
    TopicCategory.DINOSAURS: "dinosaurs",
}


def fallback_key(topic: Union[TopicCategory, str]) -> str:
    """
    Map a topic to a fallback content key.

    Categories map directly (creative and other topics use story content).
    Raw titles are matched in the order animal, space, ocean/sea, dinosaur,
    defaulting to story.
    """
    if isinstance(topic, TopicCategory):
        return _CATEGORY_KEYS.get(topic, "story")

    lowered = topic.lower()
    if "animal" in lowered:
        return "animals"
    if "space" in lowered:
        return "space"
    if "ocean" in lowered or "sea" in lowered:
        return "ocean"
    if "dinosaur" in lowered:
        return "dinosaurs"
    return "story"


def fallback_content(topic: Union[TopicCategory, str], session_number: int) -> str:
    # Modulo, not clamped: long plans cycle back to the first sentence.
    sentences = FALLBACK_CONTENT[fallback_key(topic)]
    return sentences[session_number % len(sentences)]


def fallback(topic: Union[TopicCategory, str], session_number: int) -> LessonSession:
    """Build an easy, five-minute session from the fallback table."""
    return LessonSession(
        session_number=session_number,
        content=fallback_content(topic, session_number),
        learning_objective=f"Session {session_number}",
        difficulty=Difficulty.EASY,
        estimated_minutes=FALLBACK_MINUTES,
        used_fallback=True,
    )
