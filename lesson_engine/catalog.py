"""
Static lesson template catalog.

Age ranges and suggested session counts are fixed literals.
"""

from typing import List, Optional

from .models import LessonTemplate, TopicCategory


LESSON_TEMPLATES: List[LessonTemplate] = [
    LessonTemplate(
        category=TopicCategory.STORY,
        title="Let's Make a Story",
        description="Create an adventure story together, one chapter at a time",
        lesson_type="story",
        suggested_sessions=5,
        age_range=(5, 12),
    ),
    LessonTemplate(
        category=TopicCategory.SPACE,
        title="Learn About Space",
        description="Discover planets, stars, and the solar system while typing",
        lesson_type="education",
        suggested_sessions=6,
        age_range=(6, 12),
    ),
    LessonTemplate(
        category=TopicCategory.ANIMALS,
        title="Animal Adventures",
        description="Learn about different animals and their habitats",
        lesson_type="education",
        suggested_sessions=5,
        age_range=(4, 10),
    ),
    LessonTemplate(
        category=TopicCategory.CREATIVE,
        title="Build Your Own World",
        description="Create your own imaginary world with characters and places",
        lesson_type="creative",
        suggested_sessions=7,
        age_range=(7, 14),
    ),
    LessonTemplate(
        category=TopicCategory.OCEAN,
        title="Ocean Exploration",
        description="Dive deep and learn about sea creatures",
        lesson_type="education",
        suggested_sessions=5,
        age_range=(5, 11),
    ),
    LessonTemplate(
        category=TopicCategory.DINOSAURS,
        title="Dinosaur Discovery",
        description="Travel back in time to learn about dinosaurs",
        lesson_type="adventure",
        suggested_sessions=6,
        age_range=(5, 12),
    ),
    LessonTemplate(
        category=TopicCategory.CREATIVE,
        title="Invent Something Amazing",
        description="Imagine and describe your own inventions",
        lesson_type="creative",
        suggested_sessions=4,
        age_range=(7, 14),
    ),
]


def get_template(title: str) -> Optional[LessonTemplate]:
    """Look up a template by its display title (case-insensitive)."""
    wanted = title.strip().lower()
    for template in LESSON_TEMPLATES:
        if template.title.lower() == wanted:
            return template
    return None


def templates_for_age(age: int) -> List[LessonTemplate]:
    return [t for t in LESSON_TEMPLATES if t.suits_age(age)]
