"""
Narrative-arc planning for multi-session lessons.

Each session of a plan sits at a stage of an arc. Story and creative
lessons follow a five-stage narrative arc, educational lessons a
four-stage exploration arc, and anything else gets a single generic
creative stage. The stage decides what the generated content must
accomplish; session_action() adds one line of concrete subject matter.

Both functions are pure: no provider, no state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .models import TopicCategory


class Stage(str, Enum):
    OPENING = "opening"
    DEVELOPMENT = "development"
    RISING_ACTION = "rising-action"
    CLIMAX = "climax"
    INTRODUCTION = "introduction"
    EXPLORATION = "exploration"
    DEEP_DIVE = "deep-dive"
    CONCLUSION = "conclusion"
    CREATIVE_NARRATIVE = "creative-narrative"


class ArcFamily(str, Enum):
    NARRATIVE = "narrative"
    EDUCATIONAL = "educational"
    GENERIC = "generic"


@dataclass(frozen=True)
class StageInstruction:
    """What one session's content must accomplish."""
    stage: Stage
    family: ArcFamily
    objective: str                   # short human-readable goal
    tone: str
    beats: Tuple[str, ...]           # required narrative beats
    example: Optional[str] = None    # example sentence(s), already lowercase

    def render(self) -> str:
        """Render as the bullet block interpolated into a generation request."""
        lines = [f"Stage: {self.stage.value} ({self.objective})", f"Tone: {self.tone}"]
        lines.extend(f"- {beat}" for beat in self.beats)
        if self.example:
            lines.append(f'Example: "{self.example}"')
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Stage instruction templates
# ---------------------------------------------------------------------------

STAGE_INSTRUCTIONS: Dict[Tuple[ArcFamily, Stage], StageInstruction] = {
    (ArcFamily.NARRATIVE, Stage.OPENING): StageInstruction(
        stage=Stage.OPENING,
        family=ArcFamily.NARRATIVE,
        objective="meet the main character",
        tone="warm, curious and calm",
        beats=(
            "Introduce a main character (give them a name and personality)",
            "Set the scene (where are they?)",
            "Start with something interesting happening",
            "Make the character likeable and relatable",
        ),
        example=(
            "lily the dragon loved to bake cookies. she lived in a cozy cave by the mountains. "
            "one morning she woke up with a great idea."
        ),
    ),
    (ArcFamily.NARRATIVE, Stage.DEVELOPMENT): StageInstruction(
        stage=Stage.DEVELOPMENT,
        family=ArcFamily.NARRATIVE,
        objective="develop the story",
        tone="positive and encouraging",
        beats=(
            "Develop the story naturally",
            "Show the character doing something or discovering something",
            "Add one new element or challenge",
            "Keep it positive and encouraging",
        ),
        example="lily packed a basket with flour and sugar. she walked down the mountain path to the village.",
    ),
    (ArcFamily.NARRATIVE, Stage.RISING_ACTION): StageInstruction(
        stage=Stage.RISING_ACTION,
        family=ArcFamily.NARRATIVE,
        objective="build toward an exciting moment",
        tone="lively with steady, predictable excitement",
        beats=(
            "Build toward a climax or exciting moment",
            "Show the character working through a challenge",
            "Keep the energy and excitement building",
            "Maintain continuity with earlier parts",
        ),
        example="the village oven was too small for lily. she thought hard about how to fix it.",
    ),
    (ArcFamily.NARRATIVE, Stage.CLIMAX): StageInstruction(
        stage=Stage.CLIMAX,
        family=ArcFamily.NARRATIVE,
        objective="reach the big moment",
        tone="exciting but never scary",
        beats=(
            "Reach the most exciting moment of the story",
            "Show the character using what they learned earlier",
            "Solve the main challenge in a creative way",
            "Keep every outcome safe and kind",
        ),
        example="lily used her warm breath to bake the cookies. the whole village cheered for her.",
    ),
    (ArcFamily.NARRATIVE, Stage.CONCLUSION): StageInstruction(
        stage=Stage.CONCLUSION,
        family=ArcFamily.NARRATIVE,
        objective="finish the story",
        tone="calm, proud and uplifting",
        beats=(
            "Bring the story to a satisfying conclusion",
            "Show how things worked out",
            "End on a positive, uplifting note",
            "Tie back to earlier parts of the story",
        ),
        example="lily shared cookies with all her new friends. she smiled as the sun went down.",
    ),
    (ArcFamily.EDUCATIONAL, Stage.INTRODUCTION): StageInstruction(
        stage=Stage.INTRODUCTION,
        family=ArcFamily.EDUCATIONAL,
        objective="discover the topic",
        tone="excited and adventurous",
        beats=(
            "Start with an exciting fact or discovery",
            "Use vivid, descriptive language",
            "Make it feel like an adventure",
        ),
        example=(
            "mars is called the red planet. it has huge mountains and deep canyons. "
            "robots drive on mars and take pictures."
        ),
    ),
    (ArcFamily.EDUCATIONAL, Stage.EXPLORATION): StageInstruction(
        stage=Stage.EXPLORATION,
        family=ArcFamily.EDUCATIONAL,
        objective="explore new facts",
        tone="curious and clear",
        beats=(
            "Build on previous facts",
            "Add new interesting information",
            "Make connections to what we already learned",
        ),
        example="mars is colder than earth. it has two small moons called phobos and deimos.",
    ),
    (ArcFamily.EDUCATIONAL, Stage.DEEP_DIVE): StageInstruction(
        stage=Stage.DEEP_DIVE,
        family=ArcFamily.EDUCATIONAL,
        objective="learn something in depth",
        tone="focused and fascinating",
        beats=(
            "Explain how or why something works",
            "Give one detailed, concrete example",
            "Keep it educational but exciting",
        ),
        example="dust storms on mars can cover the whole planet. they can last for many weeks.",
    ),
    (ArcFamily.EDUCATIONAL, Stage.CONCLUSION): StageInstruction(
        stage=Stage.CONCLUSION,
        family=ArcFamily.EDUCATIONAL,
        objective="review what we learned",
        tone="proud and encouraging",
        beats=(
            "Summarize the most important facts from earlier parts",
            "Explain why this topic matters",
            "End with something the learner can feel proud of knowing",
        ),
        example="now we know many facts about mars. scientists still study it every day.",
    ),
    (ArcFamily.GENERIC, Stage.CREATIVE_NARRATIVE): StageInstruction(
        stage=Stage.CREATIVE_NARRATIVE,
        family=ArcFamily.GENERIC,
        objective="keep creating",
        tone="imaginative and positive",
        beats=(
            "Create engaging, imaginative content",
            "Build naturally on previous sessions",
            "Keep the child interested and motivated",
            "Use positive, encouraging language",
        ),
    ),
}


def family_for(category: TopicCategory) -> ArcFamily:
    if category.is_narrative:
        return ArcFamily.NARRATIVE
    if category.is_educational:
        return ArcFamily.EDUCATIONAL
    return ArcFamily.GENERIC


def plan_stage(session_number: int, total_sessions: int, category: TopicCategory) -> StageInstruction:
    """
    Pick the arc stage for a session.

    Narrative: opening on session 1, development while progress <= 0.4,
    rising action while <= 0.7, climax until the last session, then
    conclusion. Educational: introduction on session 1, exploration while
    progress <= 0.5, deep dive until the last session, then conclusion.
    Other topics always get the generic creative stage.

    Never raises: session numbers below 1 count as the first session and a
    non-positive total counts as full progress.
    """
    family = family_for(category)
    if family is ArcFamily.GENERIC:
        return STAGE_INSTRUCTIONS[(family, Stage.CREATIVE_NARRATIVE)]

    progress = session_number / total_sessions if total_sessions > 0 else 1.0

    if family is ArcFamily.NARRATIVE:
        if session_number <= 1:
            stage = Stage.OPENING
        elif progress <= 0.4:
            stage = Stage.DEVELOPMENT
        elif progress <= 0.7:
            stage = Stage.RISING_ACTION
        elif session_number < total_sessions:
            stage = Stage.CLIMAX
        else:
            stage = Stage.CONCLUSION
    else:
        if session_number <= 1:
            stage = Stage.INTRODUCTION
        elif progress <= 0.5:
            stage = Stage.EXPLORATION
        elif session_number < total_sessions:
            stage = Stage.DEEP_DIVE
        else:
            stage = Stage.CONCLUSION

    return STAGE_INSTRUCTIONS[(family, stage)]


# ---------------------------------------------------------------------------
# Per-session subject matter
# ---------------------------------------------------------------------------

SESSION_ACTIONS: Dict[TopicCategory, List[str]] = {
    TopicCategory.STORY: [
        "The character wakes up and discovers something surprising or makes a plan.",
        "The character goes somewhere new or meets someone interesting.",
        "Something unexpected happens that creates a fun challenge.",
        "The character works on solving the problem in a creative way.",
        "The character succeeds and learns something valuable.",
        "The character celebrates and reflects on their adventure.",
    ],
    TopicCategory.ANIMALS: [
        'Introduce a specific animal and where it lives. Example: "lions are big cats that live in africa"',
        "Describe what this animal looks like and what makes it special.",
        "Explain what this animal eats and how it finds food.",
        "Describe how this animal moves, communicates, or protects itself.",
        "Share how baby animals are born and cared for.",
        "Explain why this animal is important and how we can help protect it.",
    ],
    TopicCategory.OCEAN: [
        "Introduce an ocean creature and where in the ocean it lives.",
        "Describe what makes this creature unique or amazing.",
        "Explain how it survives underwater (breathing, swimming, etc).",
        "Describe what it eats and how it hunts or finds food.",
        "Share a fascinating behavior or ability this creature has.",
        "Explain why ocean creatures matter and how we protect them.",
    ],
    TopicCategory.SPACE: [
        "Introduce an exciting planet or space object.",
        "Describe what makes this place special or different.",
        "Explain something fascinating about how it works.",
        "Compare it to Earth or explain why scientists study it.",
        "Share an amazing fact or recent discovery.",
        "Summarize what we learned and why it matters.",
    ],
    TopicCategory.DINOSAURS: [
        "Introduce a specific dinosaur and when it lived.",
        "Describe what this dinosaur looked like and its size.",
        "Explain what this dinosaur ate (plant-eater or meat-eater).",
        "Describe how this dinosaur moved and any special features.",
        "Share how scientists discovered fossils of this dinosaur.",
        "Explain what happened to the dinosaurs and what we learned.",
    ],
    TopicCategory.CREATIVE: [
        "Imagine and describe your creation (what is it?).",
        "Explain what your creation does or how it works.",
        "Describe what makes your creation special or unique.",
        "Explain who would use it and how it helps people.",
        "Add more cool features or abilities to your creation.",
        "Summarize your invention and why it would be amazing.",
    ],
}


def session_action(
    session_number: int,
    total_sessions: int,
    title: str,
    category: Optional[TopicCategory] = None,
) -> str:
    """
    One line of concrete guidance for this session's subject matter.

    The index clamps to the last entry, so sessions past the end of the
    list repeat the final line. ``total_sessions`` does not affect the pick.
    """
    if category is None:
        category = TopicCategory.from_title(title)

    actions = SESSION_ACTIONS.get(category)
    if not actions:
        return f"Create educational content specifically about: {title}. Stay focused on this topic!"

    index = min(max(session_number - 1, 0), len(actions) - 1)
    return actions[index]
