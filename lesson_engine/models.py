import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional, Tuple


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class TopicCategory(str, Enum):
    """Topic tag assigned to a template once, then threaded through as data."""
    STORY = "story"
    SPACE = "education-space"
    ANIMALS = "education-animals"
    OCEAN = "education-ocean"
    DINOSAURS = "education-dinosaurs"
    CREATIVE = "creative"            # world-building and inventions
    OTHER = "other"

    @property
    def is_narrative(self) -> bool:
        return self in (TopicCategory.STORY, TopicCategory.CREATIVE)

    @property
    def is_educational(self) -> bool:
        return self in (
            TopicCategory.SPACE,
            TopicCategory.ANIMALS,
            TopicCategory.OCEAN,
            TopicCategory.DINOSAURS,
        )

    @classmethod
    def from_title(cls, title: str) -> "TopicCategory":
        """
        Classify a free-text title. Case-insensitive containment, first
        match wins: story, animal, ocean/sea, space, dinosaur,
        invent/world/creative.
        """
        lowered = (title or "").lower()
        if "story" in lowered:
            return cls.STORY
        if "animal" in lowered:
            return cls.ANIMALS
        if "ocean" in lowered or "sea" in lowered:
            return cls.OCEAN
        if "space" in lowered:
            return cls.SPACE
        if "dinosaur" in lowered:
            return cls.DINOSAURS
        if "invent" in lowered or "world" in lowered or "creative" in lowered:
            return cls.CREATIVE
        return cls.OTHER


class Difficulty(str, Enum):
    """Typing difficulty of generated content."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class PlanCursorError(ValueError):
    """A session was requested or appended out of order, or past the end of a plan."""


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Data Models
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LessonTemplate:
    """A catalog entry the learner picks a lesson from."""
    category: TopicCategory
    title: str
    description: str
    lesson_type: str                 # story, education, creative, adventure
    suggested_sessions: int
    age_range: Tuple[int, int]       # inclusive (lower, upper)

    def suits_age(self, age: int) -> bool:
        low, high = self.age_range
        return low <= age <= high


@dataclass(frozen=True)
class LessonSession:
    """One generated unit of typing content. Never changed once created."""
    session_number: int              # 1-based
    content: str                     # one lowercase sentence per line
    learning_objective: str
    difficulty: Difficulty
    estimated_minutes: int
    used_fallback: bool = False      # True if the provider could not be used
    stage: Optional[str] = None      # arc stage the content was written for

    @property
    def sentences(self) -> List[str]:
        return [line for line in self.content.split("\n") if line.strip()]


@dataclass(frozen=True)
class LessonPlan:
    """
    The state of one multi-session lesson.

    Plans are values: the only way to add a session is advance(), which
    returns a new plan with the session appended and the cursor moved in
    the same step.
    """
    title: str
    category: TopicCategory
    total_sessions: int
    description: str = ""
    current_session: int = 0
    sessions: Tuple[LessonSession, ...] = ()
    learner_age: Optional[int] = None
    interests: Tuple[str, ...] = ()
    outline: Optional[str] = None    # advisory provider text, never parsed
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime = field(default_factory=_utcnow)
    last_accessed: datetime = field(default_factory=_utcnow)

    @property
    def topic(self) -> str:
        return self.title.lower()

    @property
    def next_session_number(self) -> int:
        return self.current_session + 1

    @property
    def remaining_sessions(self) -> int:
        return max(0, self.total_sessions - self.current_session)

    @property
    def is_complete(self) -> bool:
        return self.current_session >= self.total_sessions

    @classmethod
    def from_template(
        cls,
        template: LessonTemplate,
        learner_age: Optional[int] = None,
        interests: Optional[List[str]] = None,
        outline: Optional[str] = None,
    ) -> "LessonPlan":
        return cls(
            title=template.title,
            category=template.category,
            total_sessions=template.suggested_sessions,
            description=template.description,
            learner_age=learner_age,
            interests=tuple(interests or ()),
            outline=outline,
        )


# ---------------------------------------------------------------------------
# Plan transitions
# ---------------------------------------------------------------------------

def advance(plan: LessonPlan, session: LessonSession) -> LessonPlan:
    """
    Append ``session`` to ``plan`` and move the cursor past it.

    Raises PlanCursorError if the plan is already complete or if the
    session is not the next one in order. The input plan is left untouched.
    """
    if plan.is_complete:
        raise PlanCursorError(
            f"Plan '{plan.title}' already has all {plan.total_sessions} sessions"
        )
    expected = plan.next_session_number
    if session.session_number != expected:
        raise PlanCursorError(
            f"Expected session {expected} for plan '{plan.title}', got session {session.session_number}"
        )
    return replace(
        plan,
        sessions=plan.sessions + (session,),
        current_session=expected,
        last_accessed=_utcnow(),
    )


def story_so_far(plan: LessonPlan) -> Optional[str]:
    """All previous session content labeled by part number, or None for a new plan."""
    if not plan.sessions:
        return None
    return "\n\n".join(f"Part {s.session_number}: {s.content}" for s in plan.sessions)
