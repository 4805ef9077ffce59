"""
Lesson plan service: the interface the UI talks to.

    service = LessonPlanService.from_env()
    plan = await service.create_plan(get_template("Animal Adventures"), learner_age=8)
    while not plan.is_complete:
        plan = await service.advance_plan(plan)
        show(plan.sessions[-1])

Callers must not run two advances on the same plan at once (disable the
"next" button while one is pending); plans are values, so the result of
each advance replaces the caller's reference.
"""

from typing import List, Optional

from .catalog import LESSON_TEMPLATES
from .config import ProviderConfig
from .events import EventSink, log_event
from .models import LessonPlan, LessonSession, LessonTemplate, advance, story_so_far
from .plan_generator import LessonPlanGenerator
from .provider import ContentProvider, create_provider_from_env
from .session_generator import SessionGenerator


class LessonPlanService:
    def __init__(
        self,
        provider: Optional[ContentProvider] = None,
        on_event: EventSink = log_event,
        request_outline: bool = True,
    ):
        self.provider = provider
        self.plans = LessonPlanGenerator(provider, on_event, request_outline=request_outline)
        self.sessions = SessionGenerator(provider, on_event)

    @classmethod
    def from_env(cls, config: Optional[ProviderConfig] = None, on_event: EventSink = log_event) -> "LessonPlanService":
        return cls(create_provider_from_env(config), on_event=on_event)

    @property
    def is_ai_available(self) -> bool:
        return self.provider is not None

    def templates(self) -> List[LessonTemplate]:
        return list(LESSON_TEMPLATES)

    async def create_plan(
        self,
        template: LessonTemplate,
        learner_age: int,
        interests: Optional[List[str]] = None,
    ) -> LessonPlan:
        return await self.plans.create_plan(template, learner_age, interests)

    async def generate_next_session(
        self,
        plan: LessonPlan,
        previous_content: Optional[str] = None,
    ) -> LessonSession:
        return await self.sessions.generate_next_session(plan, previous_content)

    async def advance_plan(self, plan: LessonPlan) -> LessonPlan:
        """Generate the next session from everything typed so far and return the advanced plan."""
        session = await self.sessions.generate_next_session(plan, story_so_far(plan))
        return advance(plan, session)
