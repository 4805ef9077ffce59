from typing import List, Optional

from .content_filter import is_topic_appropriate
from .events import (
    EngineEvent, EventSink, log_event,
    INTEREST_DROPPED, OUTLINE_FAILED, OUTLINE_GENERATED, PLAN_CREATED,
)
from .models import LessonPlan, LessonTemplate
from .prompts import build_outline_instruction
from .provider import ContentProvider, GenerationRequest, ProviderError


class LessonPlanGenerator:
    """Creates empty lesson plans from catalog templates."""

    def __init__(
        self,
        provider: Optional[ContentProvider] = None,
        on_event: EventSink = log_event,
        request_outline: bool = True,
    ):
        self.provider = provider
        self.on_event = on_event
        self.request_outline = request_outline

    async def create_plan(
        self,
        template: LessonTemplate,
        learner_age: int,
        interests: Optional[List[str]] = None,
    ) -> LessonPlan:
        """
        Build a plan with no sessions and the cursor at 0.

        If a provider is configured, an outline is requested and kept on
        the plan as advisory text. A failed outline request still returns
        the plan.
        """
        kept_interests = []
        for interest in interests or []:
            if is_topic_appropriate(interest):
                kept_interests.append(interest)
            else:
                self.on_event(EngineEvent(INTEREST_DROPPED, f"Ignoring interest {interest!r}"))

        outline = None
        if self.provider is not None and self.request_outline:
            outline = await self._request_outline(template, learner_age, kept_interests)

        plan = LessonPlan.from_template(template, learner_age, kept_interests, outline=outline)
        self.on_event(EngineEvent(
            PLAN_CREATED,
            f"Created '{plan.title}' with {plan.total_sessions} sessions",
            plan_id=plan.id,
        ))
        return plan

    async def _request_outline(
        self,
        template: LessonTemplate,
        learner_age: int,
        interests: List[str],
    ) -> Optional[str]:
        request = GenerationRequest(
            kind="scene",
            topic=template.title,
            instruction=build_outline_instruction(template, learner_age, interests),
            learner_age=learner_age,
        )
        try:
            response = await self.provider.generate(request)
        except ProviderError as e:
            self.on_event(EngineEvent(OUTLINE_FAILED, f"Outline for '{template.title}' failed", error=e))
            return None
        except Exception as e:
            self.on_event(EngineEvent(OUTLINE_FAILED, f"Outline for '{template.title}' raised an unexpected error", error=e))
            return None

        text = getattr(response, "text", None)
        outline = text.strip() if isinstance(text, str) else ""
        if not outline:
            self.on_event(EngineEvent(OUTLINE_FAILED, f"Outline for '{template.title}' was empty"))
            return None
        self.on_event(EngineEvent(OUTLINE_GENERATED, f"Outline for '{template.title}' received"))
        return outline
