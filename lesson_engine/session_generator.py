"""
Per-session content generation.

generate_next_session() makes exactly one provider call. Anything that
goes wrong with the provider (errors, empty output, unsafe content) is
turned into a fallback session, so the caller never sees a provider
failure. Asking for a session past the end of the plan is a caller bug
and raises PlanCursorError.
"""

import re
from dataclasses import replace
from typing import List, Optional

from .arc import StageInstruction, plan_stage, session_action
from .content_filter import quick_filter
from .difficulty import classify, estimate_minutes
from .events import (
    EngineEvent, EventSink, log_event,
    CONTENT_REJECTED, SESSION_FALLBACK, SESSION_GENERATED,
)
from .fallback import fallback
from .models import LessonPlan, LessonSession, PlanCursorError
from .prompts import build_session_instruction
from .provider import ContentProvider, GenerationRequest, MalformedResponseError, ProviderError

_LIST_MARKER_RE = re.compile(r"^(?:[-*•]|\d+[.)])(?:\s+|$)")
_WORDLIKE_RE = re.compile(r"[^\W_]")
_QUOTES_RE = re.compile(r"[\"“”]")


def normalize_lines(text: str) -> List[str]:
    """Split provider output into lowercase sentence lines, dropping lines with no letters or digits."""
    lines = []
    for raw in text.split("\n"):
        line = _LIST_MARKER_RE.sub("", raw.strip())
        line = _QUOTES_RE.sub("", line).strip().lower()
        if _WORDLIKE_RE.search(line):
            lines.append(line)
    return lines


class SessionGenerator:
    """Generates the next session of a plan, falling back on provider failure."""

    def __init__(self, provider: Optional[ContentProvider] = None, on_event: EventSink = log_event):
        self.provider = provider
        self.on_event = on_event

    async def generate_next_session(
        self,
        plan: LessonPlan,
        previous_content: Optional[str] = None,
    ) -> LessonSession:
        """
        Generate the session after ``plan.current_session``.

        Does not modify the plan; apply the result with models.advance().
        """
        session_number = plan.next_session_number
        if session_number > plan.total_sessions:
            raise PlanCursorError(
                f"Plan '{plan.title}' has only {plan.total_sessions} sessions; "
                f"cannot generate session {session_number}"
            )

        stage = plan_stage(session_number, plan.total_sessions, plan.category)
        if self.provider is None:
            return self._fallback(plan, session_number, stage, "No content provider configured")

        action = session_action(session_number, plan.total_sessions, plan.title, plan.category)
        request = GenerationRequest(
            kind="sentence",
            topic=plan.topic,
            instruction=build_session_instruction(plan, session_number, stage, action, previous_content),
            learner_age=plan.learner_age,
        )

        try:
            response = await self.provider.generate(request)
        except ProviderError as e:
            return self._fallback(plan, session_number, stage, "Provider failed", error=e)
        except Exception as e:
            # any provider failure becomes fallback content
            return self._fallback(plan, session_number, stage, "Provider raised an unexpected error", error=e)

        text = getattr(response, "text", None)
        if not isinstance(text, str):
            error = MalformedResponseError(f"Response text was {type(text).__name__}, not str")
            return self._fallback(plan, session_number, stage, "Provider returned no text", error=error)

        sentences = normalize_lines(text)
        if not sentences:
            return self._fallback(plan, session_number, stage, "Provider returned no usable text")
        content = "\n".join(sentences)

        verdict = quick_filter(content)
        if not verdict.approved:
            self.on_event(EngineEvent(
                CONTENT_REJECTED, verdict.reason or "Content rejected",
                plan_id=plan.id, session_number=session_number,
            ))
            return self._fallback(plan, session_number, stage, "Generated content was rejected")

        session = LessonSession(
            session_number=session_number,
            content=content,
            learning_objective=f"Session {session_number}: {stage.objective} ({plan.topic})",
            difficulty=classify(content),
            estimated_minutes=estimate_minutes(content),
            stage=stage.stage.value,
        )
        self.on_event(EngineEvent(
            SESSION_GENERATED,
            f"Session {session_number}/{plan.total_sessions} generated "
            f"({len(sentences)} sentences, {session.difficulty.value})",
            plan_id=plan.id, session_number=session_number,
        ))
        return session

    def _fallback(
        self,
        plan: LessonPlan,
        session_number: int,
        stage: StageInstruction,
        reason: str,
        error: Optional[BaseException] = None,
    ) -> LessonSession:
        self.on_event(EngineEvent(
            SESSION_FALLBACK,
            f"{reason}; using fallback content for session {session_number}",
            plan_id=plan.id, session_number=session_number, error=error,
        ))
        return replace(fallback(plan.category, session_number), stage=stage.stage.value)
