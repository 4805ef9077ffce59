"""
Structured engine events.

Generators report what happened (plan created, session generated,
provider failure masked by fallback content) through an EventSink passed
in by the caller. The default sink writes to the package logger; tests
and UIs can collect events instead.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional

from .logger import logger

PLAN_CREATED = "plan.created"
OUTLINE_GENERATED = "outline.generated"
OUTLINE_FAILED = "outline.failed"
INTEREST_DROPPED = "interest.dropped"
SESSION_GENERATED = "session.generated"
SESSION_FALLBACK = "session.fallback"
CONTENT_REJECTED = "content.rejected"


@dataclass(frozen=True)
class EngineEvent:
    kind: str
    message: str
    plan_id: Optional[str] = None
    session_number: Optional[int] = None
    error: Optional[BaseException] = None

    @property
    def is_failure(self) -> bool:
        return self.kind in (OUTLINE_FAILED, SESSION_FALLBACK, CONTENT_REJECTED)


EventSink = Callable[[EngineEvent], None]


def log_event(event: EngineEvent) -> None:
    """Default sink: write the event to the console logger."""
    where = f"[plan {event.plan_id[:8]}] " if event.plan_id else ""
    message = f"{where}{event.message}"
    if event.error is not None:
        message += f" ({type(event.error).__name__}: {event.error})"

    if event.kind in (PLAN_CREATED, OUTLINE_GENERATED):
        logger.plan(message)
    elif event.kind == SESSION_GENERATED:
        logger.session(message)
    elif event.kind in (SESSION_FALLBACK, CONTENT_REJECTED):
        logger.fallback(message)
    else:
        logger.warning(message)


class EventCollector:
    """Sink that keeps every event, for callers that inspect failures later."""

    def __init__(self):
        self.events: List[EngineEvent] = []

    def __call__(self, event: EngineEvent) -> None:
        self.events.append(event)

    def of_kind(self, kind: str) -> List[EngineEvent]:
        return [e for e in self.events if e.kind == kind]
