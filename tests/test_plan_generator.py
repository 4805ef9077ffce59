from conftest import FakeProvider, run
from lesson_engine import events as ev
from lesson_engine.catalog import get_template
from lesson_engine.plan_generator import LessonPlanGenerator
from lesson_engine.provider import TransportError

OUTLINE = "1. meet the lion\n2. what lions eat\n3. lion cubs\n4. how lions talk\n5. protecting lions"


def test_create_plan_starts_empty(events) -> None:
    template = get_template("Animal Adventures")
    plan = run(LessonPlanGenerator(None, events).create_plan(template, 8))

    assert plan.current_session == 0
    assert plan.sessions == ()
    assert plan.total_sessions == 5
    assert plan.title == "Animal Adventures"
    assert plan.learner_age == 8
    assert plan.outline is None
    assert len(events.of_kind(ev.PLAN_CREATED)) == 1


def test_outline_is_kept_as_advisory_text(events) -> None:
    provider = FakeProvider(OUTLINE)
    plan = run(LessonPlanGenerator(provider, events).create_plan(get_template("Animal Adventures"), 8, ["trains"]))

    assert plan.outline == OUTLINE
    assert plan.sessions == ()
    [request] = provider.requests
    assert request.kind == "scene"
    assert "Create a 5-session typing lesson plan for a 8-year-old" in request.instruction
    assert "The child is interested in: trains" in request.instruction
    assert len(events.of_kind(ev.OUTLINE_GENERATED)) == 1


def test_outline_failure_is_not_fatal(events) -> None:
    provider = FakeProvider(TransportError("connection reset", "openai"))
    plan = run(LessonPlanGenerator(provider, events).create_plan(get_template("Learn About Space"), 9))

    assert plan.total_sessions == 6
    assert plan.current_session == 0
    assert plan.outline is None
    [event] = events.of_kind(ev.OUTLINE_FAILED)
    assert isinstance(event.error, TransportError)


def test_outline_can_be_disabled() -> None:
    provider = FakeProvider(OUTLINE)
    plan = run(LessonPlanGenerator(provider, lambda e: None, request_outline=False).create_plan(get_template("Dinosaur Discovery"), 7))
    assert plan.outline is None
    assert provider.requests == []


def test_inappropriate_interests_are_dropped(events) -> None:
    plan = run(LessonPlanGenerator(None, events).create_plan(get_template("Let's Make a Story"), 6, ["dragons", "monster trucks"]))
    assert plan.interests == ("dragons",)
    assert len(events.of_kind(ev.INTEREST_DROPPED)) == 1


class BrokenProvider:
    async def generate(self, request):
        raise ConnectionError("network down")


def test_unexpected_outline_error_is_not_fatal(events) -> None:
    plan = run(LessonPlanGenerator(BrokenProvider(), events).create_plan(get_template("Ocean Exploration"), 8))
    assert plan.outline is None
    assert plan.sessions == ()
    [event] = events.of_kind(ev.OUTLINE_FAILED)
    assert isinstance(event.error, ConnectionError)
