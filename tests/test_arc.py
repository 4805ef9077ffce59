import pytest

from lesson_engine.arc import (
    SESSION_ACTIONS, ArcFamily, Stage, family_for, plan_stage, session_action,
)
from lesson_engine.models import TopicCategory

NARRATIVE_STAGES = {Stage.OPENING, Stage.DEVELOPMENT, Stage.RISING_ACTION, Stage.CLIMAX, Stage.CONCLUSION}
EDUCATIONAL_STAGES = {Stage.INTRODUCTION, Stage.EXPLORATION, Stage.DEEP_DIVE, Stage.CONCLUSION}


def test_story_last_session_is_conclusion() -> None:
    assert plan_stage(5, 5, TopicCategory.STORY).stage is Stage.CONCLUSION


def test_narrative_half_way_is_rising_action() -> None:
    assert plan_stage(3, 6, TopicCategory.STORY).stage is Stage.RISING_ACTION


def test_narrative_arc_over_five_sessions() -> None:
    stages = [plan_stage(n, 5, TopicCategory.CREATIVE).stage for n in range(1, 6)]
    assert stages == [
        Stage.OPENING,
        Stage.DEVELOPMENT,      # 0.4
        Stage.RISING_ACTION,    # 0.6
        Stage.CLIMAX,           # 0.8
        Stage.CONCLUSION,
    ]


def test_educational_arc_over_six_sessions() -> None:
    stages = [plan_stage(n, 6, TopicCategory.SPACE).stage for n in range(1, 7)]
    assert stages == [
        Stage.INTRODUCTION,
        Stage.EXPLORATION,
        Stage.EXPLORATION,      # exactly 0.5
        Stage.DEEP_DIVE,
        Stage.DEEP_DIVE,
        Stage.CONCLUSION,
    ]


def test_single_session_plan_opens() -> None:
    assert plan_stage(1, 1, TopicCategory.STORY).stage is Stage.OPENING
    assert plan_stage(1, 1, TopicCategory.OCEAN).stage is Stage.INTRODUCTION


@pytest.mark.parametrize("category", list(TopicCategory))
def test_stage_belongs_to_family_and_is_repeatable(category: TopicCategory) -> None:
    for total in range(1, 9):
        for number in range(1, total + 1):
            first = plan_stage(number, total, category)
            assert plan_stage(number, total, category) == first
            if family_for(category) is ArcFamily.NARRATIVE:
                assert first.stage in NARRATIVE_STAGES
            elif family_for(category) is ArcFamily.EDUCATIONAL:
                assert first.stage in EDUCATIONAL_STAGES
            else:
                assert first.stage is Stage.CREATIVE_NARRATIVE


def test_plan_stage_never_raises_on_odd_input() -> None:
    assert plan_stage(0, 0, TopicCategory.STORY).stage is Stage.OPENING
    assert plan_stage(4, 0, TopicCategory.DINOSAURS).stage is Stage.CONCLUSION
    assert plan_stage(9, 5, TopicCategory.STORY).stage is Stage.CONCLUSION


def test_stage_render_includes_beats_and_example() -> None:
    text = plan_stage(1, 5, TopicCategory.STORY).render()
    assert "Stage: opening" in text
    assert "- Introduce a main character" in text
    assert 'Example: "lily the dragon' in text


def test_session_action_saturates_at_last_entry() -> None:
    actions = SESSION_ACTIONS[TopicCategory.DINOSAURS]
    last = session_action(len(actions), 10, "Dinosaur Discovery")
    assert last == actions[-1]
    for number in range(len(actions), len(actions) + 5):
        assert session_action(number, 10, "Dinosaur Discovery") == last


def test_session_action_index_is_non_decreasing() -> None:
    actions = SESSION_ACTIONS[TopicCategory.OCEAN]
    picks = [actions.index(session_action(n, 8, "Ocean Exploration")) for n in range(1, 9)]
    assert picks == sorted(picks)
    assert picks[0] == 0


def test_session_action_title_priority() -> None:
    # "story" wins over "animal" because it is checked first
    assert session_action(1, 5, "My Animal Story") == SESSION_ACTIONS[TopicCategory.STORY][0]
    assert session_action(2, 5, "Under the Sea") == SESSION_ACTIONS[TopicCategory.OCEAN][1]
    assert session_action(1, 5, "Build Your Own World") == SESSION_ACTIONS[TopicCategory.CREATIVE][0]


def test_session_action_prefers_explicit_category() -> None:
    line = session_action(1, 5, "Fun Times", TopicCategory.SPACE)
    assert line == SESSION_ACTIONS[TopicCategory.SPACE][0]


def test_session_action_generic_topic_names_title() -> None:
    line = session_action(3, 5, "Trains")
    assert "Trains" in line
