import config
from services.schedule_recalc import (
    DEFAULT_POLICY,
    AnchorPolicy,
    find_anchor,
    policy_from_settings,
    recalculate,
)


def _program(make_event):
    return [
        make_event("a", "08:30", "45 mns", "Registration", category="registration"),
        make_event("b", "09:15", "20 mns", "Coffee", category="food", notes="vegan"),
        make_event("c", "11:11", "10 mns", "Intro: Beyond Learning", category="stage"),
        make_event("d", "03:00", "45 mns", "Keynote"),
        make_event("e", "", "1 hr", "Panel"),
        make_event("f", "09:00", "", "Lunch"),
        make_event("g", "09:00", "5 mns", "Wrap up"),
    ]


def test_empty_input_returns_empty_list():
    assert recalculate([]) == []


def test_anchor_pinned_and_cascade_forward(make_event):
    events = _program(make_event)
    out = recalculate(events)

    assert len(out) == len(events)
    assert out[0] is events[0]
    assert out[1] is events[1]
    assert out[2].start_time == "09:50"
    assert out[3].start_time == "10:00"
    assert out[4].start_time == "10:45"
    assert out[5].start_time == "11:45"
    # 소요시간이 비어 있으면 0분으로 보고 같은 시각을 이어받음
    assert out[6].start_time == "11:45"
    assert [e.id for e in out] == [e.id for e in events]


def test_recalculate_does_not_mutate_input(make_event):
    events = _program(make_event)
    before = [e.model_copy() for e in events]
    recalculate(events)
    assert events == before


def test_anchor_match_is_case_insensitive_substring(make_event):
    events = [
        make_event("a", "08:00", "10 mns", "Welcome"),
        make_event("b", "08:10", "30 mns", "INTRO: beyond learning (Day 1)"),
        make_event("c", "", "", "Talk"),
    ]
    out = recalculate(events)
    assert find_anchor(events) == 1
    assert out[1].start_time == "09:50"
    assert out[2].start_time == "10:20"


def test_only_first_matching_title_is_the_anchor(make_event):
    events = [
        make_event("a", "08:00", "10 mns", "Intro: Beyond Learning"),
        make_event("b", "08:00", "10 mns", "Intro: Beyond Learning (repeat)"),
    ]
    out = recalculate(events)
    assert out[0].start_time == "09:50"
    assert out[1].start_time == "10:00"


def test_cascade_crosses_noon_into_afternoon_labels(make_event):
    events = [
        make_event("a", "", "2 hr", "Intro: Beyond Learning"),
        make_event("b", "", "1 hour", "Workshop"),
        make_event("c", "", "", "Closing"),
    ]
    out = recalculate(events)
    assert [e.start_time for e in out] == ["09:50", "11:50", "12:50"]


def test_no_anchor_cascades_from_first_event(make_event):
    events = [
        make_event("a", "08:00", "15 mns", "Doors open"),
        make_event("b", "07:00", "15 mns", "Welcome"),
    ]
    out = recalculate(events)
    assert out[0].start_time == "08:00"
    assert out[1].start_time == "08:15"


def test_no_anchor_chain_breaks_at_missing_duration(make_event):
    events = [
        make_event("a", "08:00", "30 mns", "Doors open"),
        make_event("b", "01:00", "", "Welcome"),
        make_event("c", "11:00", "abc", "Talk"),
        make_event("d", "02:00", "", "Break"),
    ]
    out = recalculate(events)
    assert out[1].start_time == "08:30"
    assert out[2] is events[2]
    assert out[2].start_time == "11:00"
    # 'abc'는 0분이므로 다음 항목은 그대로
    assert out[3].start_time == "02:00"


def test_no_anchor_chain_resumes_from_current_value(make_event):
    events = [
        make_event("a", "08:00", "", "Doors open"),
        make_event("b", "11:00", "20 mns", "Talk"),
        make_event("c", "", "", "Q&A"),
    ]
    out = recalculate(events)
    assert out[1].start_time == "11:00"
    assert out[2].start_time == "11:20"


def test_index_strategy_pins_position_nine(make_event):
    events = [make_event(str(i), "08:00", "10 mns", f"Item {i}") for i in range(12)]
    policy = AnchorPolicy(strategy="index")
    out = recalculate(events, policy)

    assert find_anchor(events, policy) == 9
    assert out[9].start_time == "09:50"
    assert out[10].start_time == "10:00"
    assert out[11].start_time == "10:10"
    # 앵커 이전은 그대로
    assert all(out[i] is events[i] for i in range(9))


def test_index_strategy_falls_back_when_list_is_short(make_event):
    events = [make_event(str(i), "08:00", "10 mns", f"Item {i}") for i in range(3)]
    policy = AnchorPolicy(strategy="index")
    assert find_anchor(events, policy) is None
    assert [e.start_time for e in recalculate(events, policy)] == ["08:00", "08:10", "08:20"]


def test_custom_policy_keyword_and_time(make_event):
    events = [
        make_event("a", "08:00", "10 mns", "Registration"),
        make_event("b", "", "25 mns", "Opening Ceremony"),
        make_event("c", "", "", "Talk"),
    ]
    policy = AnchorPolicy(title_keyword="opening", anchor_time="10:30")
    out = recalculate(events, policy)
    assert [e.start_time for e in out] == ["08:00", "10:30", "10:55"]


def test_reorder_only_changes_start_times_downstream(make_event):
    events = _program(make_event)
    moved = list(events)
    anchor = moved.pop(2)
    moved.insert(4, anchor)

    out = recalculate(moved)
    assert [e.id for e in out] == ["a", "b", "d", "e", "c", "f", "g"]
    assert out[2] is moved[2] and out[3] is moved[3]
    assert out[4].start_time == "09:50"
    assert out[5].start_time == "10:00"
    for before, after in zip(moved, out):
        assert before.model_dump(exclude={"start_time"}) == after.model_dump(exclude={"start_time"})


def test_policy_from_settings(monkeypatch):
    assert policy_from_settings() == DEFAULT_POLICY

    monkeypatch.setattr(config, "ANCHOR_STRATEGY", "index")
    monkeypatch.setattr(config, "ANCHOR_INDEX", 4)
    monkeypatch.setattr(config, "ANCHOR_TIME", "10:00")
    policy = policy_from_settings()
    assert policy.strategy == "index"
    assert policy.anchor_index == 4
    assert policy.anchor_time == "10:00"

    monkeypatch.setattr(config, "ANCHOR_STRATEGY", "bogus")
    assert policy_from_settings().strategy == "title"
