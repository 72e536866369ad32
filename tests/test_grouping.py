from collections import Counter
from datetime import date

import pytest

from src.data.enrichment import build_sessions_frame
from src.data.filters import apply_filters, make_criteria
from src.data.grouping import build_schedule_tree, room_side
from src.data.loader import parse_schedule


def _card_ids(tree):
    return [card.session_id for section in tree for slot in section.slots for card in slot.cards]


def test_days_are_sorted_by_date_value(sessions_frame):
    tree = build_schedule_tree(sessions_frame)
    assert [section.day for section in tree] == [date(2024, 4, 30), date(2024, 5, 1), date(2024, 5, 2)]
    assert [section.label for section in tree] == [
        "Tuesday, 30 April 2024",
        "Wednesday, 1 May 2024",
        "Thursday, 2 May 2024",
    ]


def test_days_sort_chronologically_not_lexically():
    payload = {
        "sessions": [
            {"id": "a", "title": "Late", "startsAt": "2024-10-02T09:00:00", "endsAt": "2024-10-02T10:00:00"},
            {"id": "b", "title": "Early", "startsAt": "2024-09-30T09:00:00", "endsAt": "2024-09-30T10:00:00"},
        ]
    }
    tree = build_schedule_tree(build_sessions_frame(parse_schedule(payload)))
    assert [section.day for section in tree] == [date(2024, 9, 30), date(2024, 10, 2)]


def test_slots_follow_start_time_not_document_order(sessions_frame):
    tree = build_schedule_tree(sessions_frame)
    last_day = tree[-1]
    assert [slot.label for slot in last_day.slots] == ["09:00", "16:00"]
    assert [card.session_id for card in last_day.slots[0].cards] == ["6"]


def test_concurrent_sessions_share_a_slot_in_document_order():
    payload = {
        "sessions": [
            {"id": "20", "title": "Second in id order", "startsAt": "2024-05-01T09:00:00", "endsAt": "2024-05-01T09:45:00"},
            {"id": "10", "title": "First in id order", "startsAt": "2024-05-01T09:00:00", "endsAt": "2024-05-01T09:45:00"},
        ]
    }
    tree = build_schedule_tree(build_sessions_frame(parse_schedule(payload)))

    assert len(tree) == 1
    assert [slot.label for slot in tree[0].slots] == ["09:00"]
    assert [card.session_id for card in tree[0].slots[0].talks] == ["20", "10"]


def test_slot_splits_sessions_into_lanes(sessions_frame):
    tree = build_schedule_tree(sessions_frame)
    may_first = next(section for section in tree if section.day == date(2024, 5, 1))
    opening, ten_o_clock = may_first.slots

    assert [card.session_id for card in opening.keynotes] == ["1"]
    assert [card.session_id for card in ten_o_clock.workshops] == ["2"]
    assert [card.session_id for card in ten_o_clock.talks] == ["3", "4"]
    assert ten_o_clock.keynotes == ()
    assert [card.session_id for card in ten_o_clock.cards] == ["2", "3", "4"]


@pytest.mark.parametrize(
    "criteria",
    [
        make_criteria(),
        make_criteria(room_id=101),
        make_criteria(categories=["talk"]),
        make_criteria(query="a"),
    ],
)
def test_grouping_neither_drops_nor_duplicates_sessions(sessions_frame, criteria):
    filtered = apply_filters(sessions_frame, criteria)
    tree = build_schedule_tree(filtered)

    assert Counter(_card_ids(tree)) == Counter(filtered["session_id"].tolist())
    assert sum(section.session_count for section in tree) == len(filtered)


def test_empty_result_builds_empty_tree(sessions_frame):
    filtered = apply_filters(sessions_frame, make_criteria(room_id="12345"))
    assert build_schedule_tree(filtered) == []


def test_card_without_resolvable_room_has_no_room_label(sessions_frame):
    tree = build_schedule_tree(sessions_frame)
    closing = next(card for section in tree for slot in section.slots for card in slot.cards if card.session_id == "5")

    assert closing.room_name is None
    assert closing.room_side is None
    assert closing.speakers == ()


def test_card_descriptor_fields(sessions_frame):
    tree = build_schedule_tree(sessions_frame)
    cards = {card.session_id: card for section in tree for slot in section.slots for card in slot.cards}

    memory = cards["3"]
    assert memory.time_range == "10:00 – 10:45"
    assert memory.room_name == "Library"
    assert [speaker.name for speaker in memory.speakers] == ["Ferris Crab"]
    assert memory.speakers[0].tag_line == "Mascot"

    typing = cards["4"]
    assert [speaker.name for speaker in typing.speakers] == ["Ada Lovelace", "Grace Hopper"]
    assert typing.speakers[0].picture == "https://example.org/ada.jpg"
    assert typing.room_side == "west"

    assert cards["2"].description is None
    assert cards["2"].room_side == "east"


@pytest.mark.parametrize(
    ("room_name", "expected"),
    [
        pytest.param("Hall West", "west", id="west"),
        pytest.param("EAST wing", "east", id="east upper case"),
        pytest.param("Library", None, id="no side"),
        pytest.param(None, None, id="no room"),
    ],
)
def test_room_side(room_name, expected):
    assert room_side(room_name) == expected
