import copy

import pytest

from src.data.enrichment import build_sessions_frame
from src.data.loader import parse_schedule

SESSIONIZE_PAYLOAD = {
    "rooms": [
        {"id": 101, "name": "Hall West"},
        {"id": 102, "name": "East Wing"},
        {"id": 103, "name": "Library"},
    ],
    "speakers": [
        {
            "id": "spk-1",
            "fullName": "Ada Lovelace",
            "tagLine": "Analyst",
            "profilePicture": "https://example.org/ada.jpg",
        },
        {"id": "spk-2", "fullName": "Grace Hopper", "tagLine": None, "profilePicture": None},
        {"id": "spk-3", "fullName": "Ferris Crab", "tagLine": "Mascot"},
    ],
    "sessions": [
        {
            "id": "1",
            "title": "Opening",
            "description": "Welcome to the conference",
            "startsAt": "2024-05-01T09:00:00",
            "endsAt": "2024-05-01T09:30:00",
            "roomId": 101,
            "speakers": ["spk-1"],
            "isPlenumSession": True,
        },
        {
            "id": "2",
            "title": "Workshop: Intro to X",
            "description": None,
            "startsAt": "2024-05-01T10:00:00",
            "endsAt": "2024-05-01T12:00:00",
            "roomId": "102",
            "speakers": ["spk-2"],
            "isPlenumSession": False,
        },
        {
            "id": "3",
            "title": "Memory safety in practice",
            "description": "Lessons learned from Rust adoption",
            "startsAt": "2024-05-01T10:00:00",
            "endsAt": "2024-05-01T10:45:00",
            "roomId": 103,
            "speakers": ["spk-3", "spk-missing"],
            "isPlenumSession": False,
        },
        {
            "id": "4",
            "title": "Typing at scale",
            "description": "Gradual typing",
            "startsAt": "2024-05-01T10:00:00",
            "endsAt": "2024-05-01T10:45:00",
            "roomId": 101,
            "speakers": ["spk-1", "spk-2"],
            "isPlenumSession": False,
        },
        {
            "id": "5",
            "title": "Closing",
            "description": "See you next year",
            "startsAt": "2024-05-02T16:00:00",
            "endsAt": "2024-05-02T16:30:00",
            "roomId": 999,
            "speakers": [],
            "isPlenumSession": True,
        },
        {
            "id": "6",
            "title": "Async patterns",
            "startsAt": "2024-05-02T09:00:00",
            "endsAt": "2024-05-02T09:45:00",
            "roomId": 102,
            "speakers": ["spk-2"],
        },
        {
            "id": "7",
            "title": "Data pipelines",
            "description": "Batch and streaming",
            "startsAt": "2024-04-30T14:00:00",
            "endsAt": "2024-04-30T14:45:00",
            "roomId": 103,
            "speakers": [],
            "isPlenumSession": False,
        },
    ],
}


@pytest.fixture
def payload():
    return copy.deepcopy(SESSIONIZE_PAYLOAD)


@pytest.fixture
def document(payload):
    return parse_schedule(payload)


@pytest.fixture
def sessions_frame(document):
    return build_sessions_frame(document)


def ids(frame):
    return frame["session_id"].tolist()
