"""
Immutable records for the schedule document returned by the event API.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Tuple


def normalize_id(value: Any) -> Optional[str]:
    """Return the canonical string form of an API identifier.

    Numeric and string representations collapse to the same key, so ``12``,
    ``12.0`` and ``"12"`` all become ``"12"``.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        if value != value:  # NaN
            return None
        if value.is_integer():
            value = int(value)
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class Room:
    id: str
    name: str


@dataclass(frozen=True)
class Speaker:
    id: str
    full_name: str
    tag_line: Optional[str] = None
    profile_picture: Optional[str] = None


@dataclass(frozen=True)
class Session:
    id: str
    title: Optional[str]
    starts_at: datetime
    ends_at: datetime
    description: Optional[str] = None
    room_id: Optional[str] = None
    speaker_ids: Tuple[str, ...] = ()
    is_plenum: bool = False


@dataclass(frozen=True)
class ScheduleDocument:
    rooms: Tuple[Room, ...]
    speakers: Tuple[Speaker, ...]
    sessions: Tuple[Session, ...]
    _rooms_by_id: Dict[str, Room] = field(init=False, repr=False, compare=False)
    _speakers_by_id: Dict[str, Speaker] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        rooms_by_id: Dict[str, Room] = {}
        for room in self.rooms:
            rooms_by_id.setdefault(room.id, room)
        speakers_by_id: Dict[str, Speaker] = {}
        for speaker in self.speakers:
            speakers_by_id.setdefault(speaker.id, speaker)
        object.__setattr__(self, "_rooms_by_id", rooms_by_id)
        object.__setattr__(self, "_speakers_by_id", speakers_by_id)

    def room(self, room_id: Optional[str]) -> Optional[Room]:
        if room_id is None:
            return None
        return self._rooms_by_id.get(room_id)

    def speaker(self, speaker_id: Optional[str]) -> Optional[Speaker]:
        if speaker_id is None:
            return None
        return self._speakers_by_id.get(speaker_id)
