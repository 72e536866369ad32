"""
Grouping of filtered sessions into the presentation tree the renderer draws:
day -> time slot -> category lanes -> session cards.

Nothing in here touches Streamlit, so the tree can be built and inspected
headlessly.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Tuple

import pandas as pd

from src.data.enrichment import KEYNOTE, WORKSHOP
from src.utils.formatting import format_day, format_minute, format_time_range

ROOM_SIDES: Tuple[str, ...] = ("west", "east")
UNTITLED = "Untitled session"


@dataclass(frozen=True)
class SpeakerBadge:
    name: str
    tag_line: Optional[str] = None
    picture: Optional[str] = None


@dataclass(frozen=True)
class SessionCard:
    session_id: str
    title: str
    description: Optional[str]
    time_range: str
    room_name: Optional[str]
    room_side: Optional[str]
    category: str
    speakers: Tuple[SpeakerBadge, ...]


@dataclass(frozen=True)
class TimeSlot:
    start_minute: int
    label: str
    keynotes: Tuple[SessionCard, ...]
    workshops: Tuple[SessionCard, ...]
    talks: Tuple[SessionCard, ...]

    @property
    def cards(self) -> Tuple[SessionCard, ...]:
        return self.keynotes + self.workshops + self.talks


@dataclass(frozen=True)
class DaySection:
    day: date
    label: str
    slots: Tuple[TimeSlot, ...]

    @property
    def session_count(self) -> int:
        return sum(len(slot.cards) for slot in self.slots)


def room_side(room_name: Optional[str]) -> Optional[str]:
    if not room_name:
        return None
    lowered = room_name.lower()
    for side in ROOM_SIDES:
        if side in lowered:
            return side
    return None


def card_from_row(row: pd.Series) -> SessionCard:
    room_name = row.get("room_name")
    room_name = room_name if isinstance(room_name, str) else None
    title = row.get("title")
    description = row.get("description")
    return SessionCard(
        session_id=str(row["session_id"]),
        title=title if isinstance(title, str) else UNTITLED,
        description=description if isinstance(description, str) else None,
        time_range=format_time_range(row["starts_at"], row["ends_at"]),
        room_name=room_name,
        room_side=room_side(room_name),
        category=str(row["category"]),
        speakers=tuple(
            SpeakerBadge(
                name=speaker.full_name,
                tag_line=speaker.tag_line,
                picture=speaker.profile_picture,
            )
            for speaker in (row.get("speakers") or ())
        ),
    )


def _build_slot(start_minute: int, rows: pd.DataFrame) -> TimeSlot:
    keynotes: List[SessionCard] = []
    workshops: List[SessionCard] = []
    talks: List[SessionCard] = []
    for _, row in rows.iterrows():
        card = card_from_row(row)
        if card.category == KEYNOTE:
            keynotes.append(card)
        elif card.category == WORKSHOP:
            workshops.append(card)
        else:
            talks.append(card)
    return TimeSlot(
        start_minute=start_minute,
        label=format_minute(start_minute),
        keynotes=tuple(keynotes),
        workshops=tuple(workshops),
        talks=tuple(talks),
    )


def sort_sessions(frame: pd.DataFrame) -> pd.DataFrame:
    """Order by day, then start minute, keeping document order for ties."""
    if frame.empty:
        return frame
    return frame.sort_values(["day", "start_minute", "order"], kind="mergesort")


def build_schedule_tree(frame: pd.DataFrame) -> List[DaySection]:
    """
    Partition the filtered sessions frame into day sections and time slots.

    Every row lands in exactly one card; an empty frame yields an empty tree.
    """
    if frame.empty:
        return []

    ordered = sort_sessions(frame)
    sections: List[DaySection] = []
    for day, day_rows in ordered.groupby("day", sort=True):
        slots = tuple(
            _build_slot(int(start_minute), slot_rows)
            for start_minute, slot_rows in day_rows.groupby("start_minute", sort=True)
        )
        sections.append(DaySection(day=day, label=format_day(day), slots=slots))
    return sections
