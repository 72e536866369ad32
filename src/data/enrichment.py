"""
Derived session attributes computed from the schedule document: category,
calendar day, start minute, and resolved room / speaker references.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional, Tuple

import pandas as pd

from src.data.models import ScheduleDocument, Session, Speaker

_logger = logging.getLogger(__name__)

KEYNOTE = "keynote"
WORKSHOP = "workshop"
TALK = "talk"
CATEGORIES: Tuple[str, ...] = (KEYNOTE, TALK, WORKSHOP)
CATEGORY_LABELS = {
    KEYNOTE: "Keynote",
    TALK: "Talk",
    WORKSHOP: "Workshop",
}

WORKSHOP_PREFIX = "workshop:"

SESSION_COLUMNS: List[str] = [
    "session_id",
    "order",
    "title",
    "description",
    "starts_at",
    "ends_at",
    "day",
    "start_minute",
    "room_id",
    "room_name",
    "speakers",
    "speaker_names",
    "is_plenum",
    "category",
]


def classify(is_plenum: bool, title: Optional[str]) -> str:
    if is_plenum:
        return KEYNOTE
    if isinstance(title, str) and title.lower().startswith(WORKSHOP_PREFIX):
        return WORKSHOP
    return TALK


def category(session: Session) -> str:
    """Keynote if plenary, workshop if titled "Workshop: ...", otherwise talk."""
    return classify(session.is_plenum, session.title)


def _resolve_speakers(document: ScheduleDocument, session: Session) -> Tuple[Speaker, ...]:
    resolved = []
    for speaker_id in session.speaker_ids:
        speaker = document.speaker(speaker_id)
        if speaker is None:
            _logger.debug("Session %s references unknown speaker %s", session.id, speaker_id)
            continue
        resolved.append(speaker)
    return tuple(resolved)


def _resolve_room_name(document: ScheduleDocument, session: Session) -> Optional[str]:
    room = document.room(session.room_id)
    if room is None:
        if session.room_id is not None:
            _logger.debug("Session %s references unknown room %s", session.id, session.room_id)
        return None
    return room.name


def build_sessions_frame(document: ScheduleDocument) -> pd.DataFrame:
    """
    Flatten the document's sessions into a frame, one row per session in
    document order, with the derived columns the filters and grouping use.
    """
    rows = []
    for order, session in enumerate(document.sessions):
        speakers = _resolve_speakers(document, session)
        rows.append(
            {
                "session_id": session.id,
                "order": order,
                "title": session.title,
                "description": session.description,
                "starts_at": session.starts_at,
                "ends_at": session.ends_at,
                "day": session.starts_at.date(),
                "start_minute": session.starts_at.hour * 60 + session.starts_at.minute,
                "room_id": session.room_id,
                "room_name": _resolve_room_name(document, session),
                "speakers": speakers,
                "speaker_names": tuple(speaker.full_name for speaker in speakers),
                "is_plenum": session.is_plenum,
                "category": category(session),
            }
        )
    # object dtype keeps datetimes and dates as given, including tz offsets
    frame = pd.DataFrame(rows, columns=SESSION_COLUMNS, dtype=object)
    frame["order"] = frame["order"].astype(int)
    frame["start_minute"] = frame["start_minute"].astype(int)
    frame["is_plenum"] = frame["is_plenum"].astype(bool)
    return frame


def available_days(frame: pd.DataFrame) -> List[date]:
    if frame.empty:
        return []
    return sorted(set(frame["day"].tolist()))
