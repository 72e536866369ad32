import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Set, Tuple

import requests
import streamlit as st

from src.config import CACHE_TTL_SECONDS
from src.data.models import Room, ScheduleDocument, Session, Speaker, normalize_id

_logger = logging.getLogger(__name__)

REQUIRED_SESSION_FIELDS: Tuple[str, ...] = ("startsAt", "endsAt")


class ScheduleLoadError(Exception):
    """Raised when the schedule document cannot be fetched or understood."""


def _parse_timestamp(value: Any, field_name: str, record_id: str) -> datetime:
    if not isinstance(value, str) or "T" not in value:
        raise ScheduleLoadError(
            f"Session {record_id!r} has an invalid {field_name}: {value!r}"
        )
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError as exc:
        raise ScheduleLoadError(
            f"Session {record_id!r} has an invalid {field_name}: {value!r}"
        ) from exc


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


def _collection(payload: Dict[str, Any], name: str, required: bool) -> List[Dict[str, Any]]:
    raw = payload.get(name)
    if raw is None:
        if required:
            raise ScheduleLoadError(f"Schedule document has no '{name}' collection")
        return []
    if not isinstance(raw, list):
        raise ScheduleLoadError(f"Schedule '{name}' must be a list, got {type(raw).__name__}")
    records = [item for item in raw if isinstance(item, dict)]
    if len(records) != len(raw):
        raise ScheduleLoadError(f"Schedule '{name}' contains non-object entries")
    return records


def _parse_rooms(records: List[Dict[str, Any]]) -> Tuple[Room, ...]:
    rooms: List[Room] = []
    seen: Set[str] = set()
    for record in records:
        room_id = normalize_id(record.get("id"))
        if room_id is None:
            raise ScheduleLoadError(f"Room record without id: {record!r}")
        if room_id in seen:
            _logger.warning("Duplicate room id %s, keeping the first record", room_id)
            continue
        seen.add(room_id)
        rooms.append(Room(id=room_id, name=str(record.get("name") or room_id)))
    return tuple(rooms)


def _parse_speakers(records: List[Dict[str, Any]]) -> Tuple[Speaker, ...]:
    speakers: List[Speaker] = []
    seen: Set[str] = set()
    for record in records:
        speaker_id = normalize_id(record.get("id"))
        if speaker_id is None:
            raise ScheduleLoadError(f"Speaker record without id: {record!r}")
        if speaker_id in seen:
            _logger.warning("Duplicate speaker id %s, keeping the first record", speaker_id)
            continue
        seen.add(speaker_id)
        speakers.append(
            Speaker(
                id=speaker_id,
                full_name=str(record.get("fullName") or "").strip(),
                tag_line=_optional_text(record.get("tagLine")),
                profile_picture=_optional_text(record.get("profilePicture")),
            )
        )
    return tuple(speakers)


def _parse_sessions(records: List[Dict[str, Any]]) -> Tuple[Session, ...]:
    sessions: List[Session] = []
    for index, record in enumerate(records):
        session_id = normalize_id(record.get("id")) or f"#{index}"
        missing = [name for name in REQUIRED_SESSION_FIELDS if record.get(name) in (None, "")]
        if missing:
            raise ScheduleLoadError(
                f"Session {session_id!r} is missing required fields: {', '.join(missing)}"
            )
        speaker_refs = record.get("speakers") or []
        if not isinstance(speaker_refs, list):
            raise ScheduleLoadError(f"Session {session_id!r} has a non-list 'speakers' field")
        speaker_ids = tuple(
            speaker_id
            for speaker_id in (normalize_id(ref) for ref in speaker_refs)
            if speaker_id is not None
        )
        sessions.append(
            Session(
                id=session_id,
                title=_optional_text(record.get("title")),
                starts_at=_parse_timestamp(record["startsAt"], "startsAt", session_id),
                ends_at=_parse_timestamp(record["endsAt"], "endsAt", session_id),
                description=_optional_text(record.get("description")),
                room_id=normalize_id(record.get("roomId")),
                speaker_ids=speaker_ids,
                # only a JSON true marks a plenary session
                is_plenum=record.get("isPlenumSession") is True,
            )
        )
    return tuple(sessions)


def parse_schedule(payload: Any) -> ScheduleDocument:
    """Validate a decoded API payload and build the immutable schedule document."""
    if not isinstance(payload, dict):
        raise ScheduleLoadError(
            f"Schedule document must be a JSON object, got {type(payload).__name__}"
        )
    return ScheduleDocument(
        rooms=_parse_rooms(_collection(payload, "rooms", required=False)),
        speakers=_parse_speakers(_collection(payload, "speakers", required=False)),
        sessions=_parse_sessions(_collection(payload, "sessions", required=True)),
    )


def fetch_schedule(
    api_url: str,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
) -> ScheduleDocument:
    """Fetch the schedule document with a single request; no retries."""
    _logger.info("Fetching schedule from %s", api_url)
    http = session or requests
    try:
        response = http.get(api_url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        _logger.warning("Error fetching schedule: %s", exc)
        raise ScheduleLoadError(f"Could not fetch schedule: {exc}") from exc

    try:
        payload = response.json()
    except ValueError as exc:
        raise ScheduleLoadError("Schedule response is not valid JSON") from exc

    document = parse_schedule(payload)
    _logger.info(
        "Schedule fetched successfully: %d sessions, %d rooms, %d speakers",
        len(document.sessions),
        len(document.rooms),
        len(document.speakers),
    )
    return document


def load_schedule(api_url: str, timeout: Optional[float] = None) -> ScheduleDocument:
    """Wrapper that resolves the cached fetch for the page.

    Failures are not cached, so a fresh page load attempts the request again.
    """
    return _load_schedule_impl(api_url, timeout)


@st.cache_data(show_spinner=False, ttl=CACHE_TTL_SECONDS)
def _load_schedule_impl(api_url: str, timeout: Optional[float]) -> ScheduleDocument:
    """Fetch the schedule once per TTL window, keyed by URL and timeout."""
    return fetch_schedule(api_url, timeout=timeout)
