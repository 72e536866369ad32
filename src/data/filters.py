"""
Filter utilities that apply the sidebar criteria to the sessions frame.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, FrozenSet, Iterable, Optional

import pandas as pd

from src.data.enrichment import CATEGORIES, build_sessions_frame
from src.data.models import ScheduleDocument, normalize_id


@dataclass(frozen=True)
class FilterCriteria:
    room_id: Optional[str] = None
    day: Optional[date] = None
    categories: FrozenSet[str] = field(default_factory=frozenset)
    query: str = ""

    @property
    def normalized_query(self) -> str:
        return self.query.strip().casefold()

    @property
    def is_active(self) -> bool:
        """False only for the initial state where no control narrows the list."""
        return bool(
            self.room_id is not None
            or self.day is not None
            or self.categories
            or self.normalized_query
        )


DEFAULT_FILTERS = FilterCriteria()


def make_criteria(
    room_id: Any = None,
    day: Optional[date] = None,
    categories: Optional[Iterable[str]] = None,
    query: Optional[str] = None,
) -> FilterCriteria:
    """Build criteria from raw control values, normalising ids and categories."""
    selected = frozenset(c for c in (categories or ()) if c in CATEGORIES)
    return FilterCriteria(
        room_id=normalize_id(room_id),
        day=day,
        categories=selected,
        query=query or "",
    )


def _contains(series: pd.Series, needle: str) -> pd.Series:
    # missing values never match
    return series.map(lambda v: isinstance(v, str) and needle in v.casefold()).astype(bool)


def _speakers_contain(series: pd.Series, needle: str) -> pd.Series:
    return series.map(
        lambda names: any(needle in str(name).casefold() for name in (names or ()))
    ).astype(bool)


def apply_filters(frame: pd.DataFrame, criteria: FilterCriteria) -> pd.DataFrame:
    """
    Return the rows of the sessions frame matching every active criterion.

    Inactive criteria return the frame unchanged; active criteria that match
    nothing return an empty frame with the same columns.
    """
    if frame.empty or not criteria.is_active:
        return frame

    mask = pd.Series(True, index=frame.index)

    if criteria.room_id is not None:
        mask &= frame["room_id"].map(normalize_id) == criteria.room_id

    if criteria.day is not None:
        mask &= frame["day"] == criteria.day

    if criteria.categories:
        mask &= frame["category"].isin(sorted(criteria.categories))

    needle = criteria.normalized_query
    if needle:
        text_mask = _contains(frame["title"], needle)
        text_mask |= _contains(frame["description"], needle)
        text_mask |= _speakers_contain(frame["speaker_names"], needle)
        mask &= text_mask

    return frame[mask]


def filter_sessions(document: ScheduleDocument, criteria: FilterCriteria) -> pd.DataFrame:
    return apply_filters(build_sessions_frame(document), criteria)


def serialize_filters(criteria: FilterCriteria) -> Dict[str, Any]:
    """
    Convert the FilterCriteria dataclass to a JSON-serialisable dictionary to be
    stored in session_state or used for logging/debugging.
    """
    return {
        "room_id": criteria.room_id,
        "day": criteria.day.isoformat() if criteria.day is not None else None,
        "categories": sorted(criteria.categories),
        "query": criteria.query,
        "is_active": criteria.is_active,
    }
