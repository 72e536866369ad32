"""
Layout helpers for the Streamlit application (page setup, theme, sidebar filters).
"""

from __future__ import annotations

from typing import List, Optional

import pandas as pd
import streamlit as st

from src.config import AppConfig
from src.data.enrichment import CATEGORIES, CATEGORY_LABELS, available_days
from src.data.filters import DEFAULT_FILTERS, FilterCriteria, make_criteria
from src.data.models import ScheduleDocument
from src.data.preferences import theme_cookie_script, theme_from_cookies
from src.utils.formatting import format_day

LAST_FILTERS_KEY = "cs_last_filters"
THEME_KEY = "cs_theme"
THEME_SAVED_KEY = "cs_theme_saved"
FILTER_STATE_PREFIXES = ["cs_room", "cs_day", "cs_type_", "cs_query", LAST_FILTERS_KEY]

THEME_CSS = {
    "light": """
        .stApp { background-color: #ffffff; color: #1f2933; }
        .cs-card .cs-title { color: #1f2933; }
    """,
    "dark": """
        .stApp, [data-testid="stSidebar"], [data-testid="stHeader"] {
            background-color: #0e1117; color: #e6e6e6;
        }
        .stApp h1, .stApp h2, .stApp h3, .stApp h4, .stApp p, .stApp label { color: #e6e6e6; }
        .cs-card .cs-title { color: #f5f5f5; }
    """,
}

CARD_CSS = """
    .cs-badge { display: inline-block; padding: 0 0.5rem; margin-right: 0.35rem;
                border-radius: 0.75rem; font-size: 0.75rem; font-weight: 600; }
    .cs-badge-keynote { background: #d62728; color: #ffffff; }
    .cs-badge-workshop { background: #2ca02c; color: #ffffff; }
    .cs-badge-talk { background: #1f77b4; color: #ffffff; }
    .cs-room { background: #e0e0e0; color: #333333; }
    .cs-room-west { background: #ffe0b2; }
    .cs-room-east { background: #d1c4e9; }
    .cs-title { font-size: 1.05rem; font-weight: 700; margin-top: 0.35rem; }
    .cs-time { font-size: 0.85rem; opacity: 0.8; }
    .cs-keynote .cs-title { font-size: 1.2rem; }
    .cs-speakers { display: flex; flex-wrap: wrap; gap: 0.75rem; margin-bottom: 0.25rem; }
    .cs-speaker { display: inline-flex; align-items: center; gap: 0.35rem; font-size: 0.9rem; }
    .cs-avatar { width: 32px; height: 32px; border-radius: 50%; object-fit: cover; }
"""


def setup_page() -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title="Conference Schedule",
        layout="wide",
        page_icon=":calendar:",
    )


def inject_theme_css(theme: str) -> None:
    """Apply card styling plus the light/dark palette for the current run."""
    st.markdown(
        f"<style>{CARD_CSS}{THEME_CSS.get(theme, THEME_CSS['light'])}</style>",
        unsafe_allow_html=True,
    )


def theme_toggle(config: AppConfig) -> str:
    """Sidebar dark-mode switch backed by the browser's theme cookie."""
    if THEME_KEY not in st.session_state:
        saved = theme_from_cookies(st.context.cookies, config.default_theme)
        st.session_state[THEME_KEY] = saved
        st.session_state[THEME_SAVED_KEY] = saved
    theme = st.session_state[THEME_KEY]

    dark = st.sidebar.toggle("Dark mode", value=theme == "dark", key="cs_dark_mode")
    selected = "dark" if dark else "light"
    st.session_state[THEME_KEY] = selected
    if selected != st.session_state.get(THEME_SAVED_KEY):
        # cookies from the initial request are read-only; write from the browser
        st.html(theme_cookie_script(selected), unsafe_allow_javascript=True)
        st.session_state[THEME_SAVED_KEY] = selected
    return selected


def _clear_state_prefixes(prefixes: List[str]) -> None:
    for prefix in prefixes:
        for key in list(st.session_state.keys()):
            if key.startswith(prefix):
                del st.session_state[key]


def _seed_filter_state(criteria: FilterCriteria, room_options: List[Optional[str]], day_options: list) -> None:
    # widgets that were hidden lose their state; restore it from the last criteria
    st.session_state.setdefault("cs_room", criteria.room_id)
    st.session_state.setdefault("cs_day", criteria.day)
    st.session_state.setdefault("cs_query", criteria.query)
    for cat in CATEGORIES:
        st.session_state.setdefault(f"cs_type_{cat}", not criteria.categories or cat in criteria.categories)
    if st.session_state["cs_room"] not in room_options:
        st.session_state["cs_room"] = None
    if st.session_state["cs_day"] not in day_options:
        st.session_state["cs_day"] = None


def sidebar_filters_ui(document: ScheduleDocument, sessions: pd.DataFrame) -> FilterCriteria:
    """
    Render the sidebar filter controls and return the selected criteria.

    While the panel is hidden the last applied criteria stay in force.
    """
    st.sidebar.header("Filters")
    last_criteria: FilterCriteria = st.session_state.get(LAST_FILTERS_KEY, DEFAULT_FILTERS)

    show_filters = st.sidebar.toggle("Show filters", value=True, key="cs_show_filters")
    if not show_filters:
        if last_criteria.is_active:
            st.sidebar.caption("Filters hidden; the last selection still applies.")
        return last_criteria

    room_names = {room.id: room.name for room in document.rooms}
    room_options: List[Optional[str]] = [None] + list(room_names)
    day_options: list = [None] + available_days(sessions)
    _seed_filter_state(last_criteria, room_options, day_options)

    room_id = st.sidebar.selectbox(
        "Room",
        options=room_options,
        format_func=lambda v: "All rooms" if v is None else room_names.get(v, v),
        key="cs_room",
    )
    day = st.sidebar.selectbox(
        "Day",
        options=day_options,
        format_func=lambda v: "All days" if v is None else format_day(v),
        key="cs_day",
    )

    st.sidebar.markdown("**Session Type**")
    selected_types = [
        cat
        for cat in CATEGORIES
        if st.sidebar.checkbox(CATEGORY_LABELS[cat], key=f"cs_type_{cat}")
    ]
    if not selected_types:
        st.sidebar.caption("No type selected: all session types are shown.")
    if len(selected_types) == len(CATEGORIES):
        selected_types = []

    query = st.sidebar.text_input(
        "Search",
        key="cs_query",
        placeholder="Title, description or speaker",
    )

    if st.sidebar.button("Reset filters", key="cs_reset_filters", type="primary"):
        _clear_state_prefixes(FILTER_STATE_PREFIXES)
        st.rerun()

    criteria = make_criteria(room_id=room_id, day=day, categories=selected_types, query=query)
    st.session_state[LAST_FILTERS_KEY] = criteria
    return criteria
