import src.bootstrap_env  # must be first to set env/secrets
import logging

import streamlit as st

from src.config import TABS, configure_logging, load_config
from src.data.enrichment import CATEGORY_LABELS, build_sessions_frame
from src.data.filters import FilterCriteria, apply_filters, serialize_filters
from src.data.loader import ScheduleLoadError, load_schedule
from src.data.models import ScheduleDocument
from src.ui.layout import inject_theme_css, setup_page, sidebar_filters_ui, theme_toggle
from src.ui.pages import schedule, timeline
from src.ui.pages.context import PageContext
from src.utils.formatting import format_day

_logger = logging.getLogger(__name__)

DOCUMENT_KEY = "cs_document"
LOAD_ERROR_KEY = "cs_load_error"
LOAD_ERROR_MESSAGE = "Failed to load schedule. Please try again later."

PAGE_RENDERERS = {
    "schedule": schedule.render,
    "timeline": timeline.render,
}


def _active_filter_summary(criteria: FilterCriteria, document: ScheduleDocument) -> None:
    badges = []
    if criteria.room_id is not None:
        room = document.room(criteria.room_id)
        badges.append(f"Room: {room.name if room else criteria.room_id}")
    if criteria.day is not None:
        badges.append(f"Day: {format_day(criteria.day)}")
    if criteria.categories:
        badges.append("Types: " + ", ".join(CATEGORY_LABELS[c] for c in sorted(criteria.categories)))
    if criteria.normalized_query:
        badges.append(f"Search: “{criteria.query.strip()}”")

    summary_text = "Active Filters: " + " | ".join(badges) if badges else "Active Filters: All sessions"
    st.markdown(f"**{summary_text}**")


def _load_document(config) -> ScheduleDocument:
    # one attempt per browser session; reruns reuse the snapshot or the failure
    if LOAD_ERROR_KEY in st.session_state:
        raise ScheduleLoadError(st.session_state[LOAD_ERROR_KEY])
    if DOCUMENT_KEY not in st.session_state:
        try:
            with st.spinner("Loading schedule..."):
                st.session_state[DOCUMENT_KEY] = load_schedule(config.api_url, config.request_timeout)
        except ScheduleLoadError as exc:
            _logger.exception("Error fetching schedule")
            st.session_state[LOAD_ERROR_KEY] = str(exc)
            raise
    return st.session_state[DOCUMENT_KEY]


def main() -> None:
    config = load_config()
    configure_logging(config.log_level)
    setup_page()

    theme = theme_toggle(config)
    inject_theme_css(theme)
    st.title("Conference Schedule")

    try:
        document = _load_document(config)
    except ScheduleLoadError:
        st.error(LOAD_ERROR_MESSAGE)
        return

    sessions = build_sessions_frame(document)
    criteria = sidebar_filters_ui(document, sessions)
    filtered = apply_filters(sessions, criteria)
    st.session_state["cs_active_filters"] = serialize_filters(criteria)

    _active_filter_summary(criteria, document)

    context = PageContext(
        document=document,
        sessions=sessions,
        criteria=criteria,
        theme=theme,
    )

    tab_labels = [tab.label for tab in TABS]
    streamlit_tabs = st.tabs(tab_labels)

    for streamlit_tab, tab_config in zip(streamlit_tabs, TABS):
        renderer = PAGE_RENDERERS.get(tab_config.key)
        if renderer is None:
            continue
        with streamlit_tab:
            renderer(filtered, context)


if __name__ == "__main__":
    main()
