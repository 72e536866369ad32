"""
Streamlit rendering of the schedule tree: day headers, time slots and
session cards.
"""

from __future__ import annotations

from html import escape
from typing import List, Sequence

import streamlit as st

from src.data.enrichment import CATEGORY_LABELS
from src.data.grouping import DaySection, SessionCard, TimeSlot

MAX_TALK_COLUMNS = 3


def card_classes(card: SessionCard) -> List[str]:
    classes = ["cs-card", f"cs-{card.category}"]
    if card.room_side:
        classes.append(f"cs-room-{card.room_side}")
    return classes


def card_header_html(card: SessionCard) -> str:
    badges = [
        f'<span class="cs-badge cs-badge-{card.category}">'
        f"{escape(CATEGORY_LABELS.get(card.category, card.category))}</span>"
    ]
    if card.room_name:
        side_class = f" cs-room-{card.room_side}" if card.room_side else ""
        badges.append(
            f'<span class="cs-badge cs-room{side_class}">{escape(card.room_name)}</span>'
        )
    return (
        f'<div class="{" ".join(card_classes(card))}">'
        f'{"".join(badges)}'
        f'<div class="cs-title">{escape(card.title)}</div>'
        f'<div class="cs-time">{escape(card.time_range)}</div>'
        "</div>"
    )


def speakers_html(card: SessionCard) -> str:
    if not card.speakers:
        return ""
    parts = []
    for speaker in card.speakers:
        avatar = ""
        if speaker.picture:
            avatar = f'<img class="cs-avatar" src="{escape(speaker.picture, quote=True)}" alt="{escape(speaker.name, quote=True)}">'
        parts.append(f'<span class="cs-speaker">{avatar}{escape(speaker.name)}</span>')
    return f'<div class="cs-speakers">{"".join(parts)}</div>'


def speaker_taglines(card: SessionCard) -> List[str]:
    # plain text; API strings never pass through markdown
    return [f"{speaker.name}: {speaker.tag_line}" for speaker in card.speakers if speaker.tag_line]


def render_session_card(card: SessionCard) -> None:
    with st.container(border=True):
        st.markdown(card_header_html(card), unsafe_allow_html=True)
        speakers_block = speakers_html(card)
        if speakers_block:
            st.markdown(speakers_block, unsafe_allow_html=True)
        with st.expander("Details", expanded=False):
            if card.description:
                st.text(card.description)
            else:
                st.caption("No description available.")
            for line in speaker_taglines(card):
                st.text(line)


def _render_talk_grid(cards: Sequence[SessionCard]) -> None:
    columns = max(min(len(cards), MAX_TALK_COLUMNS), 1)
    for idx in range(0, len(cards), columns):
        row_cards = cards[idx: idx + columns]
        cols = st.columns(columns)
        for col, card in zip(cols, row_cards):
            with col:
                render_session_card(card)


def render_time_slot(slot: TimeSlot) -> None:
    st.markdown(f"#### {slot.label}")
    for card in slot.keynotes:
        render_session_card(card)
    for card in slot.workshops:
        render_session_card(card)
    if len(slot.talks) > 1:
        _render_talk_grid(slot.talks)
    else:
        for card in slot.talks:
            render_session_card(card)


def render_schedule(tree: Sequence[DaySection]) -> None:
    """
    Render the day sections in order. An empty tree leaves the schedule area
    empty; the caller decides what caption to show.
    """
    for section in tree:
        st.header(section.label)
        for slot in section.slots:
            render_time_slot(slot)
