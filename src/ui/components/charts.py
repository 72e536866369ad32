"""
Plotly chart factory functions with consistent styling for the schedule page.
"""

from __future__ import annotations

from typing import Dict, List, Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from src.data.enrichment import CATEGORIES, CATEGORY_LABELS, KEYNOTE, TALK, WORKSHOP
from src.data.grouping import UNTITLED
from src.utils.formatting import format_time_range

TEMPLATES = {
    "light": "plotly_white",
    "dark": "plotly_dark",
}
CATEGORY_COLORS: Dict[str, str] = {
    CATEGORY_LABELS[KEYNOTE]: "#d62728",
    CATEGORY_LABELS[TALK]: "#1f77b4",
    CATEGORY_LABELS[WORKSHOP]: "#2ca02c",
}
UNASSIGNED_ROOM = "Unassigned"
TIMELINE_COLUMNS: List[str] = ["Room", "Start", "End", "Title", "Category", "Time"]


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    theme: str = "light",
    legend_title: Optional[str] = None,
) -> go.Figure:
    fig.update_layout(
        template=TEMPLATES.get(theme, TEMPLATES["light"]),
        title=title,
        legend_title=legend_title,
        margin=dict(l=40, r=20, t=60, b=40),
    )
    fig.update_xaxes(showgrid=True, tickformat="%H:%M")
    fig.update_yaxes(showgrid=False)
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def timeline_frame(sessions: pd.DataFrame, room_order: Optional[List[str]] = None) -> pd.DataFrame:
    """
    Reshape a sessions frame into the columns px.timeline expects.

    Times are plotted as published wall-clock times; rows without a resolvable
    room go to the "Unassigned" lane.
    """
    if sessions.empty:
        return pd.DataFrame(columns=TIMELINE_COLUMNS)

    rooms = sessions["room_name"].map(lambda v: v if isinstance(v, str) else UNASSIGNED_ROOM)
    starts = sessions["starts_at"].map(lambda v: v.replace(tzinfo=None))
    ends = sessions["ends_at"].map(lambda v: v.replace(tzinfo=None))
    plot_df = pd.DataFrame(
        {
            "Room": rooms,
            "Start": pd.to_datetime(starts),
            "End": pd.to_datetime(ends),
            "Title": sessions["title"].map(lambda v: v if isinstance(v, str) else UNTITLED),
            "Category": sessions["category"].map(CATEGORY_LABELS),
            "Time": [
                format_time_range(start, end)
                for start, end in zip(sessions["starts_at"], sessions["ends_at"])
            ],
        },
        columns=TIMELINE_COLUMNS,
    )
    if room_order:
        order = {name: idx for idx, name in enumerate(room_order + [UNASSIGNED_ROOM])}
        plot_df = plot_df.sort_values("Room", key=lambda s: s.map(lambda v: order.get(v, len(order))), kind="mergesort")
    return plot_df.reset_index(drop=True)


def timeline_chart(
    plot_df: pd.DataFrame,
    title: Optional[str] = None,
    theme: str = "light",
) -> go.Figure:
    fig = px.timeline(
        plot_df,
        x_start="Start",
        x_end="End",
        y="Room",
        color="Category",
        color_discrete_map=CATEGORY_COLORS,
        category_orders={"Category": [CATEGORY_LABELS[c] for c in CATEGORIES]},
        hover_name="Title",
        hover_data={"Time": True, "Start": False, "End": False, "Room": True, "Category": False},
    )
    fig.update_yaxes(autorange="reversed", title=None)
    fig = _configure_layout(fig, title, theme=theme, legend_title="Type")
    return fig
