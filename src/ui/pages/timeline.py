from __future__ import annotations

import pandas as pd
import streamlit as st

from src.data.enrichment import available_days
from src.ui.components.charts import render_plotly, timeline_chart, timeline_frame
from src.ui.pages.context import PageContext
from src.utils.formatting import format_day


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader("Timeline")
    if df.empty:
        st.caption("No sessions to plot.")
        return

    room_order = [room.name for room in context.document.rooms]
    for day in available_days(df):
        day_rows = df[df["day"] == day]
        fig = timeline_chart(
            timeline_frame(day_rows, room_order=room_order),
            title=format_day(day),
            theme=context.theme,
        )
        render_plotly(fig)
