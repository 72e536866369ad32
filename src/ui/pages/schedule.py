from __future__ import annotations

import pandas as pd
import streamlit as st

from src.data.grouping import build_schedule_tree
from src.ui.components.session_cards import render_schedule
from src.ui.pages.context import PageContext
from src.utils.formatting import format_number

EXPORT_COLUMNS = ["title", "day", "starts_at", "ends_at", "room_name", "category", "speaker_names"]


def _export_csv(df: pd.DataFrame) -> bytes:
    export = df[EXPORT_COLUMNS].copy()
    export["speaker_names"] = export["speaker_names"].map(lambda names: ", ".join(names or ()))
    return export.to_csv(index=False).encode("utf-8")


def render(df: pd.DataFrame, context: PageContext) -> None:
    tree = build_schedule_tree(df)
    st.caption(f"Showing {format_number(len(df), 0)} of {format_number(len(context.sessions), 0)} sessions.")

    # an empty tree leaves the schedule area empty
    render_schedule(tree)

    if not df.empty:
        st.download_button(
            "Download CSV",
            data=_export_csv(df),
            file_name="schedule_filtered.csv",
            mime="text/csv",
        )
