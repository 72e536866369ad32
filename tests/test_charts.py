import plotly.graph_objects as go

from src.data.grouping import UNTITLED
from src.ui.components.charts import TIMELINE_COLUMNS, UNASSIGNED_ROOM, timeline_chart, timeline_frame


def test_timeline_frame_columns_and_unassigned_room(sessions_frame):
    plot_df = timeline_frame(sessions_frame)

    assert list(plot_df.columns) == TIMELINE_COLUMNS
    assert len(plot_df) == len(sessions_frame)
    closing = plot_df[plot_df["Title"] == "Closing"].iloc[0]
    assert closing["Room"] == UNASSIGNED_ROOM
    assert closing["Category"] == "Keynote"
    assert closing["Time"] == "16:00 – 16:30"


def test_timeline_frame_follows_room_order(sessions_frame):
    plot_df = timeline_frame(sessions_frame, room_order=["Library", "East Wing", "Hall West"])
    rooms = list(dict.fromkeys(plot_df["Room"]))
    assert rooms == ["Library", "East Wing", "Hall West", UNASSIGNED_ROOM]


def test_timeline_frame_empty(sessions_frame):
    plot_df = timeline_frame(sessions_frame.iloc[0:0])
    assert plot_df.empty
    assert list(plot_df.columns) == TIMELINE_COLUMNS


def test_timeline_chart_builds_figure(sessions_frame):
    fig = timeline_chart(timeline_frame(sessions_frame), title="All days", theme="dark")
    assert isinstance(fig, go.Figure)
    assert fig.layout.title.text == "All days"


def test_timeline_frame_labels_untitled_sessions(sessions_frame):
    frame = sessions_frame.copy()
    frame.loc[frame["session_id"] == "6", "title"] = None
    plot_df = timeline_frame(frame)
    assert UNTITLED in plot_df["Title"].tolist()
