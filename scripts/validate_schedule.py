"""Quick validation script for the schedule pipeline.

Run with `python scripts/validate_schedule.py` to fetch the configured
schedule and check that it parses, classifies and groups cleanly, or pass a
path to a saved Sessionize JSON export to validate it offline.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from src.config import configure_logging, load_config
from src.data.enrichment import CATEGORIES, build_sessions_frame
from src.data.grouping import build_schedule_tree
from src.data.loader import ScheduleLoadError, fetch_schedule, parse_schedule


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("schedule_file", nargs="?", type=Path, help="Saved schedule JSON (optional)")
    args = parser.parse_args()

    config = load_config()
    configure_logging(config.log_level)

    try:
        if args.schedule_file:
            document = parse_schedule(json.loads(args.schedule_file.read_text(encoding="utf-8")))
        else:
            document = fetch_schedule(config.api_url, timeout=config.request_timeout)
    except ScheduleLoadError as exc:
        raise SystemExit(f"Schedule validation failed: {exc}")

    sessions = build_sessions_frame(document)
    tree = build_schedule_tree(sessions)

    grouped = sum(section.session_count for section in tree)
    if grouped != len(sessions):
        raise SystemExit(f"Grouping dropped sessions: {grouped} grouped, {len(sessions)} loaded")

    unresolved_rooms = int((sessions["room_id"].notna() & sessions["room_name"].isna()).sum())
    counts = sessions["category"].value_counts().to_dict()

    print("Schedule validation passed.")
    print(f"Rooms: {len(document.rooms)}  Speakers: {len(document.speakers)}  Sessions: {len(sessions)}")
    print("Categories: " + ", ".join(f"{cat}={counts.get(cat, 0)}" for cat in CATEGORIES))
    print(f"Days: {len(tree)}  Sessions with unknown room: {unresolved_rooms}")


if __name__ == "__main__":
    sys.exit(main())
