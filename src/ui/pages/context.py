from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from src.data.filters import FilterCriteria
from src.data.models import ScheduleDocument


@dataclass
class PageContext:
    document: ScheduleDocument
    sessions: pd.DataFrame
    criteria: FilterCriteria
    theme: str = "light"
