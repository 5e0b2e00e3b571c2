from datetime import date
from enum import Enum
from pydantic import BaseModel
from typing import List, Optional


class BarKind(str, Enum):
    MILESTONE = "milestone"
    TASK = "task"


class MonthBucket(BaseModel):
    """One calendar-month column of the timeline header."""
    year: int
    month: int  # 1..12
    label: str  # "YYYY-MM"
    days: int  # full length of the month
    width_percent: float


class ScheduleBar(BaseModel):
    """Position of one milestone or task on the shared timeline, in percent."""
    item_id: str
    kind: BarKind
    parent_id: Optional[str] = None  # owning milestone for task bars
    label: str
    start_date: date
    due_date: date
    left_percent: float
    width_percent: float
    fill_percent: int


class ScheduleLayout(BaseModel):
    project_id: str
    window_start: date
    window_end: date
    total_days: int
    month_buckets: List[MonthBucket]
    bars: List[ScheduleBar]
    today_offset_percent: Optional[float] = None  # None when today is outside the window
