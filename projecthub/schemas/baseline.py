from datetime import date
from enum import Enum
from pydantic import BaseModel
from typing import Optional


class DeviationStatus(str, Enum):
    NOT_COMPLETE = "not_complete"
    ON_TIME = "on_time"  # finished on or before the planned date
    LATE = "late"


class BaselineComparison(BaseModel):
    baseline_id: str
    snapshot_name: str
    snapshot_at: date
    milestone_id: str
    milestone_name: Optional[str] = None
    current_progress: int = 0
    planned_end: date
    actual_end: Optional[date] = None
    deviation_days: Optional[int] = None
    status: DeviationStatus
