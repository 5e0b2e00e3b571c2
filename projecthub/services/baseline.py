"""
Baseline Deviation Calculator

Compares a milestone's planned completion date with its actual one. Positive
deviation means late; zero and negative are both reported as on time.
"""
from typing import List, Optional

from projecthub.schemas.baseline import BaselineComparison, DeviationStatus
from projecthub.services.dates import DateLike, days_between, parse_date
from projecthub.services.progress import milestone_fill_percent
from projecthub.services.store import EntityStore


def deviation_days(planned_end: DateLike, actual_end: Optional[DateLike] = None) -> Optional[int]:
    """
    Days from the planned end to the actual end, or None when not finished yet.

    >>> deviation_days("2026-02-15", "2026-02-20")
    5
    >>> deviation_days("2026-02-15") is None
    True
    """
    if actual_end is None:
        return None
    return days_between(parse_date(planned_end), parse_date(actual_end))


def classify_deviation(deviation: Optional[int]) -> DeviationStatus:
    if deviation is None:
        return DeviationStatus.NOT_COMPLETE
    if deviation <= 0:
        return DeviationStatus.ON_TIME
    return DeviationStatus.LATE


def baseline_comparison(store: EntityStore, project_id: str) -> List[BaselineComparison]:
    """One comparison row per recorded baseline of the project."""
    rows = []
    for baseline in store.baselines_of(project_id):
        milestone = store.find_milestone(baseline.milestone_id)
        deviation = deviation_days(baseline.planned_end, baseline.actual_end)
        rows.append(BaselineComparison(
            baseline_id=baseline.id,
            snapshot_name=baseline.snapshot_name,
            snapshot_at=baseline.snapshot_at,
            milestone_id=baseline.milestone_id,
            milestone_name=milestone.name if milestone else None,
            current_progress=milestone_fill_percent(milestone) if milestone else 0,
            planned_end=baseline.planned_end,
            actual_end=baseline.actual_end,
            deviation_days=deviation,
            status=classify_deviation(deviation),
        ))
    return rows
