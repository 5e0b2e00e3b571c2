"""
Schedule Layout Engine

Lays out a project's milestones and their tasks on one shared horizontal
timeline (a Gantt chart). All positions are percentages of the timeline width.

The window always covers whole calendar months: from the first day of the
month holding the earliest milestone start to the last day of the month holding
the latest milestone due date (the project's own dates when it has no
milestones). Tasks are placed inside that window but never widen it.

Items reaching outside the window are clamped, never dropped, and inverted
ranges (due before start) collapse to the minimum bar width instead of going
negative.
"""
import logging
from datetime import date
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from projecthub.models import Milestone, Project, Task
from projecthub.schemas.schedule import BarKind, MonthBucket, ScheduleBar, ScheduleLayout
from projecthub.services.dates import (
    days_between, days_in_month, first_day_of_month, iter_months, last_day_of_month,
)
from projecthub.services.progress import milestone_fill_percent, task_fill_percent
from projecthub.services.store import EntityStore

logger = logging.getLogger(__name__)

# Narrowest bar drawn, in percent, so single-day and malformed ranges stay clickable
MIN_BAR_WIDTH = 0.5


def schedule_window(project: Project, milestones: Sequence[Milestone]) -> Tuple[date, date]:
    """Return (window_start, window_end) snapped to whole months."""
    if milestones:
        start = first_day_of_month(min(m.start_date for m in milestones))
        end = last_day_of_month(max(m.due_date for m in milestones))
    else:
        start = first_day_of_month(project.start_date)
        end = last_day_of_month(project.end_date)

    if end < start:
        logger.warning(
            "Schedule window for project %s ends before it starts (%s < %s); "
            "using a single month",
            project.id, end, start, extra={"project_id": project.id},
        )
        end = last_day_of_month(start)
    return start, end


def month_buckets(window_start: date, window_end: date, total_days: int) -> List[MonthBucket]:
    """
    One bucket per calendar month in the window.

    Each bucket is sized by the month's full length, so the edge buckets are
    not clipped to the window.
    """
    buckets = []
    for year, month in iter_months(window_start, window_end):
        days = days_in_month(year, month)
        buckets.append(MonthBucket(
            year=year,
            month=month,
            label=f"{year}-{month:02d}",
            days=days,
            width_percent=days / total_days * 100,
        ))
    return buckets


def bar_geometry(
    start: date,
    due: date,
    window_start: date,
    window_end: date,
    total_days: int,
    min_width: float = MIN_BAR_WIDTH,
) -> Tuple[float, float]:
    """
    Convert a date range into (left %, width %) inside the window.

    The range is clamped to the window, width is floored at min_width and the
    bar is shifted left if needed so that left + width never exceeds 100.
    """
    clamped_start = max(start, window_start)
    clamped_end = min(due, window_end)

    left = max(0.0, days_between(window_start, clamped_start) / total_days * 100)
    width = max(min_width, (days_between(clamped_start, clamped_end) + 1) / total_days * 100)
    if left + width > 100:
        left = max(0.0, 100 - width)
    return left, width


def today_offset(today: date, window_start: date, window_end: date, total_days: int) -> Optional[float]:
    if not window_start <= today <= window_end:
        return None
    return days_between(window_start, today) / total_days * 100


def compute_layout(
    project: Project,
    milestones: Sequence[Milestone],
    tasks_by_milestone: Mapping[str, Sequence[Task]],
    today: date,
    min_bar_width: float = MIN_BAR_WIDTH,
) -> ScheduleLayout:
    """
    Lay out milestones (in the given order), each followed by its tasks.

    Args:
        project: The project being charted
        milestones: The project's milestones
        tasks_by_milestone: Tasks keyed by milestone id; missing keys mean no tasks
        today: Date for the "today" marker
        min_bar_width: Minimum bar width in percent

    Returns:
        ScheduleLayout: Window, month headers, bars and optional today marker
    """
    window_start, window_end = schedule_window(project, milestones)
    total_days = max(1, days_between(window_start, window_end) + 1)

    bars = []
    for milestone in milestones:
        if milestone.due_date < milestone.start_date:
            logger.warning(
                "Milestone %s is due before it starts", milestone.id,
                extra={"project_id": project.id, "milestone_id": milestone.id},
            )
        left, width = bar_geometry(
            milestone.start_date, milestone.due_date,
            window_start, window_end, total_days, min_bar_width,
        )
        bars.append(ScheduleBar(
            item_id=milestone.id,
            kind=BarKind.MILESTONE,
            label=milestone.name,
            start_date=milestone.start_date,
            due_date=milestone.due_date,
            left_percent=left,
            width_percent=width,
            fill_percent=milestone_fill_percent(milestone),
        ))

        for task in tasks_by_milestone.get(milestone.id, ()):
            left, width = bar_geometry(
                task.start_date, task.due_date,
                window_start, window_end, total_days, min_bar_width,
            )
            bars.append(ScheduleBar(
                item_id=task.id,
                kind=BarKind.TASK,
                parent_id=milestone.id,
                label=task.title,
                start_date=task.start_date,
                due_date=task.due_date,
                left_percent=left,
                width_percent=width,
                fill_percent=task_fill_percent(task),
            ))

    return ScheduleLayout(
        project_id=project.id,
        window_start=window_start,
        window_end=window_end,
        total_days=total_days,
        month_buckets=month_buckets(window_start, window_end, total_days),
        bars=bars,
        today_offset_percent=today_offset(today, window_start, window_end, total_days),
    )


def schedule_layout(
    store: EntityStore,
    project: Project,
    today: date,
    min_bar_width: float = MIN_BAR_WIDTH,
) -> ScheduleLayout:
    """Load the project's milestones and tasks from the store and lay them out."""
    milestones = store.milestones_of(project.id)
    tasks: Dict[str, List[Task]] = {
        m.id: store.tasks_by_milestone(m.id) for m in milestones
    }
    return compute_layout(project, milestones, tasks, today, min_bar_width)
