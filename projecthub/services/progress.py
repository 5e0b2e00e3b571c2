"""
Progress Aggregator

Rollup percentages derived from child entities. Every function returns a finite
integer in [0, 100] (budget may exceed 100 when overspent); degenerate inputs
such as a project without tasks or a zero budget give 0 instead of dividing by
zero.
"""
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from projecthub.models import Milestone, MilestoneStatus, Project, Task, TaskStatus
from projecthub.schemas.project import MilestoneRollup, TaskStats
from projecthub.services.store import EntityStore

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(Decimal(repr(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def completion_percent(done: int, total: int) -> int:
    if total <= 0:
        return 0
    return round_half_up(100 * done / total)


def project_progress(store: EntityStore, project_id: str) -> int:
    """
    Percentage of a project's tasks whose status is done.

    Returns 0 for a project with no tasks (or an unknown project id).
    """
    tasks = store.tasks_by_project(project_id)
    done = sum(1 for t in tasks if t.status == TaskStatus.DONE)
    return completion_percent(done, len(tasks))


def budget_percent(project: Project) -> int:
    """Share of the budget already used; 0 when no budget is set."""
    if not project.budget or project.budget <= 0:
        logger.debug("Project %s has no budget set", project.id, extra={"project_id": project.id})
        return 0
    return round_half_up(100 * project.budget_used / project.budget)


def task_fill_percent(task: Task) -> int:
    """Logged hours against the estimate, capped at 100; 0 without an estimate."""
    if not task.estimated_hours or task.estimated_hours <= 0:
        return 0
    return min(100, round_half_up(100 * task.actual_hours / task.estimated_hours))


def milestone_fill_percent(milestone: Milestone) -> int:
    return max(0, min(100, milestone.progress or 0))


def task_stats(tasks: Iterable[Task]) -> TaskStats:
    stats = TaskStats()
    for task in tasks:
        stats.total += 1
        if task.status == TaskStatus.DONE:
            stats.done += 1
        elif task.status == TaskStatus.IN_PROGRESS:
            stats.in_progress += 1
        elif task.status == TaskStatus.BLOCKED:
            stats.blocked += 1
    return stats


def milestone_rollup(milestones: Iterable[Milestone]) -> MilestoneRollup:
    milestones = list(milestones)
    completed = sum(1 for m in milestones if m.status == MilestoneStatus.COMPLETED)
    return MilestoneRollup(
        total=len(milestones),
        completed=completed,
        percent=completion_percent(completed, len(milestones)),
    )
