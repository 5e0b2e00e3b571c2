"""
Dashboard, report and personal work-list rollups.

All functions take "today" and the current user explicitly; none of them read
the clock or any session state on their own.
"""
from collections import Counter
from datetime import date, timedelta
from typing import Optional

from projecthub.models import (
    IMPACT_ORDER, DelayRequestStatus, HealthStatus, MilestoneStatus, ProjectStatus,
    RiskStatus, TaskPriority, TaskStatus, User,
)
from projecthub.schemas.dashboard import (
    DashboardOverview, DelayRequestList, DistributionEntry, KpiSummary, MyTasks,
    ReportsOverview,
)
from projecthub.services.progress import completion_percent
from projecthub.services.projects import project_summary
from projecthub.services.store import EntityStore

PRIORITY_ORDER = {
    TaskPriority.HIGH: 0,
    TaskPriority.MEDIUM: 1,
    TaskPriority.LOW: 2,
}


def dashboard_overview(store: EntityStore, today: date, upcoming_days: int = 30) -> DashboardOverview:
    """
    Landing page data.

    Upcoming milestones are those not yet completed and due between today and
    today + upcoming_days inclusive, earliest first.
    """
    projects = store.list_projects()
    kpis = KpiSummary(
        total_projects=len(projects),
        in_progress=sum(1 for p in projects if p.status == ProjectStatus.IN_PROGRESS),
        completed=sum(1 for p in projects if p.status == ProjectStatus.COMPLETED),
        red_health=sum(1 for p in projects if p.health_status == HealthStatus.RED),
    )

    horizon = today + timedelta(days=upcoming_days)
    upcoming = sorted(
        (
            m for m in store.list_milestones()
            if m.status != MilestoneStatus.COMPLETED and today <= m.due_date <= horizon
        ),
        key=lambda m: m.due_date,
    )

    open_risks = sorted(
        (r for r in store.list_risks() if r.status in (RiskStatus.OPEN, RiskStatus.MITIGATING)),
        key=lambda r: IMPACT_ORDER[r.impact],
    )

    pending = [
        d for d in store.list_delay_requests() if d.status == DelayRequestStatus.PENDING
    ]

    warning = [
        project_summary(store, p) for p in projects
        if p.status == ProjectStatus.IN_PROGRESS
        and p.health_status in (HealthStatus.YELLOW, HealthStatus.RED)
    ]

    return DashboardOverview(
        kpis=kpis,
        upcoming_milestones=upcoming,
        open_risks=open_risks,
        pending_delay_requests=pending,
        warning_projects=warning,
    )


def reports_overview(store: EntityStore, top_risks_limit: int = 5) -> ReportsOverview:
    """Portfolio distribution by status and health plus the most likely open risks."""
    projects = store.list_projects()
    total = len(projects)

    status_counts = Counter(p.status for p in projects)
    health_counts = Counter(p.health_status for p in projects)

    top_risks = sorted(
        (r for r in store.list_risks() if r.status == RiskStatus.OPEN),
        key=lambda r: r.probability,
        reverse=True,
    )[:top_risks_limit]

    return ReportsOverview(
        total_projects=total,
        status_distribution=[
            DistributionEntry(
                key=status.value,
                count=status_counts.get(status, 0),
                percent=completion_percent(status_counts.get(status, 0), total),
            )
            for status in ProjectStatus
        ],
        health_distribution=[
            DistributionEntry(
                key=health.value,
                count=health_counts.get(health, 0),
                percent=completion_percent(health_counts.get(health, 0), total),
            )
            for health in HealthStatus
        ],
        top_risks=top_risks,
    )


def my_tasks(store: EntityStore, user: User, status: Optional[TaskStatus] = None) -> MyTasks:
    """
    The user's assigned tasks, highest priority first and then by due date.

    counts always covers every assigned task, regardless of the status filter.
    """
    tasks = store.tasks_assigned_to(user.id)
    counts = Counter(t.status for t in tasks)

    selected = [t for t in tasks if status is None or t.status == status]
    selected.sort(key=lambda t: (PRIORITY_ORDER[t.priority], t.due_date))

    return MyTasks(
        tasks=selected,
        counts={s.value: counts.get(s, 0) for s in TaskStatus},
    )


def visible_delay_requests(
    store: EntityStore, user: User, status: Optional[DelayRequestStatus] = None
) -> DelayRequestList:
    """
    PMs and Executives see every delay request, Members only their own.
    """
    requester_id = None if user.is_privileged else user.id
    requests = store.list_delay_requests(requester_id=requester_id)
    counts = Counter(r.status for r in requests)
    return DelayRequestList(
        requests=[r for r in requests if status is None or r.status == status],
        counts={s.value: counts.get(s, 0) for s in DelayRequestStatus},
    )
