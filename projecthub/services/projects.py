"""
Project page assembly: list summaries, the detail header, team, activity and
task dependencies.
"""
from collections import Counter, OrderedDict
from typing import List, Optional, Sequence

from projecthub.models import Project, ProjectStatus, Task
from projecthub.schemas.project import (
    ActivityDay, ActivityEntry, DependencyType, OwnerRead, ProjectDetail, ProjectSummary,
    TaskDependency, TeamMember,
)
from projecthub.services.progress import (
    budget_percent, milestone_rollup, project_progress, task_stats,
)
from projecthub.services.store import EntityStore


def project_summary(store: EntityStore, project: Project) -> ProjectSummary:
    return ProjectSummary(
        id=project.id,
        name=project.name,
        code=project.code,
        type=project.type,
        level=project.level,
        status=project.status,
        health_status=project.health_status,
        start_date=project.start_date,
        end_date=project.end_date,
        owner_id=project.owner_id,
        progress=project_progress(store, project.id),
        budget_percent=budget_percent(project),
    )


def list_project_summaries(
    store: EntityStore, status: Optional[ProjectStatus] = None, search: Optional[str] = None
) -> List[ProjectSummary]:
    return [project_summary(store, p) for p in store.list_projects(status=status, search=search)]


def project_detail(store: EntityStore, project: Project) -> ProjectDetail:
    summary = project_summary(store, project)
    owner = store.find_user(project.owner_id) if project.owner_id else None
    return ProjectDetail(
        **summary.model_dump(),
        description=project.description,
        budget=project.budget,
        budget_used=project.budget_used,
        smart_goals=project.smart_goals or {},
        owner=OwnerRead(
            id=owner.id, name=owner.name, role=owner.role, department=owner.department,
        ) if owner else None,
        task_stats=task_stats(store.tasks_by_project(project.id)),
        milestones=milestone_rollup(store.milestones_of(project.id)),
    )


def project_team(store: EntityStore, project: Project) -> List[TeamMember]:
    """
    The owner first, then every task assignee in order of first appearance,
    each with the number of project tasks assigned to them.
    """
    tasks = store.tasks_by_project(project.id)
    counts = Counter(t.assignee_id for t in tasks if t.assignee_id)

    member_ids = []
    if project.owner_id:
        member_ids.append(project.owner_id)
    for task in tasks:
        if task.assignee_id and task.assignee_id not in member_ids:
            member_ids.append(task.assignee_id)

    team = []
    for user_id in member_ids:
        user = store.find_user(user_id)
        team.append(TeamMember(
            user_id=user_id,
            name=user.name if user else None,
            role=user.role if user else None,
            department=user.department if user else None,
            is_owner=user_id == project.owner_id,
            task_count=counts.get(user_id, 0),
        ))
    return team


def project_activity(store: EntityStore, project_id: str) -> List[ActivityDay]:
    """Task logs of the project, newest first, grouped by calendar day."""
    tasks = {t.id: t for t in store.tasks_by_project(project_id)}
    logs = sorted(store.task_logs_for(tasks), key=lambda log: log.timestamp, reverse=True)

    days = OrderedDict()
    for log in logs:
        user = store.find_user(log.user_id)
        entry = ActivityEntry(
            id=log.id,
            task_id=log.task_id,
            task_title=tasks[log.task_id].title,
            user_id=log.user_id,
            user_name=user.name if user else None,
            action=log.action,
            detail=log.detail,
            timestamp=log.timestamp,
        )
        days.setdefault(log.timestamp.date(), []).append(entry)
    return [ActivityDay(day=day, entries=entries) for day, entries in days.items()]


# Edge types linking the project's first tasks pairwise, in order
DEPENDENCY_CHAIN = (
    DependencyType.FS,
    DependencyType.FS,
    DependencyType.SS,
    DependencyType.FF,
    DependencyType.SF,
)

DEPENDENCY_DESCRIPTIONS = {
    DependencyType.FS: "Downstream starts after upstream finishes",
    DependencyType.SS: "Downstream starts after upstream starts",
    DependencyType.FF: "Downstream finishes after upstream finishes",
    DependencyType.SF: "Downstream finishes after upstream starts",
}


def dependency_chain(project_id: str, tasks: Sequence[Task]) -> List[TaskDependency]:
    """
    Link consecutive tasks with the types in DEPENDENCY_CHAIN.

    At most len(DEPENDENCY_CHAIN) + 1 tasks take part; fewer than two tasks give
    no edges.
    """
    edges = []
    for i, dep_type in enumerate(DEPENDENCY_CHAIN):
        if i + 1 >= len(tasks):
            break
        upstream, downstream = tasks[i], tasks[i + 1]
        edges.append(TaskDependency(
            id=f"{project_id}-dep{i + 1}",
            upstream_task_id=upstream.id,
            upstream_title=upstream.title,
            downstream_task_id=downstream.id,
            downstream_title=downstream.title,
            type=dep_type,
            description=DEPENDENCY_DESCRIPTIONS[dep_type],
        ))
    return edges


def project_dependencies(store: EntityStore, project: Project) -> List[TaskDependency]:
    """Dependency analysis over the project's tasks in fixture order."""
    return dependency_chain(project.id, store.tasks_by_project(project.id))
