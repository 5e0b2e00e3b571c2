"""
Project Endpoints Module

This module provides the read-only project views: list, detail, milestones,
tasks, Gantt schedule, baseline comparison, risks, team, activity feed and
task dependencies.
"""
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException
from projecthub.api import deps
from projecthub.core.config import settings
from projecthub.models import Milestone, Project, ProjectStatus, Risk, Task, User
from projecthub.schemas.baseline import BaselineComparison
from projecthub.schemas.project import (
    ActivityDay, ProjectDetail, ProjectSummary, TaskDependency, TeamMember,
)
from projecthub.schemas.schedule import ScheduleLayout
from projecthub.services import projects as project_service
from projecthub.services.baseline import baseline_comparison
from projecthub.services.schedule import schedule_layout
from projecthub.services.store import EntityStore

router = APIRouter()


def get_project_or_404(project_id: str, store: EntityStore) -> Project:
    project = store.find_project(project_id)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return project


@router.get("", response_model=List[ProjectSummary])
def list_projects(
    status: Optional[ProjectStatus] = None,
    q: Optional[str] = None,
    store: EntityStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_active_user),
):
    """
    Retrieve project summaries with derived progress and budget percentages.

    Args:
        status: Only projects with this status
        q: Case-insensitive search over project name and code
    """
    return project_service.list_project_summaries(store, status=status, search=q)


@router.get("/{project_id}", response_model=ProjectDetail)
def read_project(
    project_id: str,
    store: EntityStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_active_user),
):
    """
    Get a specific project with its rollups.

    Raises:
        HTTPException 404: If the project doesn't exist
    """
    project = get_project_or_404(project_id, store)
    return project_service.project_detail(store, project)


@router.get("/{project_id}/milestones", response_model=List[Milestone])
def list_milestones(
    project_id: str,
    store: EntityStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_active_user),
):
    project = get_project_or_404(project_id, store)
    return store.milestones_of(project.id)


@router.get("/{project_id}/tasks", response_model=List[Task])
def list_tasks(
    project_id: str,
    milestone_id: Optional[str] = None,
    store: EntityStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_active_user),
):
    """
    Tasks of the project in fixture order, optionally limited to one milestone.
    """
    project = get_project_or_404(project_id, store)
    if milestone_id:
        return [t for t in store.tasks_by_milestone(milestone_id) if t.project_id == project.id]
    return store.tasks_by_project(project.id)


@router.get("/{project_id}/schedule", response_model=ScheduleLayout)
def read_schedule(
    project_id: str,
    store: EntityStore = Depends(deps.get_store),
    today: date = Depends(deps.get_today),
    current_user: User = Depends(deps.get_current_active_user),
):
    """
    Gantt layout of the project's milestones and tasks.

    Raises:
        HTTPException 404: If the project doesn't exist
    """
    project = get_project_or_404(project_id, store)
    return schedule_layout(store, project, today, settings.GANTT_MIN_BAR_WIDTH)


@router.get("/{project_id}/baselines", response_model=List[BaselineComparison])
def read_baselines(
    project_id: str,
    store: EntityStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_active_user),
):
    """Planned versus actual milestone completion for each recorded baseline."""
    project = get_project_or_404(project_id, store)
    return baseline_comparison(store, project.id)


@router.get("/{project_id}/risks", response_model=List[Risk])
def list_risks(
    project_id: str,
    store: EntityStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_active_user),
):
    project = get_project_or_404(project_id, store)
    return store.risks_of(project.id)


@router.get("/{project_id}/team", response_model=List[TeamMember])
def list_team(
    project_id: str,
    store: EntityStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_active_user),
):
    """Owner and assignees of the project with their task counts."""
    project = get_project_or_404(project_id, store)
    return project_service.project_team(store, project)


@router.get("/{project_id}/activity", response_model=List[ActivityDay])
def list_activity(
    project_id: str,
    store: EntityStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_active_user),
):
    """Task activity of the project grouped by day, newest first."""
    project = get_project_or_404(project_id, store)
    return project_service.project_activity(store, project.id)


@router.get("/{project_id}/dependencies", response_model=List[TaskDependency])
def list_dependencies(
    project_id: str,
    store: EntityStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_active_user),
):
    """
    Dependency edges between the project's leading tasks.

    Raises:
        HTTPException 404: If the project doesn't exist
    """
    project = get_project_or_404(project_id, store)
    return project_service.project_dependencies(store, project)
