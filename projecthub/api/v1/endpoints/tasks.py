"""
Task Endpoints Module

This module provides the personal task list and single-task lookup.
"""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from projecthub.api import deps
from projecthub.models import Task, TaskStatus, User
from projecthub.schemas.dashboard import MyTasks
from projecthub.services.dashboard import my_tasks
from projecthub.services.store import EntityStore

router = APIRouter()


@router.get("/mine", response_model=MyTasks)
def list_my_tasks(
    status: Optional[TaskStatus] = None,
    store: EntityStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_active_user),
):
    """
    Tasks assigned to the current user, highest priority first then by due date.

    Args:
        status: Only tasks with this status (counts still cover every task)
    """
    return my_tasks(store, current_user, status)


@router.get("/{task_id}", response_model=Task)
def read_task(
    task_id: str,
    store: EntityStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_active_user),
):
    """
    Get a specific task by ID.

    Raises:
        HTTPException 404: If the task doesn't exist
    """
    task = store.find_task(task_id)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return task
