"""
Task Model Module

This module defines the Task model and the TaskLog activity record. Every task
belongs to exactly one milestone; project_id is denormalized from that milestone
so project-wide queries need no join.
"""
from datetime import date, datetime
from enum import Enum
from typing import Optional
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field


class TaskStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    REVIEW = "review"
    DONE = "done"
    BLOCKED = "blocked"


class TaskPriority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Task(SQLModel, table=True):
    """
    Task table model.

    Attributes:
        id: Fixture identifier (e.g. "t1")
        milestone_id: Foreign key to the owning Milestone
        project_id: Foreign key to the Project (must equal the milestone's project)
        title: Short task title
        description: Free-text description
        status: Workflow status
        priority: high, medium or low
        assignee_id: Foreign key to the assigned User
        start_date: Planned start (calendar date)
        due_date: Planned end (calendar date)
        estimated_hours: Estimated effort, >= 0
        actual_hours: Logged effort, >= 0
        position: Order of the task within the fixture
    """
    __tablename__ = "tasks"

    id: str = Field(primary_key=True)
    milestone_id: str = Field(foreign_key="milestones.id", index=True)
    project_id: str = Field(foreign_key="projects.id", index=True)

    # Basic task information
    title: str = Field(nullable=False)
    description: Optional[str] = None

    status: TaskStatus = Field(default=TaskStatus.TODO)
    priority: TaskPriority = Field(default=TaskPriority.MEDIUM)

    assignee_id: Optional[str] = Field(default=None, foreign_key="users.id")

    # Timeline
    start_date: date
    due_date: date

    # Effort tracking
    estimated_hours: float = Field(default=0, ge=0)
    actual_hours: float = Field(default=0, ge=0)

    # Stable listing order
    position: int = 0


class TaskLog(SQLModel, table=True):
    """
    Activity entry recorded against a task (status change, comment, ...).
    """
    __tablename__ = "task_logs"

    id: str = Field(primary_key=True)
    task_id: str = Field(foreign_key="tasks.id", index=True)
    user_id: str = Field(foreign_key="users.id")

    action: str  # e.g. "status_change", "comment"
    detail: str
    timestamp: datetime = Field(sa_type=DateTime)  # naive; fixture timestamps carry no zone
