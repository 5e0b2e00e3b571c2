"""
Milestone Model Module

This module defines the Milestone model and the MilestoneBaseline snapshot used
to compare planned and actual completion dates.
"""
from datetime import date
from enum import Enum
from typing import Optional
from sqlmodel import SQLModel, Field


class MilestoneStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    OVERDUE = "overdue"


class Milestone(SQLModel, table=True):
    """
    Milestone model representing a dated phase of a project.

    Attributes:
        id: Fixture identifier (e.g. "m1")
        project_id: Foreign key to the owning Project
        name: Milestone name
        description: Free-text description
        start_date: Planned start (calendar date)
        due_date: Planned end (calendar date)
        status: Lifecycle status
        progress: Stored completion percentage, 0..100
        position: Order of the milestone within the fixture
    """
    __tablename__ = "milestones"

    id: str = Field(primary_key=True)
    project_id: str = Field(foreign_key="projects.id", index=True)

    name: str = Field(nullable=False)
    description: Optional[str] = None

    # Timeline
    start_date: date
    due_date: date

    status: MilestoneStatus = Field(default=MilestoneStatus.PENDING)
    progress: int = Field(default=0, ge=0, le=100)

    # Stable listing order
    position: int = 0


class MilestoneBaseline(SQLModel, table=True):
    """
    A recorded planned completion date for a milestone.

    actual_end stays None until the milestone is finished.
    """
    __tablename__ = "milestone_baselines"

    id: str = Field(primary_key=True)
    project_id: str = Field(foreign_key="projects.id", index=True)
    milestone_id: str = Field(foreign_key="milestones.id")

    snapshot_name: str
    snapshot_at: date
    planned_end: date
    actual_end: Optional[date] = None
