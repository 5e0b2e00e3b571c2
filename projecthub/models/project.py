"""
Project Model Module

This module defines the Project model together with the closed vocabularies for
its status, health, type and level.
"""
from datetime import date
from enum import Enum
from typing import Dict, Optional
from sqlmodel import SQLModel, Field, Column, JSON


class ProjectStatus(str, Enum):
    PLANNING = "planning"
    IN_PROGRESS = "in_progress"
    ON_HOLD = "on_hold"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class HealthStatus(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


class ProjectType(str, Enum):
    INTERNAL = "internal"
    EXTERNAL = "external"
    RESEARCH = "research"


class ProjectLevel(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Project(SQLModel, table=True):
    """
    Project model representing a tracked project with budget, timeline and goals.

    Progress is deliberately absent: it is always derived from the project's
    tasks (see projecthub.services.progress).

    Attributes:
        id: Fixture identifier (e.g. "p1")
        name: Project name/title
        code: Human-readable project code (e.g. "EC-2026")
        type: internal, external or research
        level: Priority level of the project
        status: Lifecycle status
        health_status: Traffic-light health indicator
        start_date: Planned start (calendar date)
        end_date: Planned end (calendar date), expected to be >= start_date
        budget: Total budget
        budget_used: Amount already spent
        owner_id: Foreign key to the owning User
        smart_goals: SMART goal texts keyed by "S", "M", "A", "R", "T"
        description: Free-text description
    """
    __tablename__ = "projects"

    id: str = Field(primary_key=True)

    # Basic project information
    name: str = Field(nullable=False)
    code: str = Field(index=True)
    type: ProjectType = Field(default=ProjectType.INTERNAL)
    level: ProjectLevel = Field(default=ProjectLevel.MEDIUM)
    description: Optional[str] = None

    # Status tracking
    status: ProjectStatus = Field(default=ProjectStatus.PLANNING)
    health_status: HealthStatus = Field(default=HealthStatus.GREEN)

    # Timeline
    start_date: date
    end_date: date

    # Budget tracking
    budget: int = 0
    budget_used: int = 0

    # Relationships
    owner_id: Optional[str] = Field(default=None, foreign_key="users.id")

    # SMART goals stored as a JSON object
    smart_goals: Dict[str, str] = Field(default_factory=dict, sa_column=Column(JSON))
