from datetime import date, datetime
from enum import Enum
from pydantic import BaseModel
from typing import Dict, List, Optional

from projecthub.models.project import HealthStatus, ProjectLevel, ProjectStatus, ProjectType
from projecthub.models.user import UserRole


class TaskStats(BaseModel):
    total: int = 0
    done: int = 0
    in_progress: int = 0
    blocked: int = 0


class MilestoneRollup(BaseModel):
    total: int = 0
    completed: int = 0
    percent: int = 0


class OwnerRead(BaseModel):
    id: str
    name: str
    role: UserRole
    department: Optional[str] = None


# Properties shown on the project list
class ProjectSummary(BaseModel):
    id: str
    name: str
    code: str
    type: ProjectType
    level: ProjectLevel
    status: ProjectStatus
    health_status: HealthStatus
    start_date: date
    end_date: date
    owner_id: Optional[str] = None
    progress: int
    budget_percent: int


# Properties shown on the project detail page
class ProjectDetail(ProjectSummary):
    description: Optional[str] = None
    budget: int
    budget_used: int
    smart_goals: Dict[str, str] = {}
    owner: Optional[OwnerRead] = None
    task_stats: TaskStats
    milestones: MilestoneRollup


class TeamMember(BaseModel):
    user_id: str
    name: Optional[str] = None  # None when the user id is not in the fixture
    role: Optional[UserRole] = None
    department: Optional[str] = None
    is_owner: bool = False
    task_count: int = 0


class ActivityEntry(BaseModel):
    id: str
    task_id: str
    task_title: Optional[str] = None
    user_id: str
    user_name: Optional[str] = None
    action: str
    detail: str
    timestamp: datetime


class ActivityDay(BaseModel):
    day: date
    entries: List[ActivityEntry]


class DependencyType(str, Enum):
    FS = "FS"  # finish to start
    SS = "SS"  # start to start
    FF = "FF"  # finish to finish
    SF = "SF"  # start to finish


class TaskDependency(BaseModel):
    """Edge between two tasks: downstream is constrained by upstream."""
    id: str
    upstream_task_id: str
    upstream_title: str
    downstream_task_id: str
    downstream_title: str
    type: DependencyType
    description: str
