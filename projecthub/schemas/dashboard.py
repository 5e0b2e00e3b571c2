from pydantic import BaseModel
from typing import Dict, List

from projecthub.models import DelayRequest, Milestone, Risk, Task
from projecthub.schemas.project import ProjectSummary


class KpiSummary(BaseModel):
    total_projects: int
    in_progress: int
    completed: int
    red_health: int


class DashboardOverview(BaseModel):
    kpis: KpiSummary
    upcoming_milestones: List[Milestone]
    open_risks: List[Risk]
    pending_delay_requests: List[DelayRequest]
    warning_projects: List[ProjectSummary]


class DistributionEntry(BaseModel):
    key: str
    count: int
    percent: int


class ReportsOverview(BaseModel):
    total_projects: int
    status_distribution: List[DistributionEntry]
    health_distribution: List[DistributionEntry]
    top_risks: List[Risk]


class MyTasks(BaseModel):
    tasks: List[Task]
    counts: Dict[str, int]  # per task status, over all of the user's tasks


class DelayRequestList(BaseModel):
    requests: List[DelayRequest]
    counts: Dict[str, int]  # per request status, over every visible request
