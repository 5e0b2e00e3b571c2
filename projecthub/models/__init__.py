from .user import User, UserRole
from .project import Project, ProjectStatus, HealthStatus, ProjectType, ProjectLevel
from .milestone import Milestone, MilestoneStatus, MilestoneBaseline
from .task import Task, TaskStatus, TaskPriority, TaskLog
from .risk import Risk, RiskImpact, RiskStatus, IMPACT_ORDER, DelayRequest, DelayRequestStatus
from .draft import Draft, Notification, NotificationType

__all__ = [
    "User", "UserRole",
    "Project", "ProjectStatus", "HealthStatus", "ProjectType", "ProjectLevel",
    "Milestone", "MilestoneStatus", "MilestoneBaseline",
    "Task", "TaskStatus", "TaskPriority", "TaskLog",
    "Risk", "RiskImpact", "RiskStatus", "IMPACT_ORDER",
    "DelayRequest", "DelayRequestStatus",
    "Draft", "Notification", "NotificationType",
]
