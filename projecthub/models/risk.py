"""
Risk Model Module

This module defines the Risk register entry and the DelayRequest raised against a
task's due date. Neither feeds the progress or schedule computations; they are
listed on the dashboard and report pages.
"""
from datetime import date, datetime
from enum import Enum
from typing import Optional
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field


class RiskImpact(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# Severity order used when sorting risks, most severe first
IMPACT_ORDER = {
    RiskImpact.CRITICAL: 0,
    RiskImpact.HIGH: 1,
    RiskImpact.MEDIUM: 2,
    RiskImpact.LOW: 3,
}


class RiskStatus(str, Enum):
    OPEN = "open"
    MITIGATING = "mitigating"
    RESOLVED = "resolved"
    ACCEPTED = "accepted"


class Risk(SQLModel, table=True):
    """
    Project risk with impact, probability (0..1) and mitigation plan.
    """
    __tablename__ = "risks"

    id: str = Field(primary_key=True)
    project_id: str = Field(foreign_key="projects.id", index=True)

    title: str
    description: Optional[str] = None
    impact: RiskImpact = Field(default=RiskImpact.MEDIUM)
    probability: float = Field(default=0, ge=0, le=1)
    status: RiskStatus = Field(default=RiskStatus.OPEN)
    mitigation: Optional[str] = None

    owner_id: Optional[str] = Field(default=None, foreign_key="users.id")
    created_at: datetime = Field(sa_type=DateTime)


class DelayRequestStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class DelayRequest(SQLModel, table=True):
    """
    Request to move a task's due date, reviewed by a PM or Executive.
    """
    __tablename__ = "delay_requests"

    id: str = Field(primary_key=True)
    task_id: str = Field(foreign_key="tasks.id")
    project_id: str = Field(foreign_key="projects.id", index=True)
    requester_id: str = Field(foreign_key="users.id")

    reason: str
    original_due_date: date
    requested_due_date: date
    status: DelayRequestStatus = Field(default=DelayRequestStatus.PENDING)

    # Review outcome
    reviewer_id: Optional[str] = Field(default=None, foreign_key="users.id")
    review_comment: Optional[str] = None

    created_at: datetime = Field(sa_type=DateTime)
