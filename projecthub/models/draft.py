"""
Draft and Notification Model Module

Drafts are unpublished documents owned by their author; notifications are
per-user messages shown in the header bell.
"""
from datetime import datetime
from enum import Enum
from typing import Optional
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field


class Draft(SQLModel, table=True):
    """
    Draft document, optionally attached to a project.
    """
    __tablename__ = "drafts"

    id: str = Field(primary_key=True)
    project_id: Optional[str] = Field(default=None, foreign_key="projects.id")

    # Basic draft content
    title: str = Field(nullable=False)
    content: str = Field(nullable=False)  # Markdown

    author_id: str = Field(foreign_key="users.id", index=True)
    updated_at: datetime = Field(sa_type=DateTime)


class NotificationType(str, Enum):
    INFO = "info"
    WARNING = "warning"
    SUCCESS = "success"
    ERROR = "error"


class Notification(SQLModel, table=True):
    """
    Notification addressed to a single user.

    link is an in-app path such as "/projects/p1", or None.
    """
    __tablename__ = "notifications"

    id: str = Field(primary_key=True)
    user_id: str = Field(foreign_key="users.id", index=True)

    title: str
    message: str
    type: NotificationType = Field(default=NotificationType.INFO)
    read: bool = False
    created_at: datetime = Field(sa_type=DateTime)
    link: Optional[str] = None
