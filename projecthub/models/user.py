"""
User Model Module

This module defines the User model and UserRole enumeration used for login
and for deciding which parts of the dashboard a user is shown.
"""
from enum import Enum
from typing import Optional
from sqlmodel import SQLModel, Field


class UserRole(str, Enum):
    """
    Enumeration of dashboard roles.

    - PM: Project manager, sees every page including drafts
    - MEMBER: Team member working on assigned tasks
    - EXECUTIVE: Read-mostly management view, reviews delay requests

    Roles only control what the presentation layer shows; they are not a
    security boundary.
    """
    PM = "PM"
    MEMBER = "Member"
    EXECUTIVE = "Executive"


class User(SQLModel, table=True):
    """
    User model representing a person who can log into the dashboard.

    Attributes:
        id: Fixture identifier (e.g. "u1")
        email: Login email address (unique, indexed)
        name: Display name
        role: Dashboard role, part of the login credentials
        department: Organisational unit shown on profile pages
        password: bcrypt hash of the login password
        avatar: Optional avatar URL
    """
    __tablename__ = "users"

    id: str = Field(primary_key=True)

    # Authentication fields
    email: str = Field(unique=True, index=True, nullable=False)
    password: Optional[str] = None  # Hashed password (bcrypt)
    role: UserRole = Field(default=UserRole.MEMBER)

    # Profile information
    name: str = Field(nullable=False)
    department: Optional[str] = None
    avatar: Optional[str] = None

    @property
    def is_privileged(self) -> bool:
        """Helper to check if the user may see everyone's delay requests."""
        return self.role in (UserRole.PM, UserRole.EXECUTIVE)
