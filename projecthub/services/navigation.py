"""
Role-based navigation.

This only decides which menu entries a role is shown; the routes themselves stay
reachable for every authenticated user.
"""
from typing import List

from projecthub.models import UserRole
from projecthub.schemas.user import NavItem

# (label, href, roles allowed to see it; None means everyone)
NAV_ITEMS = [
    ("Dashboard", "/dashboard", None),
    ("Projects", "/projects", None),
    ("My Tasks", "/my-tasks", None),
    ("Delay Requests", "/delay-requests", (UserRole.PM, UserRole.EXECUTIVE)),
    ("Reports", "/reports", None),
    ("Drafts", "/drafts", (UserRole.PM,)),
]


def visible_navigation(role: UserRole) -> List[NavItem]:
    return [
        NavItem(label=label, href=href)
        for label, href, roles in NAV_ITEMS
        if roles is None or role in roles
    ]
