"""
User Endpoints Module

Endpoints about the signed-in user: profile, navigation and notifications.
"""
from typing import List
from fastapi import APIRouter, Depends
from projecthub.api import deps
from projecthub.models import Notification, User
from projecthub.schemas.user import NavItem, UserRead
from projecthub.services.navigation import visible_navigation
from projecthub.services.store import EntityStore

router = APIRouter()


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(deps.get_current_active_user)):
    """Return the currently authenticated user."""
    return current_user


@router.get("/me/navigation", response_model=List[NavItem])
def read_navigation(current_user: User = Depends(deps.get_current_active_user)):
    """Navigation entries shown to the current user's role."""
    return visible_navigation(current_user.role)


@router.get("/me/notifications", response_model=List[Notification])
def read_notifications(
    store: EntityStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_active_user),
):
    """The current user's notifications, newest first."""
    return store.notifications_for(current_user.id)
