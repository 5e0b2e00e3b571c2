"""
Draft Endpoints Module

Drafts belong to their author; each user only lists their own.
"""
from typing import List
from fastapi import APIRouter, Depends
from projecthub.api import deps
from projecthub.models import Draft, User
from projecthub.services.store import EntityStore

router = APIRouter()


@router.get("", response_model=List[Draft])
def list_drafts(
    store: EntityStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_active_user),
):
    """
    Retrieve the current user's drafts, most recently updated first.
    """
    return store.drafts_by(current_user.id)
