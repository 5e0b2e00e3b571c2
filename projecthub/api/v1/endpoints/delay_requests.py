"""
Delay Request Endpoints Module

Lists delay requests. PMs and Executives see all requests; Members only see the
requests they raised themselves.
"""
from typing import Optional
from fastapi import APIRouter, Depends
from projecthub.api import deps
from projecthub.models import DelayRequestStatus, User
from projecthub.schemas.dashboard import DelayRequestList
from projecthub.services.dashboard import visible_delay_requests
from projecthub.services.store import EntityStore

router = APIRouter()


@router.get("", response_model=DelayRequestList)
def list_delay_requests(
    status: Optional[DelayRequestStatus] = None,
    store: EntityStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_active_user),
):
    """
    Retrieve the delay requests visible to the current user.

    Args:
        status: Only requests with this status (counts still cover every visible request)

    Returns:
        DelayRequestList: Requests plus per-status counts
    """
    return visible_delay_requests(store, current_user, status)
