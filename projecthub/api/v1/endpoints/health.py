from fastapi import APIRouter
from typing import Any

from projecthub.core.config import settings

router = APIRouter()


@router.get("", response_model=dict[str, Any])
def health_check() -> Any:
    """
    Liveness probe; needs no authentication.
    """
    return {"status": "ok", "name": settings.PROJECT_NAME, "version": settings.VERSION}
