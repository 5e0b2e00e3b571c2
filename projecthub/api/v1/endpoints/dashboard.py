"""
Dashboard and Report Endpoints Module
"""
from datetime import date
from fastapi import APIRouter, Depends
from projecthub.api import deps
from projecthub.core.config import settings
from projecthub.models import User
from projecthub.schemas.dashboard import DashboardOverview, ReportsOverview
from projecthub.services.dashboard import dashboard_overview, reports_overview
from projecthub.services.store import EntityStore

router = APIRouter()


@router.get("/dashboard", response_model=DashboardOverview)
def read_dashboard(
    store: EntityStore = Depends(deps.get_store),
    today: date = Depends(deps.get_today),
    current_user: User = Depends(deps.get_current_active_user),
):
    """
    KPIs, upcoming milestones, open risks, pending delay requests and
    in-progress projects with yellow or red health.
    """
    return dashboard_overview(store, today, settings.UPCOMING_MILESTONE_DAYS)


@router.get("/reports/overview", response_model=ReportsOverview)
def read_reports_overview(
    store: EntityStore = Depends(deps.get_store),
    current_user: User = Depends(deps.get_current_active_user),
):
    """Portfolio status and health distribution with the top open risks."""
    return reports_overview(store, settings.TOP_RISKS_LIMIT)
