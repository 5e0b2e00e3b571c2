from fastapi import APIRouter
from projecthub.api.v1.endpoints import (
    auth, health, users, projects, tasks, delay_requests, drafts, dashboard
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(users.router, prefix="/users", tags=["users"])

# Resource endpoints
api_router.include_router(projects.router, prefix="/projects", tags=["projects"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
api_router.include_router(delay_requests.router, prefix="/delay-requests", tags=["delay-requests"])
api_router.include_router(drafts.router, prefix="/drafts", tags=["drafts"])
api_router.include_router(dashboard.router, tags=["dashboard"])
