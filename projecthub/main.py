from contextlib import asynccontextmanager
from fastapi import FastAPI
from projecthub.core.config import settings
from projecthub.core.logging_config import configure_logging
from fastapi.middleware.cors import CORSMiddleware
from projecthub.api.v1.api import api_router
from projecthub.db.session import init_db

configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Seed the in-memory database once per process
    init_db()
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    lifespan=lifespan,
)

# Set up CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify actual origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix=settings.API_V1_STR)
