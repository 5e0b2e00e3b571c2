"""
Shared pytest fixtures for the ProjectHub test suite.

Provides:
    - engine: fresh in-memory database seeded with the demo fixture
    - session / store: per-test session and EntityStore over that engine
    - client: FastAPI TestClient bound to the same engine, with "today" pinned
    - login: helper returning bearer headers for a fixture user
"""
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from projecthub.api import deps
from projecthub.db.session import get_db, init_db, make_engine
from projecthub.main import app
from projecthub.models import UserRole
from projecthub.services.store import EntityStore

# Date the demo fixture is built around
REFERENCE_DAY = date(2026, 3, 20)

DEMO_LOGINS = {
    UserRole.PM: "pm@demo.com",
    UserRole.MEMBER: "member1@demo.com",
    UserRole.EXECUTIVE: "exec@demo.com",
}


@pytest.fixture
def engine():
    """Seeded in-memory database, one per test."""
    db_engine = make_engine("sqlite://")
    init_db(db_engine)
    yield db_engine
    db_engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as db_session:
        yield db_session


@pytest.fixture
def store(session):
    return EntityStore(session)


@pytest.fixture
def client(engine):
    """Test client whose requests read from the per-test engine."""

    def override_get_db():
        with Session(engine) as db_session:
            yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[deps.get_today] = lambda: REFERENCE_DAY
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def login(client):
    """Return a function that logs a demo user in and yields auth headers."""

    def _login(role=UserRole.PM, email=None, password="demo"):
        response = client.post(
            "/api/v1/auth/login",
            json={"email": email or DEMO_LOGINS[role], "password": password, "role": role.value},
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _login
