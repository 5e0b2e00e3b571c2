import logging

from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine, select

from projecthub.core.config import settings
from projecthub.db.fixture import load_fixture
from projecthub.models import User

logger = logging.getLogger(__name__)

_engine = None


def make_engine(db_url: str):
    """
    Build an engine for db_url.

    An in-memory SQLite URL gets a single shared connection (StaticPool) so every
    session sees the same seeded data.
    """
    if db_url.startswith("sqlite"):
        # SQLite fix for multithreading
        connect_args = {"check_same_thread": False}
        if db_url in ("sqlite://", "sqlite:///:memory:"):
            return create_engine(db_url, connect_args=connect_args, poolclass=StaticPool)
        return create_engine(db_url, connect_args=connect_args)
    return create_engine(db_url, pool_pre_ping=True)


def get_engine():
    global _engine

    if _engine is None:
        _engine = make_engine(settings.DATABASE_URL)
    return _engine


def init_db(engine=None) -> None:
    """
    Create all tables and seed the demo fixture if the database is empty.
    """
    engine = engine or get_engine()
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        if session.exec(select(User).limit(1)).first() is not None:
            logger.debug("Fixture already present, skipping seed")
            return
        load_fixture(session)


engine = get_engine()


def get_db():
    with Session(engine) as session:
        yield session
