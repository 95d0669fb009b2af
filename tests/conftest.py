"""
Shared fixtures: in-memory database, seeded badge catalog, users, API client
"""
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from courseware.database import Base, get_db, init_db
from courseware.main import app
from courseware.services.achievement_service import achievement_service
from courseware.services.user_service import user_service


# Test database URL
TEST_DATABASE_URL = "sqlite://"


@pytest.fixture
def engine():
    """Fresh in-memory database per test."""
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine) -> Generator[Session, None, None]:
    """Create test database session."""
    TestingSession = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    session = TestingSession()

    yield session

    session.close()


@pytest.fixture
def seeded_db(db_session) -> Session:
    """Session whose badge catalog has been seeded."""
    achievement_service.seed_badges(db_session)
    return db_session


@pytest.fixture
def make_user(db_session):
    """Factory registering users by name."""
    def _make_user(name: str = "Ada"):
        return user_service.register_user(db_session, f"{name.lower()}@test.com", name)
    return _make_user


@pytest.fixture
def client(db_session) -> Generator[TestClient, None, None]:
    """Create test client with database override."""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    # Not used as a context manager, so the startup bootstrap does not run
    yield TestClient(app)

    app.dependency_overrides.clear()
