"""
Test wiring: every test gets a freshly created SQLite schema, and the app's
get_db dependency hands out sessions bound to it.
"""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

TEST_DATABASE_URL = "sqlite:///./test.db"
# frameshop.config reads this at import time
os.environ["DATABASE_URL"] = TEST_DATABASE_URL

from frameshop.database import Base, get_db  # noqa: E402
from frameshop.main import app  # noqa: E402


@pytest.fixture(scope="session")
def sqlite_engine():
    engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
    yield engine
    engine.dispose()


@pytest.fixture(scope="session")
def session_factory(sqlite_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=sqlite_engine)


@pytest.fixture(autouse=True)
def fresh_schema(sqlite_engine):
    Base.metadata.create_all(bind=sqlite_engine)
    yield
    Base.metadata.drop_all(bind=sqlite_engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def session_per_request():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = session_per_request
    yield TestClient(app)
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def gallery_specs():
    """16x20 print, 2" conservation mat, contemporary frame, UV glass."""
    return {
        "image_width": 16,
        "image_height": 20,
        "mat_width": 2,
        "mat_height": 2,
        "frame_style": "contemporary",
        "mat_type": "conservation",
        "glass_type": "uv-protection",
        "backing_type": "archival",
        "complexity": "medium",
        "rush": False,
    }
