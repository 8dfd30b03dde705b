# backend/tests/conftest.py
import os
import sys
import pathlib
import tempfile

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# -------------------------------------------------------------------------------------------------
# Path & environment setup (must happen BEFORE importing the app)
# -------------------------------------------------------------------------------------------------

# Ensure project root (backend/) is importable
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Temp SQLite DB file for tests
TEST_DB_FILE = str(pathlib.Path(tempfile.gettempdir()) / "interview_access_test.sqlite")

os.environ.setdefault("DATABASE_URL", f"sqlite:///{TEST_DB_FILE}")
os.environ.setdefault("CORS_ORIGINS", "http://localhost:3000")
os.environ.setdefault("ACCESS_TOKEN_EXPIRE_MINUTES", "60")
os.environ.setdefault("JWT_ALGORITHM", "HS256")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("INTERVIEW_STATUS_ALLOWLIST", "")


# -------------------------------------------------------------------------------------------------
# Import app & modules AFTER env vars
# -------------------------------------------------------------------------------------------------
from main import app
from api import deps
from db import models as m
from core import security
from services.interview_service import InterviewAccessService

# -------------------------------------------------------------------------------------------------
# Test DB engine + session factory
# -------------------------------------------------------------------------------------------------
engine = create_engine(
    f"sqlite:///{TEST_DB_FILE}", future=True, connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@pytest.fixture(scope="function", autouse=True)
def reset_db():
    """Drop + recreate DB before each test function to ensure isolation"""
    m.Base.metadata.drop_all(bind=engine)
    m.Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function")
def db():
    """Yield a fresh DB session per test function."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


def _override_get_db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()

# Override the app's DB dependency
app.dependency_overrides[deps.get_db] = _override_get_db


class FakeClock:
    """Epoch-ms clock that only moves when told to."""

    def __init__(self, start: int = 1_700_000_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def service(db, clock):
    return InterviewAccessService(db, clock=clock)


# -------------------------------------------------------------------------------------------------
# TestClient
# -------------------------------------------------------------------------------------------------
@pytest.fixture(scope="session")
def client():
    return TestClient(app)


@pytest.fixture
def auth_headers():
    """Build Authorization headers carrying a signed identity token for `email`."""

    def _make(email: str, subject: str | None = None):
        token = security.create_access_token(subject=subject or email, email=email)
        return {"Authorization": f"Bearer {token}"}

    return _make


@pytest.fixture
def interview_payload():
    def _make(**overrides):
        body = {
            "title": "System design round",
            "description": "Design a URL shortener",
            "startTime": 1_700_000_000_000,
            "status": "scheduled",
            "streamCallId": "call-1",
            "candidateId": "a@x.com",
            "interviewerIds": ["b@x.com"],
        }
        body.update(overrides)
        return body

    return _make
