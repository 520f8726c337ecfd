"""Pytest fixtures."""

import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from mindtrack.db.base import Base
from mindtrack.models import JournalEntry, Patient  # noqa: F401 - register for create_all
from mindtrack.main import app
from mindtrack.db.session import get_db

TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="session")
def setup_db():
    """Create tables once for test session."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(setup_db):
    """Test client with overridden DB."""
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_patient(setup_db):
    """Insert a patient directly; practitioner accounts are owned elsewhere."""

    def _make(name: str = "Patient", practitioner_id: int | None = None) -> int:
        db = TestingSessionLocal()
        try:
            patient = Patient(
                name=name,
                email=f"p_{uuid.uuid4().hex[:8]}@test.com",
                practitioner_id=practitioner_id,
            )
            db.add(patient)
            db.commit()
            return patient.id
        finally:
            db.close()

    return _make


@pytest.fixture
def practitioner_id():
    """Practitioner id unique to the test so dashboards do not share patients."""
    return uuid.uuid4().int % 1_000_000_000
