"""Pytest fixtures."""

import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from aegis.core.deps import get_emergency_store
from aegis.db.base import Base
from aegis.db.session import get_db
from aegis.main import app
from aegis.models import Admin, Hospital, Patient, User  # noqa: F401 - register for create_all
from aegis.services.emergency_store import EmergencyStore

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


def _unique():
    return uuid.uuid4().hex[:8]


@pytest.fixture(scope="session")
def setup_db():
    """Create tables once for test session."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session(setup_db):
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def emergency_store():
    """Fresh tracker per test so listings only contain this test's emergencies."""
    return EmergencyStore()


@pytest.fixture
def client(setup_db, emergency_store):
    """Test client with overridden DB and emergency store."""
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_emergency_store] = lambda: emergency_store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def register_admin(client):
    """Register an admin (and their hospital); return (token, me)."""

    def _register(registration_no=None, hospital_name=None):
        uid = _unique()
        email = f"admin_{uid}@test.com"
        r = client.post(
            "/admin/register",
            json={
                "first_name": "Ada",
                "last_name": "Okafor",
                "title": "Dr",
                "email": email,
                "password": "Admin1234!",
                "specialty": "Neurology",
                "license_number": f"LIC-{uid}",
                "department": "Stroke Unit",
                "job_title": "Consultant",
                "hospital_name": hospital_name or f"Clinic {uid}",
                "hospital_address": "1 Hospital Road",
                "hospital_phone": "+234-1-5550000",
                "hospital_email": f"clinic_{uid}@test.com",
                "registration_no": registration_no or f"REG-{uid}",
            },
        )
        assert r.status_code == 201, r.json()
        token = client.post("/auth/login", json={"email": email, "password": "Admin1234!"}).json()["access_token"]
        return token, r.json()

    return _register


@pytest.fixture
def register_patient(client):
    """Register a patient; return (token, me)."""

    def _register(hospital_id=None, first_name="Jane", last_name="Doe", kin_name="John Doe"):
        email = f"patient_{_unique()}@test.com"
        r = client.post(
            "/auth/register",
            json={
                "first_name": first_name,
                "last_name": last_name,
                "email": email,
                "phone_number": "+1-555-0199",
                "password": "Patient1234!",
                "kin_name": kin_name,
                "kin_phone": "+1-555-0100",
                "hospital_id": hospital_id,
                "consent_health": True,
                "consent_terms": True,
            },
        )
        assert r.status_code == 201, r.json()
        token = client.post("/auth/login", json={"email": email, "password": "Patient1234!"}).json()["access_token"]
        return token, r.json()

    return _register

