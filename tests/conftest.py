# tests/conftest.py
"""
Shared fixtures. The whole suite runs against one in-memory SQLite database;
tables are recreated before every test.
"""

import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "TEST_JWT_SECRET_CHANGE_ME"
os.environ["ADMIN_EMAIL"] = ""
os.environ["ADMIN_PASSWORD"] = ""
os.environ["LOG_TO_FILE"] = "false"

import pytest
from fastapi.testclient import TestClient

from app.database import SessionLocal, create_tables, drop_tables
from app.main import app
from app.models.enums import UserRole
from app.services.user_service import create_user

PASSWORD = "p@ssw0rd"

VEHICLE = {
    "plate_number": "SOM-40011",
    "make": "Toyota",
    "model": "Corolla",
    "year": 2019,
    "color": "Blue",
    "chassis_number": "TYT-CHS-40011",
    "engine_number": "TYT-ENG-40011",
    "vehicle_type": "Sedan",
}

OWNER = {
    "full_name": "Ahmed Hussein Ali",
    "national_id": "SO-NID-100250",
    "phone_number": "+252619556677",
    "email": None,
    "address": "Hodan District, Mogadishu",
}


@pytest.fixture(autouse=True)
def fresh_tables():
    drop_tables()
    create_tables()
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def vehicle():
    return dict(VEHICLE)


@pytest.fixture
def owner():
    return dict(OWNER)


@pytest.fixture
def citizen_user(db):
    return create_user(db, "citizen@example.com", PASSWORD, "Amina Warsame", "+252615000111")


@pytest.fixture
def admin_user(db):
    return create_user(db, "admin@example.com", PASSWORD, "Registry Admin", role=UserRole.ADMIN)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def login_headers(client, email, password=PASSWORD):
    resp = client.post("/api/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['accessToken']}"}


@pytest.fixture
def citizen_headers(client, citizen_user):
    return login_headers(client, citizen_user.email)


@pytest.fixture
def admin_headers(client, admin_user):
    return login_headers(client, admin_user.email)
