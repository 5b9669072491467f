"""Shared fixtures: in-memory database, authenticated clients, captured OTP codes"""
import os

# Must be set before app modules read settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key-that-is-long-enough-for-hs256"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.rate_limit import reset_rate_limits
from app.core.security import create_access_token
from app.db.session import Base, get_db
from app.main import app

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

OPERATOR_A = "user_operator_a"
OPERATOR_B = "user_operator_b"


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


class RecordingSender:
    """OTP sender that keeps what it was asked to deliver"""

    def __init__(self):
        self.sent = []

    def send(self, phone, code):
        self.sent.append((phone, code))

    def last_code(self, phone):
        return [code for p, code in self.sent if p == phone][-1]


@pytest.fixture(autouse=True)
def _schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def _rate_limits():
    reset_rate_limits()
    yield
    reset_rate_limits()


@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sender(monkeypatch):
    recording = RecordingSender()
    monkeypatch.setattr("app.services.registration.get_otp_sender", lambda: recording)
    return recording


@pytest.fixture
def client():
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def auth_headers(operator_id=OPERATOR_A):
    return {"Authorization": f"Bearer {create_access_token(operator_id)}"}


@pytest.fixture
def headers_a():
    return auth_headers(OPERATOR_A)


@pytest.fixture
def headers_b():
    return auth_headers(OPERATOR_B)


@pytest.fixture
def make_headers():
    return auth_headers
