import os
import tempfile

# settings are read at import time, so the environment goes first
_DB_DIR = tempfile.mkdtemp(prefix="interviewhub-tests-")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_DB_DIR, "test.db")
os.environ["AUTH_JWT_SECRET"] = "test-secret"
os.environ.pop("AUTH_JWT_AUDIENCE", None)
os.environ.pop("AUTH_JWT_ISSUER", None)

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from interviewhub.db.base import Base, SessionLocal, engine
from interviewhub.main import app
from interviewhub.models import registry  # noqa: F401

TEST_SECRET = "test-secret"


@pytest.fixture(autouse=True)
def _tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def make_token(sub: str, **claims) -> str:
    return jwt.encode({"sub": sub, **claims}, TEST_SECRET, algorithm="HS256")


def auth(sub: str) -> dict:
    return {"Authorization": f"Bearer {make_token(sub)}"}


def register(client, sub: str, name: str = None, email: str = None) -> dict:
    r = client.post(
        "/api/users/sync",
        json={"name": name or sub.title(), "email": email or f"{sub}@example.com"},
        headers=auth(sub),
    )
    assert r.status_code == 200, r.text
    return r.json()
