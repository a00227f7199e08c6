"""
Shared fixtures.

Every test gets its own SQLite file under tmp_path. Write paths open their
transaction with BEGIN IMMEDIATE and a session that has read something holds
a shared lock until its transaction ends, which keeps writers from
committing: tests that go through the HTTP client inspect the database with
short-lived sessions from ``session_factory`` rather than the ``db`` fixture.
"""

import os

# The app reads its configuration at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.core.database import Base, get_db, make_engine
from app.db.models import User, Plan, Day, Section
from app.main import app
from app.services.day_service import DayService


@pytest.fixture
def engine(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# --- HTTP helpers ---------------------------------------------------------

@pytest.fixture
def signup(client):
    """Register a user and return the Authorization header for them."""
    def _signup(email="a@x.com", password="secret1"):
        response = client.post("/auth/register", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}
    return _signup


@pytest.fixture
def alice(signup):
    return signup("alice@example.com")


@pytest.fixture
def bob(signup):
    return signup("bob@example.com")


@pytest.fixture
def alice_tree(client, alice):
    """A plan with one day and one exercise in its workout section, owned by alice."""
    plan = client.post("/plans", json={"title": "Strength"}, headers=alice).json()
    day = client.post(f"/plans/{plan['id']}/days", json={}, headers=alice).json()
    workout = next(s for s in day["sections"] if s["type"] == "workout")
    exercise = client.post(
        f"/sections/{workout['id']}/exercises",
        json={"name": "Squat", "mode": "reps", "sets": 3, "reps": "10"},
        headers=alice,
    ).json()
    return {"plan": plan, "day": day, "section": workout, "exercise": exercise}


# --- service-level helpers ------------------------------------------------

def make_user(session, email="owner@example.com"):
    user = User(email=email, password_hash="not-a-real-hash")
    session.add(user)
    session.commit()
    return user


@pytest.fixture
def owner(db):
    return make_user(db)


@pytest.fixture
def stranger(db):
    return make_user(db, "stranger@example.com")


@pytest.fixture
def plan(db, owner):
    plan = Plan(title="Base plan", user_id=owner.id)
    db.add(plan)
    db.commit()
    return plan


@pytest.fixture
def day(db, owner, plan) -> Day:
    return DayService(db).create(owner.id, plan.id)


@pytest.fixture
def section(db, day) -> Section:
    return next(s for s in day.sections if s.type == "workout")
