import pytest
from sqlalchemy import Text

from app.core.exceptions import NotFound, Unauthenticated, ValidationError
from app.core.security import create_access_token
from app.db.models import Plan, Day, Section, Exercise
from app.services.plan_service import PlanService


def test_create_plan_trims_title(client, alice):
    r = client.post("/plans", json={"title": "  Strength  "}, headers=alice)
    assert r.status_code == 201
    body = r.json()
    assert body["title"] == "Strength"
    assert body["id"]
    assert body["userId"]
    assert body["createdAt"]


@pytest.mark.parametrize("payload", [{}, {"title": ""}, {"title": "   "}, {"title": None}])
def test_create_plan_requires_title(client, alice, payload):
    r = client.post("/plans", json=payload, headers=alice)
    assert r.status_code == 400
    assert r.json() == {"error": "Title required", "code": "validation_error"}


def test_list_plans_newest_first_and_only_own(client, alice, bob):
    first = client.post("/plans", json={"title": "First"}, headers=alice).json()
    second = client.post("/plans", json={"title": "Second"}, headers=alice).json()
    client.post("/plans", json={"title": "Bob's"}, headers=bob)

    r = client.get("/plans", headers=alice)
    assert r.status_code == 200
    assert [p["id"] for p in r.json()] == [second["id"], first["id"]]


def test_list_plans_empty(client, alice):
    assert client.get("/plans", headers=alice).json() == []


def test_rename_plan(client, alice):
    plan = client.post("/plans", json={"title": "Old"}, headers=alice).json()
    r = client.patch(f"/plans/{plan['id']}", json={"title": " New "}, headers=alice)
    assert r.status_code == 200
    assert r.json()["title"] == "New"
    assert client.get("/plans", headers=alice).json()[0]["title"] == "New"


def test_rename_plan_blank_title(client, alice):
    plan = client.post("/plans", json={"title": "Old"}, headers=alice).json()
    r = client.patch(f"/plans/{plan['id']}", json={"title": " "}, headers=alice)
    assert r.status_code == 400
    assert r.json()["error"] == "Title required"


def test_rename_missing_plan(client, alice):
    r = client.patch("/plans/does-not-exist", json={"title": "X"}, headers=alice)
    assert r.status_code == 404
    assert r.json() == {"error": "Plan not found", "code": "not_found"}


def test_delete_plan_cascades(client, alice, alice_tree, session_factory):
    plan_id = alice_tree["plan"]["id"]

    r = client.delete(f"/plans/{plan_id}", headers=alice)
    assert r.status_code == 204
    assert r.content == b""

    with session_factory() as session:
        assert session.query(Plan).count() == 0
        assert session.query(Day).count() == 0
        assert session.query(Section).count() == 0
        assert session.query(Exercise).count() == 0


def test_delete_plan_twice(client, alice):
    plan = client.post("/plans", json={"title": "Gone"}, headers=alice).json()
    assert client.delete(f"/plans/{plan['id']}", headers=alice).status_code == 204
    assert client.delete(f"/plans/{plan['id']}", headers=alice).status_code == 404


# --- service level ----------------------------------------------------------

def test_service_create_and_list(db, owner):
    service = PlanService(db)
    service.create(owner.id, "A")
    service.create(owner.id, "B")
    assert [p.title for p in service.list(owner.id)] == ["B", "A"]


def test_service_rename_validates_before_lookup(db, owner):
    # a blank title is reported even for an id that doesn't exist
    with pytest.raises(ValidationError):
        PlanService(db).rename(owner.id, "missing", "")


def test_service_delete_foreign_plan(db, plan, stranger):
    with pytest.raises(NotFound):
        PlanService(db).delete(stranger.id, plan.id)
    assert db.get(Plan, plan.id) is not None


def test_create_plan_for_removed_account(client, session_factory):
    token = create_access_token({"user_id": "removed-user"})
    r = client.post("/plans", json={"title": "Orphan"}, headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401
    assert r.json() == {"error": "Unknown user", "code": "unauthenticated"}
    with session_factory() as session:
        assert session.query(Plan).count() == 0


def test_long_title_is_kept(client, alice):
    title = "Twelve week hypertrophy block " * 12
    r = client.post("/plans", json={"title": title}, headers=alice)
    assert r.status_code == 201
    assert r.json()["title"] == title.strip()
    assert isinstance(Plan.__table__.c.title.type, Text)


def test_service_create_for_unknown_user(db):
    with pytest.raises(Unauthenticated):
        PlanService(db).create("removed-user", "Orphan")
    db.rollback()
    assert db.query(Plan).count() == 0
