import pytest

from conftest import auth, make_token, register
from interviewhub.errors import PolicyViolation
from interviewhub.services import user_service


def test_first_user_becomes_admin_then_candidates(client):
    first = register(client, "alice")
    second = register(client, "bob")

    assert first["role"] == "admin"
    assert second["role"] == "candidate"
    assert first["external_id"] == "alice"


def test_sync_is_idempotent(client):
    first = register(client, "alice", name="Alice")
    again = register(client, "alice", name="Someone Else")

    assert again["id"] == first["id"]
    assert again["name"] == "Alice"
    assert len(client.get("/api/users", headers=auth("alice")).json()) == 1


def test_sync_requires_token(client):
    r = client.post("/api/users/sync", json={"name": "x", "email": "x@example.com"})
    assert r.status_code == 401
    assert r.json()["detail"]["message"] == "unauthorized"


def test_invalid_token_is_unauthorized(client):
    r = client.get("/api/users/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401


def test_token_signed_with_other_secret_is_rejected(client):
    from jose import jwt

    token = jwt.encode({"sub": "mallory"}, "wrong-secret", algorithm="HS256")
    r = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401


def test_me_distinguishes_unregistered_from_unauthenticated(client):
    assert client.get("/api/users/me").status_code == 401

    r = client.get("/api/users/me", headers=auth("ghost"))
    assert r.status_code == 404
    assert r.json()["detail"]["message"] == "user_not_found"

    register(client, "ghost")
    assert client.get("/api/users/me", headers=auth("ghost")).json()["external_id"] == "ghost"


def test_get_user_by_external_id(client):
    register(client, "alice")
    assert client.get("/api/users/by-external-id/alice").json()["name"] == "Alice"
    assert client.get("/api/users/by-external-id/nobody").json() is None


def test_role_update_requires_admin(client):
    register(client, "alice")
    bob = register(client, "bob")

    r = client.patch(f"/api/users/{bob['id']}/role", json={"role": "admin"}, headers=auth("bob"))
    assert r.status_code == 403
    assert r.json()["detail"]["message"] == "forbidden"


def test_admin_promotes_interviewer(client):
    register(client, "alice")
    bob = register(client, "bob")

    r = client.patch(f"/api/users/{bob['id']}/role", json={"role": "interviewer"}, headers=auth("alice"))
    assert r.status_code == 200
    assert r.json()["role"] == "interviewer"


def test_last_admin_cannot_be_demoted(client):
    alice = register(client, "alice")

    r = client.patch(f"/api/users/{alice['id']}/role", json={"role": "candidate"}, headers=auth("alice"))

    assert r.status_code == 409
    assert r.json()["detail"]["message"] == "last_admin"
    assert client.get("/api/users/me", headers=auth("alice")).json()["role"] == "admin"


def test_admin_can_be_demoted_when_another_admin_exists(client):
    alice = register(client, "alice")
    bob = register(client, "bob")
    client.patch(f"/api/users/{bob['id']}/role", json={"role": "admin"}, headers=auth("alice"))

    r = client.patch(f"/api/users/{alice['id']}/role", json={"role": "candidate"}, headers=auth("bob"))

    assert r.status_code == 200
    assert r.json()["role"] == "candidate"


def test_role_update_unknown_user(client):
    register(client, "alice")
    r = client.patch("/api/users/999/role", json={"role": "candidate"}, headers=auth("alice"))
    assert r.status_code == 404


def test_role_update_rejects_unknown_role(client):
    alice = register(client, "alice")
    r = client.patch(f"/api/users/{alice['id']}/role", json={"role": "owner"}, headers=auth("alice"))
    assert r.status_code == 422


def test_demoted_admin_loses_admin_access_immediately(client):
    alice = register(client, "alice")
    bob = register(client, "bob")
    client.patch(f"/api/users/{bob['id']}/role", json={"role": "admin"}, headers=auth("alice"))
    assert client.get("/api/admin/users", headers=auth("alice")).status_code == 200

    client.patch(f"/api/users/{alice['id']}/role", json={"role": "candidate"}, headers=auth("bob"))

    assert client.get("/api/admin/users", headers=auth("alice")).status_code == 403


def test_token_claims_carry_subject_only(client):
    # extra claims do not change who the caller is
    token = make_token("carol", role="admin")
    register(client, "alice")
    r = client.post(
        "/api/users/sync",
        json={"name": "Carol", "email": "carol@example.com"},
        headers={"Authorization": f"Bearer {token}"},
    )
    assert r.json()["role"] == "candidate"


def test_admins_demoting_each_other_keep_one_admin(client, db):
    alice = register(client, "alice")
    bob = register(client, "bob")
    client.patch(f"/api/users/{bob['id']}/role", json={"role": "admin"}, headers=auth("alice"))

    user_service.update_role(db, "bob", alice["id"], "candidate")
    with pytest.raises(PolicyViolation) as exc:
        user_service.update_role(db, "bob", bob["id"], "candidate")
    assert exc.value.detail["message"] == "last_admin"

    admins = [u for u in user_service.list_users(db) if u.role == "admin"]
    assert [u.external_id for u in admins] == ["bob"]
