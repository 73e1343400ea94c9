from datetime import timedelta

from conftest import auth, register
from interviewhub.db.base import utcnow
from interviewhub.models.interview import Interview
from interviewhub.services import admin_service


def _interview(db, status, start, end=None, call="c"):
    i = Interview(
        title=f"{status} interview",
        start_time=start,
        end_time=end,
        status=status,
        stream_call_id=call,
        candidate_id="cand",
        interviewer_ids=[],
    )
    db.add(i)
    db.commit()
    return i


def test_admin_endpoints_require_admin(client):
    register(client, "alice")
    register(client, "bob")

    for path in ("/api/admin/stats", "/api/admin/activity", "/api/admin/users", "/api/admin/mock-interviews"):
        assert client.get(path, headers=auth("bob")).status_code == 403
        assert client.get(path).status_code == 401
        assert client.get(path, headers=auth("alice")).status_code == 200


def test_stats_counts_users_and_questions(client):
    register(client, "alice")
    bob = register(client, "bob")
    register(client, "carol")
    client.patch(f"/api/users/{bob['id']}/role", json={"role": "interviewer"}, headers=auth("alice"))
    client.post(
        "/api/custom-questions",
        json={"title": "Q", "description": "d", "interview_id": "iv", "starter_code": {}},
        headers=auth("bob"),
    )

    stats = client.get("/api/admin/stats", headers=auth("alice")).json()

    assert stats["total_users"] == 3
    assert stats["users_by_role"] == {"candidates": 1, "interviewers": 1, "admins": 1}
    assert stats["total_custom_questions"] == 1
    assert stats["total_interviews"] == 0


def test_interview_status_buckets_use_stored_status_and_time(db):
    now = utcnow()
    _interview(db, "scheduled", now + timedelta(days=1), call="future")
    _interview(db, "completed", now - timedelta(days=2), now - timedelta(days=2, hours=-1), call="done")
    # stale: still "scheduled" but already started and never ended
    _interview(db, "scheduled", now - timedelta(hours=1), call="stale")

    stats = admin_service.system_stats(db, now=now)

    assert stats["total_interviews"] == 3
    assert stats["interviews_by_status"] == {"scheduled": 1, "completed": 1, "in_progress": 1}


def test_recent_activity_merges_interviews_and_feedback(client, db):
    register(client, "alice")
    register(client, "cand")
    now = utcnow()
    old = _interview(db, "completed", now - timedelta(days=30), call="old")
    client.post("/api/comments", json={"interview_id": old.id, "content": "ok", "rating": 3}, headers=auth("alice"))

    activity = client.get("/api/admin/activity", headers=auth("alice")).json()

    assert [a["type"] for a in activity] == ["feedback", "interview"]
    assert activity[0]["data"]["content"] == "ok"
    assert activity[1]["data"]["stream_call_id"] == "old"


def test_recent_activity_is_capped(db):
    now = utcnow()
    for n in range(12):
        _interview(db, "scheduled", now + timedelta(hours=n), call=f"c{n}")

    assert len(admin_service.recent_activity(db)) == 10


def test_all_mock_interviews_include_owner_details(client):
    register(client, "alice", name="Alice Admin", email="alice@example.com")
    client.post("/api/mock-interviews/generate", json={}, headers=auth("alice"))

    rows = client.get("/api/admin/mock-interviews", headers=auth("alice")).json()

    assert len(rows) == 1
    assert rows[0]["user_name"] == "Alice Admin"
    assert rows[0]["user_email"] == "alice@example.com"
    assert rows[0]["user_image"] == ""
    assert len(rows[0]["questions"]) == 2


def test_mock_interviews_of_unknown_owner(db):
    from interviewhub.services import mock_interview_service

    mock_interview_service.create(db, "deleted-user", "Orphan", [
        {"question": "q", "options": ["a"], "correctAnswer": "a", "explanation": "e"},
    ])

    rows = admin_service.all_mock_interviews(db)
    assert rows[0]["user_name"] == "Unknown User"
    assert rows[0]["user_email"] == "Unknown Email"
