import pytest

from conftest import auth, register
from interviewhub.errors import OutOfRange, PolicyViolation
from interviewhub.services import mock_interview_service


def _questions(n):
    return [
        {
            "question": f"Q{i}",
            "options": ["right", "wrong", "other", "none"],
            "correctAnswer": "right",
            "explanation": "because",
        }
        for i in range(n)
    ]


# ---- scoring ----

def test_score_counts_answered_questions_only(db):
    mi = mock_interview_service.create(db, "alice", "Quiz", _questions(10))
    for index, answer in [(0, "right"), (1, "right"), (2, "right"), (3, "wrong")]:
        mock_interview_service.submit_answer(db, "alice", mi.id, index, answer)

    done = mock_interview_service.complete(db, "alice", mi.id)

    assert done.score == 75
    assert done.status == "completed"
    assert done.completed_at is not None
    assert done.feedback.startswith("Good work!")


def test_score_is_zero_when_nothing_answered(db):
    mi = mock_interview_service.create(db, "alice", "Quiz", _questions(3))
    done = mock_interview_service.complete(db, "alice", mi.id)

    assert done.score == 0
    assert done.feedback.startswith("This seems to be a challenging area")


@pytest.mark.parametrize(
    "score, prefix",
    [
        (100, "Excellent job!"),
        (90, "Excellent job!"),
        (89.9, "Good work!"),
        (70, "Good work!"),
        (50, "You're making progress"),
        (49, "This seems to be a challenging area"),
    ],
)
def test_feedback_bands(score, prefix):
    assert mock_interview_service.feedback_for_score(score).startswith(prefix)


def test_answer_overwrites_previous_answer(db):
    mi = mock_interview_service.create(db, "alice", "Quiz", _questions(2))
    mock_interview_service.submit_answer(db, "alice", mi.id, 0, "wrong")
    mock_interview_service.submit_answer(db, "alice", mi.id, 0, "right")

    assert mock_interview_service.complete(db, "alice", mi.id).score == 100


@pytest.mark.parametrize("index", [-1, 2, 99])
def test_answer_index_out_of_range(db, index):
    mi = mock_interview_service.create(db, "alice", "Quiz", _questions(2))
    with pytest.raises(OutOfRange):
        mock_interview_service.submit_answer(db, "alice", mi.id, index, "right")


def test_answers_are_frozen_after_completion(db):
    mi = mock_interview_service.create(db, "alice", "Quiz", _questions(2))
    mock_interview_service.submit_answer(db, "alice", mi.id, 0, "wrong")
    mock_interview_service.complete(db, "alice", mi.id)

    with pytest.raises(PolicyViolation):
        mock_interview_service.submit_answer(db, "alice", mi.id, 0, "right")

    again = mock_interview_service.complete(db, "alice", mi.id)
    assert again.score == 0


# ---- HTTP ----

def _profile(client, sub, skills):
    r = client.put(
        "/api/me/skills-profile",
        json={"industry": "Software", "years_of_experience": 3, "skills": skills, "bio": ""},
        headers=auth(sub),
    )
    assert r.status_code == 200, r.text


def test_generate_without_profile_uses_defaults(client):
    register(client, "alice")

    r = client.post("/api/mock-interviews/generate", json={}, headers=auth("alice"))

    assert r.status_code == 201
    body = r.json()
    assert body["title"] == "Mock Interview"
    assert body["status"] == "in_progress"
    assert len(body["questions"]) == 2
    assert "correctAnswer" in body["questions"][0]


def test_generate_from_skills_profile(client):
    register(client, "alice")
    _profile(client, "alice", ["Java"])

    body = client.post("/api/mock-interviews/generate", json={}, headers=auth("alice")).json()

    assert body["title"] == "Java Developer Interview"
    assert len(body["questions"]) == 7


def test_generate_with_category_and_count(client):
    register(client, "alice")
    _profile(client, "alice", ["react", "python"])

    body = client.post(
        "/api/mock-interviews/generate",
        json={"category": "javascript", "number_of_questions": 5},
        headers=auth("alice"),
    ).json()

    assert body["title"] == "javascript Interview"
    assert body["category"] == "javascript"
    assert len(body["questions"]) == 5


def test_mock_interviews_require_registration(client):
    r = client.post("/api/mock-interviews/generate", json={}, headers=auth("stranger"))
    assert r.status_code == 404
    assert client.get("/api/mock-interviews").status_code == 401


def test_full_flow_over_http(client):
    register(client, "alice")
    created = client.post(
        "/api/mock-interviews",
        json={"title": "Custom", "questions": _questions(4)},
        headers=auth("alice"),
    ).json()
    mid = created["id"]

    r = client.post(f"/api/mock-interviews/{mid}/answers", json={"question_index": 1, "answer": "right"}, headers=auth("alice"))
    assert r.json()["questions"][1]["userAnswer"] == "right"
    client.post(f"/api/mock-interviews/{mid}/answers", json={"question_index": 2, "answer": "wrong"}, headers=auth("alice"))

    assert len(client.get("/api/mock-interviews/in-progress", headers=auth("alice")).json()) == 1

    done = client.post(f"/api/mock-interviews/{mid}/complete", headers=auth("alice")).json()
    assert done["score"] == 50
    assert done["feedback"].startswith("You're making progress")
    assert client.get("/api/mock-interviews/in-progress", headers=auth("alice")).json() == []

    late = client.post(f"/api/mock-interviews/{mid}/answers", json={"question_index": 3, "answer": "right"}, headers=auth("alice"))
    assert late.status_code == 409
    assert late.json()["detail"]["message"] == "mock_interview_completed"


def test_out_of_range_answer_over_http(client):
    register(client, "alice")
    mid = client.post("/api/mock-interviews/generate", json={}, headers=auth("alice")).json()["id"]

    r = client.post(f"/api/mock-interviews/{mid}/answers", json={"question_index": 2, "answer": "x"}, headers=auth("alice"))

    assert r.status_code == 400
    assert r.json()["detail"]["message"] == "question_index_out_of_range"


def test_other_users_mock_interview_is_forbidden(client):
    register(client, "alice")
    register(client, "bob")
    mid = client.post("/api/mock-interviews/generate", json={}, headers=auth("alice")).json()["id"]

    assert client.get(f"/api/mock-interviews/{mid}", headers=auth("bob")).status_code == 403
    assert client.post(f"/api/mock-interviews/{mid}/complete", headers=auth("bob")).status_code == 403
    r = client.post(f"/api/mock-interviews/{mid}/answers", json={"question_index": 0, "answer": "x"}, headers=auth("bob"))
    assert r.status_code == 403
    assert client.get("/api/mock-interviews", headers=auth("bob")).json() == []


def test_unknown_mock_interview(client):
    register(client, "alice")
    r = client.get("/api/mock-interviews/999", headers=auth("alice"))
    assert r.status_code == 404
    assert r.json()["detail"]["message"] == "mock_interview_not_found"
