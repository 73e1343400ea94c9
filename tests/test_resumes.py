from conftest import auth, register
from interviewhub.services.resume_service import extract_skills, extract_title


def test_title_is_taken_from_the_job_description():
    assert extract_title("Senior Frontend Developer at Acme") == "Senior Frontend Developer Resume"
    assert extract_title("Backend Developer wanted") == "Backend Developer Resume"
    assert extract_title("Data engineer, remote") == "Optimized Resume"


def test_skills_are_keyword_matched():
    assert extract_skills("React and TypeScript, some CSS") == ["React", "TypeScript", "CSS"]
    assert extract_skills("Go and Rust") == []


def test_generate_creates_a_resume(client):
    register(client, "alice")
    r = client.post(
        "/api/resumes/generate",
        json={"current_resume_content": "old", "job_description": "Frontend Developer with React and Next.js"},
        headers=auth("alice"),
    )

    assert r.status_code == 201
    body = r.json()
    assert body["title"] == "Frontend Developer Resume"
    assert body["skills"] == ["React", "Next.js"]
    assert body["template"] == "professional"
    assert body["feedback"]
    assert body["user_id"] == "alice"


def test_crud_for_owner(client):
    register(client, "alice")
    created = client.post("/api/resumes", json={"title": "Mine", "content": "# Me"}, headers=auth("alice")).json()
    rid = created["id"]

    updated = client.patch(f"/api/resumes/{rid}", json={"content": "# Me v2"}, headers=auth("alice")).json()
    assert updated["title"] == "Mine"
    assert updated["content"] == "# Me v2"

    assert [r["id"] for r in client.get("/api/resumes", headers=auth("alice")).json()] == [rid]
    assert client.delete(f"/api/resumes/{rid}", headers=auth("alice")).status_code == 204
    assert client.get(f"/api/resumes/{rid}", headers=auth("alice")).status_code == 404


def test_resumes_are_private(client):
    register(client, "alice")
    register(client, "bob")
    rid = client.post("/api/resumes", json={"title": "Mine", "content": "x"}, headers=auth("alice")).json()["id"]

    assert client.get(f"/api/resumes/{rid}", headers=auth("bob")).status_code == 403
    assert client.patch(f"/api/resumes/{rid}", json={"title": "Hijacked"}, headers=auth("bob")).status_code == 403
    assert client.delete(f"/api/resumes/{rid}", headers=auth("bob")).status_code == 403
    assert client.get("/api/resumes", headers=auth("bob")).json() == []
    assert client.get("/api/resumes").status_code == 401
