from conftest import auth, register

PROFILE = {"industry": "Fintech", "years_of_experience": 4, "skills": ["Python", "SQL"], "bio": "Backend person"}


def test_probe_is_null_when_signed_out_or_unregistered(client):
    assert client.get("/api/me/skills-profile").json() is None
    assert client.get("/api/me/skills-profile", headers=auth("ghost")).json() is None

    register(client, "alice")
    assert client.get("/api/me/skills-profile", headers=auth("alice")).json() is None


def test_save_is_an_upsert(client):
    register(client, "alice")

    first = client.put("/api/me/skills-profile", json=PROFILE, headers=auth("alice")).json()
    second = client.put(
        "/api/me/skills-profile",
        json={**PROFILE, "skills": ["Go"], "years_of_experience": 5},
        headers=auth("alice"),
    ).json()

    assert second["id"] == first["id"]
    assert second["skills"] == ["Go"]
    assert second["created_at"] == first["created_at"]
    assert client.get("/api/me/skills-profile", headers=auth("alice")).json()["years_of_experience"] == 5


def test_save_requires_registered_user(client):
    assert client.put("/api/me/skills-profile", json=PROFILE).status_code == 401
    assert client.put("/api/me/skills-profile", json=PROFILE, headers=auth("ghost")).status_code == 404


def test_profiles_by_industry(client):
    for sub, industry in [("alice", "Fintech"), ("bob", "Fintech"), ("carol", "Health")]:
        register(client, sub)
        client.put("/api/me/skills-profile", json={**PROFILE, "industry": industry}, headers=auth(sub))

    fintech = client.get("/api/me/skills-profiles/by-industry/Fintech", headers=auth("alice")).json()
    assert [p["user_id"] for p in fintech] == ["alice", "bob"]


def test_negative_experience_is_rejected(client):
    register(client, "alice")
    r = client.put("/api/me/skills-profile", json={**PROFILE, "years_of_experience": -1}, headers=auth("alice"))
    assert r.status_code == 422
