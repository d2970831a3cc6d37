import pytest


@pytest.fixture
def user_id(signup):
    return signup().get_json()["userId"]


def test_save_profile(client, user_id, memory_store):
    res = client.post("/api/profile", json={
        "userId": user_id,
        "role": "mentor",
        "skills": ["python", "sql"],
        "category": "tech",
        "rate": 20,
        "mode": "online",
        "availability": "weekends",
        "bio": "Hi",
    })
    assert res.status_code == 200
    assert res.get_json() == {"message": "Profile saved"}

    profiles = memory_store.load()["profiles"]
    assert len(profiles) == 1
    profile = profiles[0]
    assert profile["userId"] == user_id
    assert profile["skills"] == ["python", "sql"]
    assert profile["rate"] == 20
    assert profile["updatedAt"].endswith("Z")


def test_unknown_user(client, memory_store):
    res = client.post("/api/profile", json={"userId": "nobody", "role": "r", "skills": "s"})
    assert res.status_code == 400
    assert res.get_json() == {"error": "User not found"}
    assert memory_store.load()["profiles"] == []


def test_missing_required_fields(client, user_id, memory_store):
    res = client.post("/api/profile", json={"userId": user_id, "role": "mentor"})
    assert res.status_code == 400
    assert res.get_json() == {"error": "Missing required fields"}
    assert memory_store.load()["profiles"] == []


def test_second_save_replaces_without_merging(client, user_id, memory_store):
    client.post("/api/profile", json={
        "userId": user_id, "role": "mentor", "skills": "python", "bio": "first",
        "rate": 10,
    })
    client.post("/api/profile", json={
        "userId": user_id, "role": "learner", "skills": "go", "mode": "offline",
    })

    profiles = [p for p in memory_store.load()["profiles"] if p["userId"] == user_id]
    assert len(profiles) == 1
    profile = profiles[0]
    assert profile["role"] == "learner"
    assert profile["skills"] == "go"
    assert profile["mode"] == "offline"
    assert "bio" not in profile
    assert "rate" not in profile


def test_explicit_null_optional_is_kept(client, user_id, memory_store):
    client.post("/api/profile", json={
        "userId": user_id, "role": "mentor", "skills": "python", "bio": None,
    })
    profile = memory_store.load()["profiles"][0]
    assert "bio" in profile and profile["bio"] is None
    assert "category" not in profile


def test_empty_skills_list_is_a_value(client, user_id, memory_store):
    res = client.post("/api/profile", json={"userId": user_id, "role": "mentor", "skills": []})
    assert res.status_code == 200
    assert memory_store.load()["profiles"][0]["skills"] == []


@pytest.mark.parametrize("skills", [None, "", False, 0])
def test_falsy_skills_are_missing(client, user_id, skills):
    res = client.post("/api/profile", json={"userId": user_id, "role": "mentor", "skills": skills})
    assert res.status_code == 400
    assert res.get_json() == {"error": "Missing required fields"}
