"""
Profile, skill progress and academic module tests

1. Profile partial updates and validation
2. New profile skills start at level 25
3. Skill level history is append-only; the latest entry wins
4. Academic modules are private to their owner
"""
from sqlalchemy import text

from conftest import make_client, register_student
from futureflow.db.database import get_db_session


def test_profile_partial_update(student_client):
    first = student_client.put("/api/profile", json={"gpa": 3.4, "interests": ["AI/ML"]})
    assert first.status_code == 200

    second = student_client.patch("/api/profile", json={"bio": "Hardware enthusiast"}).json()
    assert second["gpa"] == 3.4
    assert second["interests"] == ["AI/ML"]
    assert second["bio"] == "Hardware enthusiast"
    assert second["userId"] == student_client.user["id"]


def test_profile_gpa_out_of_range(student_client):
    response = student_client.put("/api/profile", json={"gpa": 4.5})
    assert response.status_code == 400
    assert "gpa" in response.json()["error"]


def test_profile_upsert_when_missing(student_client):
    with get_db_session() as db:
        db.execute(text("DELETE FROM profiles"))

    assert student_client.get("/api/profile").status_code == 404

    created = student_client.post("/api/profile", json={"skills": ["Verilog"]})
    assert created.status_code == 200
    assert created.json()["skills"] == ["Verilog"]


def test_new_skills_start_at_initial_level(student_client):
    student_client.put("/api/profile", json={"skills": ["Python", "React"]})
    student_client.put("/api/profile", json={"skills": ["Python", "React", "Docker"]})

    levels = {row["skillName"]: row["level"] for row in student_client.get("/api/progress/skills").json()}
    assert levels == {"Python": 25, "React": 25, "Docker": 25}

    # Re-sending known skills does not add history
    assert len(student_client.get("/api/progress/skills/Python/history").json()) == 1


def test_recording_levels_keeps_history(student_client):
    student_client.put("/api/profile", json={"skills": ["Python"]})

    for level in (40, 65):
        response = student_client.post("/api/progress/skills/Python", json={"level": level})
        assert response.status_code == 201
        assert response.json()["level"] == level

    history = student_client.get("/api/progress/skills/Python/history").json()
    assert [entry["level"] for entry in history] == [65, 40, 25]

    current = student_client.get("/api/progress/skills").json()
    assert [(row["skillName"], row["level"]) for row in current] == [("Python", 65)]


def test_skill_level_bounds(student_client):
    response = student_client.post("/api/progress/skills/Python", json={"level": 101})
    assert response.status_code == 400


def test_progress_overview(student_client):
    student_client.put("/api/profile", json={"skills": ["C"]})
    student_client.post("/api/goals", json={"title": "Ship firmware", "type": "long-term", "progress": 30})
    student_client.post("/api/academic/modules", json={"moduleName": "Microprocessors", "units": 3})

    overview = student_client.get("/api/progress").json()
    assert overview["overallProgress"] == 30
    assert [row["skillName"] for row in overview["skillProgress"]] == ["C"]
    assert [goal["title"] for goal in overview["goals"]] == ["Ship firmware"]
    assert [module["moduleName"] for module in overview["modules"]] == ["Microprocessors"]


def test_progress_is_private(student_client):
    student_client.post("/api/progress/skills/Python", json={"level": 80})

    other = make_client()
    register_student(other, "other@futureflow.com", name="Other Student")
    assert other.get("/api/progress/skills").json() == []
    assert other.get("/api/progress/skills/Python/history").json() == []


def test_academic_module_crud(student_client):
    created = student_client.post("/api/academic/modules", json={
        "moduleName": "Digital Design", "semester": "2nd Sem", "units": 3,
    })
    assert created.status_code == 201
    module = created.json()
    assert module["completed"] is False

    updated = student_client.put(f"/api/academic/modules/{module['id']}", json={"completed": True, "grade": "1.25"})
    assert updated.status_code == 200
    assert updated.json()["completed"] is True
    assert updated.json()["moduleName"] == "Digital Design"

    assert student_client.delete(f"/api/academic/modules/{module['id']}").status_code == 200
    assert student_client.get("/api/academic/modules").json() == []


def test_academic_modules_owner_only(student_client):
    module = student_client.post("/api/academic/modules", json={"moduleName": "VLSI Design"}).json()

    other = make_client()
    register_student(other, "other@futureflow.com", name="Other Student")

    response = other.put(f"/api/academic/modules/{module['id']}", json={"grade": "5.0"})
    assert response.status_code == 404
    assert response.json() == {"error": "Academic module not found"}
    assert other.delete(f"/api/academic/modules/{module['id']}").status_code == 404

    assert student_client.get("/api/academic/modules").json()[0]["grade"] is None


def test_blank_skill_name_rejected(student_client):
    response = student_client.post("/api/progress/skills/%20", json={"level": 50})
    assert response.status_code == 400
    assert response.json() == {"error": "Skill name is required"}
    assert student_client.get("/api/progress/skills").json() == []
