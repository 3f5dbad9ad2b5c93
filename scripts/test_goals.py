"""
Goal tests

1. Create / list / update / delete own goals
2. Other students' goals are invisible (404) and unchanged
3. Progress bounds are validated
"""
from conftest import make_client, register_student

GOAL = {
    "title": "Master React and Node.js",
    "type": "short-term",
    "specific": "Complete 3 full-stack projects",
    "timeBound": "End of semester",
    "progress": 35,
}


def test_create_and_list_goals(student_client):
    created = student_client.post("/api/goals", json=GOAL)
    assert created.status_code == 201
    goal = created.json()
    assert goal["status"] == "in_progress"
    assert goal["timeBound"] == "End of semester"
    assert goal["userId"] == student_client.user["id"]

    listed = student_client.get("/api/goals").json()
    assert [g["id"] for g in listed] == [goal["id"]]


def test_goals_are_listed_newest_first(student_client):
    for title in ("First", "Second", "Third", "Fourth"):
        student_client.post("/api/goals", json={**GOAL, "title": title})

    titles = [g["title"] for g in student_client.get("/api/goals").json()]
    assert titles == ["Fourth", "Third", "Second", "First"]

    recent = [g["title"] for g in student_client.get("/api/goals/recent").json()]
    assert recent == ["Fourth", "Third", "Second"]


def test_partial_update(student_client):
    goal = student_client.post("/api/goals", json=GOAL).json()

    response = student_client.patch(f"/api/goals/{goal['id']}", json={"progress": 100})
    assert response.status_code == 200
    updated = response.json()
    assert updated["progress"] == 100
    # Progress and status are independent
    assert updated["status"] == "in_progress"
    assert updated["title"] == GOAL["title"]

    completed = student_client.put(f"/api/goals/{goal['id']}", json={"status": "completed"}).json()
    assert completed["status"] == "completed"
    assert completed["progress"] == 100


def test_progress_out_of_range(student_client):
    response = student_client.post("/api/goals", json={**GOAL, "progress": 150})
    assert response.status_code == 400
    assert "progress" in response.json()["error"]


def test_other_students_goal_is_not_found(student_client):
    goal = student_client.post("/api/goals", json=GOAL).json()

    intruder = make_client()
    register_student(intruder, "intruder@futureflow.com", name="Intruder")

    assert intruder.get(f"/api/goals/{goal['id']}").status_code == 404
    response = intruder.put(f"/api/goals/{goal['id']}", json={"progress": 0, "title": "Hijacked"})
    assert response.status_code == 404
    assert response.json() == {"error": "Goal not found"}
    assert intruder.delete(f"/api/goals/{goal['id']}").status_code == 404
    assert intruder.get("/api/goals").json() == []

    unchanged = student_client.get(f"/api/goals/{goal['id']}").json()
    assert unchanged["title"] == GOAL["title"]
    assert unchanged["progress"] == 35


def test_delete_goal(student_client):
    goal = student_client.post("/api/goals", json=GOAL).json()

    response = student_client.delete(f"/api/goals/{goal['id']}")
    assert response.status_code == 200
    assert student_client.get(f"/api/goals/{goal['id']}").status_code == 404
    assert student_client.delete(f"/api/goals/{goal['id']}").status_code == 404


def test_goals_require_login(client):
    assert client.get("/api/goals").status_code == 401
    assert client.post("/api/goals", json=GOAL).status_code == 401
