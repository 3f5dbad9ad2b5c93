"""
Dashboard, ranking and admin analytics tests

1. Student dashboard stats (goal aggregates, recommendation count)
2. Admin dashboard and platform stats
3. Leaderboard order, ranks and currentUser
4. Admin views of a single student
"""
import pytest

from conftest import make_client, register_student


def add_goal(client, title, progress, status="in_progress"):
    response = client.post("/api/goals", json={
        "title": title, "type": "short-term", "progress": progress, "status": status,
    })
    assert response.status_code == 201
    return response.json()


def test_student_stats_without_goals(student_client):
    stats = student_client.get("/api/dashboard/stats").json()
    assert stats == {
        "goalsCount": 0,
        "completedGoals": 0,
        "skillsCount": 0,
        "careersCount": 0,
        "overallProgress": 0,
    }


def test_student_stats_with_goals_and_skills(admin_client, student_client):
    admin_client.post("/api/careers", json={"title": "Data Scientist", "description": "Models",
                                            "requiredSkills": ["Python"]})
    student_client.put("/api/profile", json={"skills": ["Python", "SQL", "Git"]})
    add_goal(student_client, "Finish capstone", 100, status="completed")
    add_goal(student_client, "Learn Docker", 40)
    add_goal(student_client, "Get certified", 0, status="cancelled")

    stats = student_client.get("/api/dashboard/stats").json()
    assert stats["goalsCount"] == 2
    assert stats["completedGoals"] == 1
    assert stats["skillsCount"] == 3
    assert stats["careersCount"] == 1
    # (100 + 40 + 0) / 3 = 46.67
    assert stats["overallProgress"] == 47


def test_admin_dashboard_stats(admin_client, student_client):
    admin_client.post("/api/careers", json={"title": "Network Engineer", "description": "Networks"})
    admin_client.post("/api/resources", json={"title": "CCNA Notes", "type": "pdf", "category": "Networking"})

    stats = admin_client.get("/api/dashboard/stats").json()
    assert stats == {
        "totalStudents": 1,
        "totalCareers": 1,
        "totalOpportunities": 0,
        "totalResources": 1,
    }


def test_admin_platform_stats(admin_client, student_client):
    add_goal(student_client, "Learn Docker", 40)

    stats = admin_client.get("/api/admin/stats").json()
    assert stats["totalUsers"] == 1
    assert stats["totalGoals"] == 1
    assert stats["totalOpportunities"] == 0


def test_dashboard_requires_login(client):
    assert client.get("/api/dashboard/stats").status_code == 401
    assert client.get("/api/students/ranking").status_code == 401


def test_ranking_orders_students(admin_client):
    strong = make_client()
    register_student(strong, "strong@futureflow.com", name="Strong Student")
    strong.put("/api/profile", json={"gpa": 3.6, "skills": ["A", "B", "C", "D", "E"]})
    add_goal(strong, "One", 100, status="completed")
    add_goal(strong, "Two", 100, status="completed")
    add_goal(strong, "Three", 40)

    steady = make_client()
    register_student(steady, "steady@futureflow.com", name="Steady Student")
    steady.put("/api/profile", json={"skills": ["A", "B"]})
    for title in ("One", "Two", "Three", "Four"):
        add_goal(steady, title, 50, status="completed")

    newcomer = make_client()
    register_student(newcomer, "new@futureflow.com", name="Newcomer")

    ranking = steady.get("/api/students/ranking").json()
    leaderboard = ranking["leaderboard"]

    assert ranking["total"] == 3
    assert [entry["name"] for entry in leaderboard] == ["Strong Student", "Steady Student", "Newcomer"]
    assert [entry["rank"] for entry in leaderboard] == [1, 2, 3]
    assert leaderboard[0]["score"] == pytest.approx(70.0)
    assert leaderboard[1]["score"] == pytest.approx(44.0)
    assert leaderboard[2]["score"] == 0
    assert ranking["currentUser"]["name"] == "Steady Student"
    assert ranking["currentUser"]["rank"] == 2

    # Admins are not ranked
    admin_view = admin_client.get("/api/students/ranking").json()
    assert admin_view["total"] == 3
    assert admin_view["currentUser"] is None


def test_admin_student_endpoints(admin_client, student_client):
    student_id = student_client.user["id"]
    student_client.put("/api/profile", json={"gpa": 3.2, "skills": ["Python"], "bio": "Hello"})
    student_client.post("/api/progress/skills/Python", json={"level": 60})
    add_goal(student_client, "Learn Docker", 40)
    add_goal(student_client, "Capstone", 100, status="completed")

    students = admin_client.get("/api/admin/students").json()
    assert [s["id"] for s in students] == [student_id]

    profile = admin_client.get(f"/api/admin/students/{student_id}/profile").json()
    assert profile["bio"] == "Hello"
    assert profile["user"]["email"] == "student@futureflow.com"

    analytics = admin_client.get(f"/api/admin/students/{student_id}/analytics").json()
    assert analytics["stats"] == {
        "totalGoals": 2,
        "completedGoals": 1,
        "inProgressGoals": 1,
        "totalSkills": 1,
        "averageSkillLevel": 60.0,
    }
    assert [record["level"] for record in analytics["progressRecords"]] == [60]


def test_admin_endpoints_reject_students(student_client):
    assert student_client.get("/api/admin/stats").status_code == 403
    assert student_client.get("/api/admin/students").status_code == 403


def test_admin_student_lookup_unknown_id(admin_client):
    response = admin_client.get("/api/admin/students/unknown/analytics")
    assert response.status_code == 404
    assert response.json() == {"error": "Student not found"}
    # Admin accounts are not students either
    assert admin_client.get(f"/api/admin/students/{admin_client.user['id']}/profile").status_code == 404
