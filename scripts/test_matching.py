"""
Recommendation & ranking math tests

1. Skill overlap scoring (case-insensitive substring match)
2. Top-N career selection and tie order
3. Goal aggregates (overall progress rounding)
4. Composite ranking score and leaderboard order
"""
import pytest

from futureflow.services.matching_service import (
    round_half_up,
    score_career,
    recommend_careers,
    summarize_goals,
    compute_ranking_score,
    build_leaderboard,
)


def career(title, skills):
    return {"id": title.lower(), "title": title, "required_skills": skills}


CATALOG = [
    career("Software Engineer", ["JavaScript", "Python", "Git", "SQL"]),
    career("Full Stack Developer", ["React", "Node.js", "TypeScript", "PostgreSQL"]),
    career("Data Scientist", ["Python", "SQL", "Machine Learning"]),
    career("Network Engineer", ["TCP/IP", "Cisco"]),
    career("VLSI Design Engineer", ["Verilog", "VHDL"]),
    career("Embedded Systems Engineer", ["C", "C++", "ARM"]),
]


def test_round_half_up_matches_math_round():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(0.125, 2) == 0.13
    assert round_half_up(70.00000000000001, 2) == 70.0


def test_score_career_is_case_insensitive_substring():
    assert score_career(career("Web", ["React", "Node.js"]), ["react"]) == 1
    # "SQL" is found inside "PostgreSQL"
    assert score_career(career("Web", ["PostgreSQL"]), ["sql"]) == 1
    assert score_career(career("Web", ["React"]), ["Rust"]) == 0


def test_score_career_without_required_skills():
    assert score_career({"title": "Empty"}, ["Python"]) == 0


def test_recommend_orders_by_overlap():
    top = recommend_careers(CATALOG, ["python", "SQL", "machine learning"], limit=2)
    assert [c["title"] for c in top] == ["Data Scientist", "Software Engineer"]


def test_recommend_ties_keep_catalog_order():
    top = recommend_careers(CATALOG, ["Cisco", "Verilog"], limit=3)
    assert [c["title"] for c in top] == ["Network Engineer", "VLSI Design Engineer", "Software Engineer"]


def test_recommend_without_skills_returns_first_careers():
    top = recommend_careers(CATALOG, [], limit=5)
    assert [c["title"] for c in top] == [c["title"] for c in CATALOG[:5]]


def test_recommend_empty_catalog():
    assert recommend_careers([], ["Python"]) == []


def test_summarize_goals_counts_and_mean():
    goals = [
        {"status": "completed", "progress": 100},
        {"status": "in_progress", "progress": 50},
        {"status": "cancelled", "progress": 25},
    ]
    active, completed, overall = summarize_goals(goals)
    assert (active, completed) == (2, 1)
    # (100 + 50 + 25) / 3 = 58.33
    assert overall == 58


def test_summarize_goals_rounds_half_up():
    goals = [{"status": "in_progress", "progress": 50}, {"status": "in_progress", "progress": 51}]
    assert summarize_goals(goals)[2] == 51


def test_summarize_goals_empty():
    assert summarize_goals([]) == (0, 0, 0)


def test_ranking_score_examples():
    assert compute_ranking_score(5, 2, 80, 3.6) == pytest.approx(70.00)
    assert compute_ranking_score(2, 4, 50, None) == pytest.approx(44.00)


def test_ranking_score_clamps_gpa():
    assert compute_ranking_score(0, 0, 0, 5.0) == pytest.approx(20.0)
    assert compute_ranking_score(0, 0, 0, -1.0) == pytest.approx(0.0)


def test_build_leaderboard_ranks_by_score():
    students = [{"id": "b", "name": "Student B"}, {"id": "a", "name": "Student A"}, {"id": "c", "name": "New"}]
    profiles = {
        "a": {"user_id": "a", "skills": ["1", "2", "3", "4", "5"], "gpa": 3.6},
        "b": {"user_id": "b", "skills": ["1", "2"], "gpa": None},
    }
    goals = {
        "a": [{"status": "completed", "progress": 100}, {"status": "completed", "progress": 100},
              {"status": "in_progress", "progress": 40}],
        "b": [{"status": "completed", "progress": 50}] * 4,
    }

    leaderboard = build_leaderboard(students, profiles, goals)

    assert [entry["user_id"] for entry in leaderboard] == ["a", "b", "c"]
    assert [entry["rank"] for entry in leaderboard] == [1, 2, 3]
    assert leaderboard[0]["score"] == pytest.approx(70.00)
    assert leaderboard[1]["score"] == pytest.approx(44.00)
    assert leaderboard[2]["score"] == 0
    assert leaderboard[2]["skills_count"] == 0
