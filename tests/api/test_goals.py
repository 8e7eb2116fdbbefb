import pytest

from sqlalchemy import text

from taskboss import models


@pytest.fixture
def goal(client, auth_headers):
    response = client.post(
        "/api/goals",
        json={"title": "Learn Spanish", "tags": ["a", "b"], "category": "learning"},
        headers=auth_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


def test_create_goal_defaults(client, auth_headers):
    body = client.post(
        "/api/goals", json={"title": "Minimal"}, headers=auth_headers
    ).json()
    assert body["priority"] == "medium"
    assert body["category"] == "personal"
    assert body["difficulty"] == 5
    assert body["estimated_time"] == 60
    assert body["tags"] == []


def test_tags_round_trip(client, auth_headers, goal):
    assert goal["tags"] == ["a", "b"]

    goals = client.get("/api/goals", headers=auth_headers).json()
    assert goals[0]["tags"] == ["a", "b"]


def test_tags_stored_as_json_text(goal, db):
    raw = db.execute(
        text("SELECT tags FROM goals WHERE id = :id"), {"id": goal["id"]}
    ).scalar_one()
    assert raw == '["a", "b"]'


def test_goal_requires_title(client, auth_headers):
    response = client.post("/api/goals", json={"tags": []}, headers=auth_headers)
    assert response.status_code == 400


def test_update_goal(client, auth_headers, goal):
    response = client.put(
        f"/api/goals/{goal['id']}",
        json={"tags": ["c"], "estimatedTime": 120, "dueDate": "2027-01-01"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["tags"] == ["c"]
    assert body["estimated_time"] == 120
    assert body["due_date"] == "2027-01-01"
    assert body["title"] == "Learn Spanish"


def test_other_user_cannot_update_or_delete(client, goal, other_auth_headers):
    response = client.put(
        f"/api/goals/{goal['id']}", json={"title": "Mine now"}, headers=other_auth_headers
    )
    assert response.status_code == 404

    response = client.delete(f"/api/goals/{goal['id']}", headers=other_auth_headers)
    assert response.status_code == 404


def test_other_user_does_not_see_goal(client, goal, other_auth_headers):
    assert client.get("/api/goals", headers=other_auth_headers).json() == []


def test_delete_goal_unlinks_tasks(client, auth_headers, goal, db):
    task = client.post(
        "/api/tasks",
        json={"title": "Flashcards", "goalId": goal["id"]},
        headers=auth_headers,
    ).json()
    assert task["goal_id"] == goal["id"]

    response = client.delete(f"/api/goals/{goal['id']}", headers=auth_headers)
    assert response.status_code == 204

    db.expire_all()
    remaining = db.get(models.Task, task["id"])
    assert remaining is not None
    assert remaining.goal_id is None


def test_tasks_filter_by_goal(client, auth_headers, goal):
    client.post(
        "/api/tasks", json={"title": "Linked", "goalId": goal["id"]}, headers=auth_headers
    )
    client.post("/api/tasks", json={"title": "Loose"}, headers=auth_headers)

    response = client.get(
        "/api/tasks", params={"goal_id": goal["id"]}, headers=auth_headers
    )
    assert [t["title"] for t in response.json()] == ["Linked"]


def _add_task(client, headers, goal_id, status="pending"):
    response = client.post(
        "/api/tasks",
        json={"title": "Step", "goalId": goal_id, "status": status},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


def test_new_goal_is_active(goal):
    assert goal["status"] == "active"
    assert goal["points_earned"] == 0
    assert goal["completed_at"] is None
    assert goal["progress"] == 0


def test_progress_counts_completed_tasks(client, auth_headers, goal):
    _add_task(client, auth_headers, goal["id"], status="completed")
    _add_task(client, auth_headers, goal["id"])
    _add_task(client, auth_headers, goal["id"])

    body = client.get(f"/api/goals/{goal['id']}", headers=auth_headers).json()
    assert body["progress"] == 33


def test_completing_goal_with_open_tasks(client, auth_headers, goal):
    _add_task(client, auth_headers, goal["id"], status="completed")
    _add_task(client, auth_headers, goal["id"])
    stats_before = client.get("/api/user-stats", headers=auth_headers).json()

    response = client.put(
        f"/api/goals/{goal['id']}", json={"status": "completed"}, headers=auth_headers
    )
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "completed"
    assert body["completed_at"] is not None
    # 100 base + 5 * 20 difficulty, no bonus while a task is open
    assert body["points_earned"] == 200

    stats = client.get("/api/user-stats", headers=auth_headers).json()
    assert stats["total_points"] == stats_before["total_points"] + 200
    assert stats["goals_completed"] == 1


def test_all_tasks_done_adds_bonus(client, auth_headers, goal):
    _add_task(client, auth_headers, goal["id"], status="completed")

    body = client.put(
        f"/api/goals/{goal['id']}",
        json={"status": "completed", "difficulty": 8},
        headers=auth_headers,
    ).json()
    assert body["points_earned"] == 100 + 8 * 20 + 50
    assert body["progress"] == 100


def test_client_points_are_ignored(client, auth_headers, goal):
    body = client.put(
        f"/api/goals/{goal['id']}",
        json={"status": "completed", "pointsEarned": 9999},
        headers=auth_headers,
    ).json()
    assert body["points_earned"] == 250


def test_goal_scores_only_once(client, auth_headers, goal):
    for status in ["completed", "active", "completed", "completed"]:
        response = client.put(
            f"/api/goals/{goal['id']}", json={"status": status}, headers=auth_headers
        )
        assert response.status_code == 200

    stats = client.get("/api/user-stats", headers=auth_headers).json()
    assert stats["total_points"] == 250
    assert stats["goals_completed"] == 1


def test_creating_completed_goal_scores(client, auth_headers):
    body = client.post(
        "/api/goals",
        json={"title": "Done already", "status": "completed", "difficulty": 1},
        headers=auth_headers,
    ).json()
    assert body["points_earned"] == 100 + 20 + 50

    stats = client.get("/api/user-stats", headers=auth_headers).json()
    assert stats["total_points"] == 170
    assert stats["experience_points"] == 170


def test_unknown_goal_status_is_rejected(client, auth_headers, goal):
    response = client.put(
        f"/api/goals/{goal['id']}", json={"status": "abandoned"}, headers=auth_headers
    )
    assert response.status_code == 400
