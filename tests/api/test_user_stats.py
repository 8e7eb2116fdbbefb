def _complete_task(client, headers, **fields):
    task = client.post(
        "/api/tasks", json={"title": "Work", **fields}, headers=headers
    ).json()
    response = client.put(
        f"/api/tasks/{task['id']}", json={"status": "completed"}, headers=headers
    )
    assert response.status_code == 200
    return response.json()


def test_read_my_stats(client, auth_headers, registered_user):
    response = client.get("/api/user-stats", headers=auth_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["user_id"] == registered_user["user"]["id"]
    assert body["current_level"] == 1
    assert body["achievements_unlocked"] == []


def test_update_own_stats(client, auth_headers):
    stats = client.get("/api/user-stats", headers=auth_headers).json()
    response = client.put(
        f"/api/user-stats/{stats['id']}",
        json={"preferredCategories": ["work", "health"], "dailyGoalStreak": 2},
        headers=auth_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["preferred_categories"] == ["work", "health"]
    assert body["daily_goal_streak"] == 2
    assert body["total_points"] == 0


def test_updating_xp_recomputes_level(client, auth_headers):
    stats = client.get("/api/user-stats", headers=auth_headers).json()
    response = client.put(
        f"/api/user-stats/{stats['id']}",
        json={"experiencePoints": 2500},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert response.json()["current_level"] == 3


def test_cannot_touch_other_users_stats(client, auth_headers, other_auth_headers):
    stats = client.get("/api/user-stats", headers=auth_headers).json()

    response = client.get(f"/api/user-stats/{stats['id']}", headers=other_auth_headers)
    assert response.status_code == 404

    response = client.put(
        f"/api/user-stats/{stats['id']}",
        json={"totalPoints": 100000},
        headers=other_auth_headers,
    )
    assert response.status_code == 404


def test_completion_shows_up_in_stats(client, auth_headers):
    _complete_task(client, auth_headers, difficulty=10, estimatedTime=60)

    stats = client.get("/api/user-stats", headers=auth_headers).json()
    assert stats["total_points"] == 120
    assert stats["experience_points"] == 120
    assert stats["tasks_completed"] == 1
    assert stats["current_streak"] == 1
    assert stats["longest_streak"] == 1
    assert stats["achievements_unlocked"] == ["first_task"]


def test_reset_progress_keeps_tasks(client, auth_headers):
    _complete_task(client, auth_headers)

    response = client.post("/api/user-stats/reset", headers=auth_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["total_points"] == 0
    assert body["current_level"] == 1
    assert body["tasks_completed"] == 0
    assert body["achievements_unlocked"] == []

    tasks = client.get("/api/tasks", headers=auth_headers).json()
    assert len(tasks) == 1


def test_achievements_catalogue(client, auth_headers):
    _complete_task(client, auth_headers)

    response = client.get("/api/achievements", headers=auth_headers)
    assert response.status_code == 200
    achievements = {a["id"]: a for a in response.json()}
    assert len(achievements) == 10
    assert achievements["first_task"]["unlocked"] is True
    assert achievements["first_task"]["progress"] == 1
    assert achievements["tasks_10"]["unlocked"] is False
    assert achievements["legend"]["rarity"] == "legendary"


def test_preferences_defaults(client, auth_headers):
    response = client.get("/api/user/preferences", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {
        "ai_models": {
            "chat_model": "gpt-4o",
            "quote_model": "gpt-4o-mini",
            "fallback_model": "gpt-4o-mini",
        }
    }


def test_preferences_update_merges(client, auth_headers):
    response = client.put(
        "/api/user/preferences",
        json={"aiModels": {"chatModel": "gpt-4.1"}},
        headers=auth_headers,
    )
    assert response.status_code == 200

    client.put(
        "/api/user/preferences",
        json={"aiModels": {"fallbackModel": "gpt-4.1-mini"}},
        headers=auth_headers,
    )

    ai_models = client.get("/api/user/preferences", headers=auth_headers).json()[
        "ai_models"
    ]
    assert ai_models["chat_model"] == "gpt-4.1"
    assert ai_models["fallback_model"] == "gpt-4.1-mini"
    assert ai_models["quote_model"] == "gpt-4o-mini"
