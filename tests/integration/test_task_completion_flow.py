"""
Integration tests for task and goal completion.
Covers points, stats, streaks and achievements end to end, plus the
all-or-nothing write of the completed row and the stats.
"""
from datetime import datetime, timedelta
from unittest.mock import patch

import pytest

from taskboss import models, schemas
from taskboss.services.goal_service import GoalService
from taskboss.services.progression_service import ProgressionService
from taskboss.services.task_service import TaskService


@pytest.fixture
def user(db):
    user = models.User(email="flow@example.com", full_name="Flow", password="x")
    user.stats = models.UserStats(achievements_unlocked=[])
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def task_service(db):
    return TaskService(db)


def _stats(db, user):
    db.expire_all()
    return db.query(models.UserStats).filter_by(user_id=user.id).one()


def test_points_awarded_only_once(db, user, task_service):
    task = task_service.create_task(user.id, schemas.TaskCreate(title="Once"))

    completed = task_service.update_task(
        user.id, task.id, schemas.TaskUpdate(status="completed")
    )
    assert completed.points_earned == 60

    # Saving the completed task again, with or without status, awards nothing
    task_service.update_task(user.id, task.id, schemas.TaskUpdate(status="completed"))
    task_service.update_task(user.id, task.id, schemas.TaskUpdate(title="Renamed"))

    stats = _stats(db, user)
    assert stats.total_points == 60
    assert stats.tasks_completed == 1


def test_uncompleting_keeps_points(db, user, task_service):
    task = task_service.create_task(user.id, schemas.TaskCreate(title="Flip"))
    task_service.update_task(user.id, task.id, schemas.TaskUpdate(status="completed"))
    task_service.update_task(user.id, task.id, schemas.TaskUpdate(status="pending"))

    assert _stats(db, user).total_points == 60


def test_reopened_task_does_not_score_again(db, user, task_service):
    task = task_service.create_task(user.id, schemas.TaskCreate(title="Loop"))
    for _ in range(3):
        task_service.update_task(
            user.id, task.id, schemas.TaskUpdate(status="completed")
        )
        task_service.update_task(user.id, task.id, schemas.TaskUpdate(status="pending"))

    stats = _stats(db, user)
    assert stats.total_points == 60
    assert stats.tasks_completed == 1
    assert db.get(models.Task, task.id).points_earned == 60


def test_level_up_from_completions(db, user, task_service):
    stats = _stats(db, user)
    stats.experience_points = 950
    stats.total_points = 950
    db.commit()

    task = task_service.create_task(user.id, schemas.TaskCreate(title="Push"))
    task_service.update_task(user.id, task.id, schemas.TaskUpdate(status="completed"))

    stats = _stats(db, user)
    assert stats.experience_points == 1010
    assert stats.current_level == 2
    assert "points_1000" in stats.achievements_unlocked


def test_streak_continues_from_yesterday(db, user, task_service):
    stats = _stats(db, user)
    stats.current_streak = 2
    stats.longest_streak = 2
    stats.last_activity = datetime.utcnow() - timedelta(days=1)
    db.commit()

    task = task_service.create_task(user.id, schemas.TaskCreate(title="Daily"))
    task_service.update_task(user.id, task.id, schemas.TaskUpdate(status="completed"))

    stats = _stats(db, user)
    assert stats.current_streak == 3
    assert stats.longest_streak == 3
    assert "streak_3" in stats.achievements_unlocked


def test_streak_resets_after_gap(db, user, task_service):
    stats = _stats(db, user)
    stats.current_streak = 6
    stats.longest_streak = 6
    stats.last_activity = datetime.utcnow() - timedelta(days=3)
    db.commit()

    task = task_service.create_task(user.id, schemas.TaskCreate(title="Back"))
    task_service.update_task(user.id, task.id, schemas.TaskUpdate(status="completed"))

    stats = _stats(db, user)
    assert stats.current_streak == 1
    assert stats.longest_streak == 6


def test_achievements_keep_order_without_duplicates(db, user, task_service):
    stats = _stats(db, user)
    stats.achievements_unlocked = ["streak_3"]
    stats.longest_streak = 3
    db.commit()

    task = task_service.create_task(user.id, schemas.TaskCreate(title="First"))
    task_service.update_task(user.id, task.id, schemas.TaskUpdate(status="completed"))

    assert _stats(db, user).achievements_unlocked == ["streak_3", "first_task"]


def test_missing_stats_row_is_created(db, task_service):
    user = models.User(email="nostats@example.com", full_name="No Stats", password="x")
    db.add(user)
    db.commit()

    task = task_service.create_task(user.id, schemas.TaskCreate(title="Solo"))
    task_service.update_task(user.id, task.id, schemas.TaskUpdate(status="completed"))

    stats = _stats(db, user)
    assert stats.total_points == 60
    assert stats.current_streak == 1


def test_failed_stats_update_rolls_back_task(db, user, task_service):
    task = task_service.create_task(user.id, schemas.TaskCreate(title="Atomic"))

    with patch.object(
        ProgressionService,
        "handle_task_completion",
        side_effect=RuntimeError("stats write failed"),
    ):
        with pytest.raises(RuntimeError):
            task_service.update_task(
                user.id, task.id, schemas.TaskUpdate(status="completed")
            )

    db.expire_all()
    stored = db.get(models.Task, task.id)
    assert stored.status == models.TaskStatus.PENDING
    assert stored.points_earned == 0
    assert stored.completed_at is None
    assert _stats(db, user).total_points == 0


def test_failed_stats_update_rolls_back_goal(db, user):
    goal_service = GoalService(db)
    goal = goal_service.create_goal(user.id, schemas.GoalCreate(title="Atomic goal"))

    with patch.object(
        ProgressionService,
        "handle_goal_completion",
        side_effect=RuntimeError("stats write failed"),
    ):
        with pytest.raises(RuntimeError):
            goal_service.update_goal(
                user.id, goal.id, schemas.GoalUpdate(status="completed")
            )

    db.expire_all()
    stored = db.get(models.Goal, goal.id)
    assert stored.status == models.GoalStatus.ACTIVE
    assert stored.points_earned == 0
    assert stored.completed_at is None
    assert _stats(db, user).goals_completed == 0
