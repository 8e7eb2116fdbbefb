# taskboss/services/goal_service.py
import logging
from datetime import datetime
from typing import List

from sqlalchemy.orm import Session

from taskboss import schemas
from taskboss.core.exceptions import ResourceNotFoundException
from taskboss.models.goal import Goal, GoalStatus
from taskboss.models.task import TaskStatus
from taskboss.repositories.goal_repository import GoalRepository
from taskboss.services.gamification_service import calculate_goal_points
from taskboss.services.progression_service import ProgressionService

logger = logging.getLogger(__name__)


class GoalService:
    """Service for goal operations."""

    def __init__(self, db: Session):
        self.db = db
        self.repository = GoalRepository(db)
        self.progression_service = ProgressionService(db)

    def get_goals(self, user_id: int, skip: int = 0, limit: int = 100) -> List[Goal]:
        return self.repository.get_user_goals(user_id, skip=skip, limit=limit)

    def get_goal(self, user_id: int, goal_id: int) -> Goal:
        goal = self.repository.get_user_goal_by_id(user_id, goal_id)
        if not goal:
            raise ResourceNotFoundException(f"Goal with ID {goal_id} not found")
        return goal

    def create_goal(self, user_id: int, goal_data: schemas.GoalCreate) -> Goal:
        goal = Goal(**goal_data.model_dump(), user_id=user_id, points_earned=0)

        if goal.status == GoalStatus.COMPLETED:
            return self._complete(user_id, goal)

        goal = self.repository.save(goal)
        logger.info(f"Goal created successfully with ID {goal.id}")
        return goal

    def update_goal(
        self, user_id: int, goal_id: int, update_data: schemas.GoalUpdate
    ) -> Goal:
        goal = self.get_goal(user_id, goal_id)
        was_completed_before = goal.status == GoalStatus.COMPLETED
        self.repository.apply(goal, update_data.changes())

        # Like tasks, a goal scores once even if it is reopened
        if (
            not was_completed_before
            and goal.status == GoalStatus.COMPLETED
            and not goal.points_earned
        ):
            return self._complete(user_id, goal)

        return self.repository.save(goal)

    def delete_goal(self, user_id: int, goal_id: int) -> None:
        if not self.repository.delete_owned(user_id, goal_id):
            raise ResourceNotFoundException(f"Goal with ID {goal_id} not found")
        logger.info(f"Goal {goal_id} deleted")

    def _complete(self, user_id: int, goal: Goal) -> Goal:
        """Score the goal and update stats in a single commit."""
        now = datetime.utcnow()
        try:
            all_tasks_completed = all(
                task.status == TaskStatus.COMPLETED for task in goal.tasks
            )
            goal.points_earned = calculate_goal_points(
                goal.difficulty, all_tasks_completed
            )
            goal.completed_at = now
            self.db.add(goal)
            self.db.flush()
            self.progression_service.handle_goal_completion(user_id, goal, now)
            self.db.commit()
        except Exception:
            self.db.rollback()
            logger.error(f"Completing goal for user {user_id} failed, rolled back")
            raise

        self.db.refresh(goal)
        logger.info(f"Goal {goal.id} completed for {goal.points_earned} points")
        return goal
