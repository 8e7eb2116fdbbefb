from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship

from taskboss.db.base import Base
from taskboss.db.types import JSONEncodedText


class UserStats(Base):
    __tablename__ = "user_stats"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)

    # Points and progression
    total_points = Column(Integer, default=0)
    current_level = Column(Integer, default=1)
    experience_points = Column(Integer, default=0)
    tasks_completed = Column(Integer, default=0)
    goals_completed = Column(Integer, default=0)

    # Streaks
    current_streak = Column(Integer, default=0)
    longest_streak = Column(Integer, default=0)
    daily_goal_streak = Column(Integer, default=0)

    total_time_saved = Column(Integer, default=0)  # minutes
    achievements_unlocked = Column(JSONEncodedText(list), default=list)
    preferred_categories = Column(JSONEncodedText(list), default=list)
    last_activity = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="stats")
