import enum
from datetime import datetime

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from taskboss.db.base import Base
from taskboss.db.types import JSONEncodedText
from taskboss.models.task import Priority, TaskStatus, enum_values


class GoalStatus(str, enum.Enum):
    ACTIVE = "active"
    COMPLETED = "completed"


class Goal(Base):
    __tablename__ = "goals"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    status = Column(
        Enum(GoalStatus, native_enum=False, values_callable=enum_values),
        default=GoalStatus.ACTIVE,
    )
    priority = Column(
        Enum(Priority, native_enum=False, values_callable=enum_values),
        default=Priority.MEDIUM,
    )
    category = Column(String, default="personal")
    difficulty = Column(Integer, default=5)  # 1 (trivial) to 10 (very hard)
    estimated_time = Column(Integer, default=60)  # minutes
    due_date = Column(String, nullable=True)
    tags = Column(JSONEncodedText(list), default=list)
    completed_at = Column(DateTime, nullable=True)
    points_earned = Column(Integer, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    owner = relationship("User", back_populates="goals")
    tasks = relationship("Task", back_populates="goal", passive_deletes=True)

    @property
    def progress(self) -> int:
        """Percentage of linked tasks that are completed, 0 without tasks."""
        if not self.tasks:
            return 0
        done = sum(1 for task in self.tasks if task.status == TaskStatus.COMPLETED)
        return int(done * 100 / len(self.tasks) + 0.5)
