import enum
from datetime import datetime

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from taskboss.db.base import Base


class TaskStatus(str, enum.Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    PAUSED = "paused"


class Priority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


def enum_values(enum_class):
    # Persist the lowercase values, not the member names
    return [member.value for member in enum_class]


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    goal_id = Column(
        Integer, ForeignKey("goals.id", ondelete="SET NULL"), index=True, nullable=True
    )
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    status = Column(
        Enum(TaskStatus, native_enum=False, values_callable=enum_values),
        default=TaskStatus.PENDING,
    )
    priority = Column(
        Enum(Priority, native_enum=False, values_callable=enum_values),
        default=Priority.MEDIUM,
    )
    difficulty = Column(Integer, default=5)  # 1 (trivial) to 10 (very hard)
    estimated_time = Column(Integer, default=30)  # minutes
    due_date = Column(String, nullable=True)
    completed_at = Column(DateTime, nullable=True)
    points_earned = Column(Integer, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    owner = relationship("User", back_populates="tasks")
    goal = relationship("Goal", back_populates="tasks")
