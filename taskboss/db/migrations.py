import logging
from typing import Dict

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


def _add_missing_columns(engine: Engine, table: str, columns: Dict[str, str]) -> bool:
    """
    Add each column in `columns` (name -> SQL type clause) that `table` lacks.

    Returns True if anything was added. A missing table is left for
    create_all, which builds it with every column.
    """
    inspector = inspect(engine)
    if not inspector.has_table(table):
        logger.info(f"No {table} table yet, nothing to migrate")
        return False

    existing = {column["name"] for column in inspector.get_columns(table)}
    missing = [name for name in columns if name not in existing]
    if not missing:
        logger.info(f"{table} table is up to date")
        return False

    with engine.begin() as conn:
        for name in missing:
            logger.info(f"Adding {name} column to {table} table")
            conn.execute(text(f"ALTER TABLE {table} ADD COLUMN {name} {columns[name]}"))
    return True


def add_task_description_column(engine: Engine) -> bool:
    """Add `tasks.description` on databases created before it existed."""
    return _add_missing_columns(engine, "tasks", {"description": "TEXT"})


def add_goal_completion_columns(engine: Engine) -> bool:
    """Add goal status/completion columns and the goals_completed counter."""
    goals_changed = _add_missing_columns(
        engine,
        "goals",
        {
            "status": "VARCHAR(9) DEFAULT 'active'",
            "completed_at": "DATETIME",
            "points_earned": "INTEGER DEFAULT 0",
        },
    )
    stats_changed = _add_missing_columns(
        engine, "user_stats", {"goals_completed": "INTEGER DEFAULT 0"}
    )
    return goals_changed or stats_changed


MIGRATIONS = [add_task_description_column, add_goal_completion_columns]


def run_migrations(engine: Engine) -> None:
    for migration in MIGRATIONS:
        migration(engine)
