# scripts/migrate_add_description.py
import logging
import os
import sys

# Add the project root directory to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from taskboss.core.config import settings
from taskboss.core.logging import setup_logging
from taskboss.db.base import engine
from taskboss.db.migrations import add_task_description_column

logger = logging.getLogger("taskboss.scripts.migrate")

if __name__ == "__main__":
    setup_logging()
    logger.info(f"Migrating database: {settings.SQLALCHEMY_DATABASE_URI}")
    if add_task_description_column(engine):
        logger.info("Migration applied")
    else:
        logger.info("Nothing to migrate")
