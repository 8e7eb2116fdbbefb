# scripts/create_db.py
import logging
import os
import sys

# Add the project root directory to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from taskboss.core.config import settings
from taskboss.core.logging import setup_logging
from taskboss.db.session import init_db

logger = logging.getLogger("taskboss.scripts.create_db")

if __name__ == "__main__":
    setup_logging()
    logger.info(f"Creating tables in {settings.SQLALCHEMY_DATABASE_URI}")
    init_db()
