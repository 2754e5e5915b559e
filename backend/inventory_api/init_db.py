"""
Creates the database tables if they do not already exist.

Existing tables are left untouched; this is not a migration tool.
Run it directly against the configured database:
    python -m inventory_api.init_db
"""
import logging
from typing import Optional

from sqlalchemy import create_engine

from inventory_api import models  # noqa: F401  (registers the tables on Base)
from inventory_api.core.config import settings
from inventory_api.core.database import Base

logger = logging.getLogger(__name__)


def init_db(database_url: Optional[str] = None) -> None:
    engine = create_engine(database_url or settings.DATABASE_URL, pool_pre_ping=True)
    try:
        Base.metadata.create_all(bind=engine)
        logger.info(f"Tables ready: {', '.join(sorted(Base.metadata.tables))}")
    finally:
        engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    init_db()
