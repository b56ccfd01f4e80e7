#!/usr/bin/env python3
"""
Create the iRemodel tables.

Idempotent: existing tables are left alone. Retried because the database
container may still be starting when this runs.

Usage:
    python -m main_driver.init_db
"""

import logging

from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from tenacity import retry, stop_after_attempt, wait_fixed

from database.database import engine as default_engine
from database.models import Base

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@retry(stop=stop_after_attempt(5), wait=wait_fixed(2), reraise=True)
def init_db(engine: Engine = default_engine):
    logger.info(f"Initializing database at {engine.url.render_as_string(hide_password=True)}")
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.error(f"Error initializing DB: {e}")
        raise

    tables = sorted(inspect(engine).get_table_names())
    logger.info(f"Tables created or verified: {', '.join(tables)}")


if __name__ == "__main__":
    init_db()
