#!/usr/bin/env python3
"""
Create the NutriTrack tables on the configured database.

Reads DATABASE_URL (or .env) like the application does. Safe to run more
than once; existing tables are left alone.
"""

import sys
import logging
from pathlib import Path

from sqlalchemy import inspect

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import settings
from domain.models import engine, init_database

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("nutritrack.init_db")


def main() -> int:
    logger.info(f"Initializing database at {engine.url.render_as_string(hide_password=True)}")
    try:
        init_database()
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}", exc_info=True)
        return 1

    tables = inspect(engine).get_table_names()
    logger.info(f"Tables present ({len(tables)}): {', '.join(sorted(tables))}")
    if settings.uses_default_secret():
        logger.warning("JWT_SECRET is still the built-in default")
    return 0


if __name__ == "__main__":
    sys.exit(main())
