#!/usr/bin/env python3
"""
Database initialization script.
Run this to create the users, classes, report and courses tables.
"""

import logging
import os
import sys

logger = logging.getLogger("luct.init_db")

def main():
    """Initialize the database schema."""
    from luct.configs import settings
    from luct.configs.logging_config import setup_logging

    setup_logging(settings.LOG_LEVEL)
    try:
        from luct.configs.database import engine, init_db
        from sqlmodel import text

        logger.info("Initializing database schema...")
        logger.info(f"Environment file: {os.getenv('ENV_FILE', 'Not set')}")

        # Test database connection first
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.info("Database connection successful")

        init_db()
        logger.info("Database schema created successfully")

    except Exception as e:
        logger.exception(f"Error initializing database ({type(e).__name__}): {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
