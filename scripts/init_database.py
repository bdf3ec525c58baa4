#!/usr/bin/env python3
"""
Database Initialization Script

Creates the settings table.
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from localized_settings.core.logger import get_logger
from localized_settings.stores.database import create_tables, test_connection

logger = get_logger(__name__)


def main():
    """Main function to initialize the database."""
    try:
        logger.info("Starting database initialization...")

        connection_status = test_connection()
        logger.info("Database connection test passed: %s", connection_status)

        create_tables()

        logger.info("Database initialization completed successfully")

    except Exception as e:
        logger.error("Database initialization failed: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
