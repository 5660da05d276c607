#!/usr/bin/env python3
"""
Initialize the document storage database.

This script creates the tables for the Document Storage API.
It can be run standalone or as part of the deployment process.

Usage:
    # Direct execution
    python scripts/init_database.py

    # Show tables and row counts
    python scripts/init_database.py status

    # With environment file
    ENV_FILE=.env.production python scripts/init_database.py

Environment Variables:
    DATABASE_URL - Full SQLAlchemy async URL (e.g. sqlite+aiosqlite:///./documents.db)
    DATABASE_HOST, DATABASE_PORT, DATABASE_NAME, DATABASE_USER, DATABASE_PASSWORD -
        PostgreSQL connection parts used when DATABASE_URL is unset
"""

import asyncio
import logging
import os
import sys
from pathlib import Path

# Configure logging for CLI output
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load environment variables before the settings module is imported
from dotenv import load_dotenv

env_file = os.environ.get("ENV_FILE", ".env")
env_path = project_root / env_file
if env_path.exists():
    load_dotenv(env_path)
    logger.info(f"Loaded environment from: {env_path}")
else:
    logger.warning(f"No environment file found at: {env_path}")
    logger.info("Using system environment variables")


async def _table_names(engine):
    from sqlalchemy import inspect

    async with engine.connect() as conn:
        return await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())


async def init_tables():
    """Create all database tables."""
    from app.core.db_client import db

    logger.info("=== Database Initialization ===")

    # Test connection first
    logger.info("Testing database connection...")
    if not await db.test_connection():
        logger.error("Could not connect to database")
        logger.error("Please check DATABASE_URL or the DATABASE_* connection settings")
        sys.exit(1)

    logger.info("Database connection successful!")

    logger.info("Creating tables...")
    try:
        await db.create_tables()
        logger.info("Tables created successfully!")
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        sys.exit(1)

    logger.info("Verifying tables...")
    tables = await _table_names(await db.get_engine_async())
    if tables:
        logger.info("Created tables:")
        for table_name in sorted(tables):
            logger.info(f"  - {table_name}")
    else:
        logger.warning("No tables found")

    await db.close_all()
    logger.info("=== Initialization Complete ===")


async def drop_tables():
    """Drop all tables (use with caution!)."""
    from app.core.db_client import db

    logger.warning("=== WARNING: Dropping All Tables ===")

    confirm = input("Are you sure you want to drop all tables? (type 'yes' to confirm): ")
    if confirm.lower() != "yes":
        logger.info("Aborted.")
        return

    await db.drop_tables()
    logger.info("All tables dropped.")
    await db.close_all()


async def show_status():
    """Show database status and table information."""
    from sqlalchemy import text
    from app.core.db_client import db

    logger.info("=== Database Status ===")

    if not await db.test_connection():
        logger.error("Could not connect to database")
        sys.exit(1)

    engine = await db.get_engine_async()
    logger.info(f"Dialect: {engine.dialect.name}")

    tables = await _table_names(engine)
    if tables:
        logger.info("Tables in database:")
        async with engine.connect() as conn:
            for table_name in sorted(tables):
                count_result = await conn.execute(
                    text(f'SELECT COUNT(*) FROM "{table_name}"')
                )
                logger.info(f"  - {table_name}: {count_result.scalar()} rows")
    else:
        logger.info("No tables found. Run 'init' to create tables.")

    await db.close_all()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Initialize the database for the Document Storage API"
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="init",
        choices=["init", "drop", "status"],
        help="Command to run (default: init)"
    )

    args = parser.parse_args()

    if args.command == "init":
        asyncio.run(init_tables())
    elif args.command == "drop":
        asyncio.run(drop_tables())
    elif args.command == "status":
        asyncio.run(show_status())


if __name__ == "__main__":
    main()
