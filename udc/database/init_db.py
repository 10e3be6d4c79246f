"""
Database initialization and seeding.

This script:
- Creates the ``users`` table
- Seeds the built-in directory users (only into an empty table)
- Can reset the database (drop and recreate)

Usage:
    # Initialize with seed data
    python -m udc.database.init_db

    # Reset database (drops all tables and recreates)
    python -m udc.database.init_db --reset
"""

import argparse
import logging
from typing import Optional

from sqlalchemy.engine import Engine

from udc.config import settings
from udc.core.logging_config import setup_logging
from udc.database.session import engine, get_db_context, SessionFactory
from udc.models import create_all_tables, drop_all_tables, UserRecord, get_all_user_records, count_user_records
from udc.repositories.users import get_all_users

logger = logging.getLogger(__name__)


def create_tables(reset: bool = False, engine_instance: Optional[Engine] = None) -> None:
    """
    Create all database tables.

    Args:
        reset: If True, drop existing tables first
        engine_instance: Engine to use (defaults to the global engine)
    """
    engine_instance = engine_instance or engine
    if reset:
        logger.info("Dropping existing tables")
        drop_all_tables(engine_instance)

    logger.info("Creating database tables")
    create_all_tables(engine_instance)


def seed_users(session_factory: SessionFactory = get_db_context) -> int:
    """
    Seed the built-in users.

    Seeding only happens when the table is empty, so running it twice
    leaves the same seven rows.

    Returns:
        Number of rows inserted
    """
    with session_factory() as db:
        existing = count_user_records(db)
        if existing:
            logger.info("users table already holds %d rows, skipping seed", existing)
            return 0

        users = get_all_users()
        for user in users:
            db.add(UserRecord.from_user(user))
        logger.info("Seeded %d users", len(users))
        return len(users)


def print_database_status(session_factory: SessionFactory = get_db_context) -> None:
    """Print current database status and the stored users."""
    print("\n" + "=" * 60)
    print("Database Status")
    print("=" * 60)

    with session_factory() as db:
        records = get_all_user_records(db)
        print(f"  Users: {len(records)}")
        for record in records:
            print(f"    • {record.id}: {record}")

    print("=" * 60)


def initialize_database(
    reset: bool = False,
    engine_instance: Optional[Engine] = None,
    session_factory: SessionFactory = get_db_context,
) -> int:
    """
    Initialize the database: create tables, then seed users.

    Args:
        reset: Drop existing tables before creating
        engine_instance: Engine to create tables on
        session_factory: Session context used for seeding

    Returns:
        Number of users inserted by the seed step
    """
    create_tables(reset=reset, engine_instance=engine_instance)
    return seed_users(session_factory)


def main(argv=None):
    """Main entry point with CLI argument parsing."""
    parser = argparse.ArgumentParser(
        description="Initialize and seed the user directory database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create the users table and seed it
  python -m udc.database.init_db

  # Reset database (drop all tables and recreate)
  python -m udc.database.init_db --reset
        """
    )

    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop existing tables before creating (WARNING: deletes all data!)"
    )

    parser.add_argument(
        "--yes",
        action="store_true",
        help="Skip the confirmation prompt for --reset"
    )

    args = parser.parse_args(argv)
    setup_logging(settings.log_level, settings.log_file)

    if args.reset and not args.yes:
        print("WARNING: This will DELETE ALL DATA in the database!")
        response = input("Are you sure? Type 'yes' to continue: ")
        if response.lower() != 'yes':
            print("Aborted")
            return

    inserted = initialize_database(reset=args.reset)
    print(f"Inserted {inserted} users")
    print_database_status()


if __name__ == "__main__":
    main()
