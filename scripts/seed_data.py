#!/usr/bin/env python3
"""
Database Seed Script

Creates the tables and populates an empty database with the starter
catalog and the default `testuser` account.

USAGE:
    # From the project root with the virtualenv activated
    python scripts/seed_data.py

    # Drop and recreate every table first
    python scripts/seed_data.py --reset
"""

import argparse
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from catalog_api.database import SessionLocal, create_tables, drop_tables
from catalog_api.seed import seed_database


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the Book Catalog database")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop all tables before seeding (deletes all data!)",
    )
    args = parser.parse_args()

    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    if args.reset:
        print("Dropping existing tables...")
        drop_tables()

    create_tables()

    db = SessionLocal()
    try:
        seed_database(db)
    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()

    print("Database seeding completed successfully!")
    print("Default login: testuser / Password123!")


if __name__ == "__main__":
    main()
