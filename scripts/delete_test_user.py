#!/usr/bin/env python3
"""
Delete a user created by an end-to-end test run.

Removes the first user whose display name matches. Only works when
IS_TEST=true is set in the environment or .env file.

Usage:
    python scripts/delete_test_user.py "Test User Name"
"""
import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlmodel import Session

from app.core.database import create_db_and_tables, engine
from app.core.errors import SchedulingError
from app.services.identity import delete_test_user


def main():
    parser = argparse.ArgumentParser(description="Delete a test user by display name")
    parser.add_argument("name", help="Display name of the user to delete")
    args = parser.parse_args()

    create_db_and_tables()
    with Session(engine) as session:
        try:
            deleted = delete_test_user(session, args.name)
        except SchedulingError as e:
            print(f"Error: {e}")
            sys.exit(1)

    if deleted:
        print(f"Deleted user '{args.name}'")
    else:
        print(f"No user named '{args.name}'")


if __name__ == "__main__":
    main()
