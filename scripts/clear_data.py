#!/usr/bin/env python3
"""
Database clearing script for the Multiblog API.

Deletes every blog and tag. Authors, categories, posts, post tags and
comments go with them through the schema's ON DELETE CASCADE rules.

IMPORTANT: This will delete ALL data! Use with caution.

Usage:
    python scripts/clear_data.py [--confirm]
"""

import argparse
import sys
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
project_root = Path(__file__).parent.parent
env_path = project_root / ".env"
load_dotenv(dotenv_path=env_path)

# Add project root to path
sys.path.insert(0, str(project_root))

from sqlmodel import Session, delete
from multiblog.database.engine import engine
from multiblog.models.blog import Blog, Tag


# ANSI color codes
class Colors:
    GREEN = '\033[92m'
    RED = '\033[91m'
    YELLOW = '\033[93m'
    CYAN = '\033[96m'
    RESET = '\033[0m'
    BOLD = '\033[1m'


def clear_table(session: Session, model, name: str) -> int:
    """Delete every row of ``model``; returns the number of deleted rows."""
    try:
        result = session.exec(delete(model))
        count = result.rowcount if hasattr(result, 'rowcount') else 0
        session.commit()

        print(f"{Colors.GREEN}✓{Colors.RESET} Cleared {name}: {count} rows deleted")
        return count
    except Exception as e:
        session.rollback()
        print(f"{Colors.RED}✗{Colors.RESET} Failed to clear {name}: {str(e)}")
        return 0


def clear_all_data() -> int:
    with Session(engine) as session:
        total_deleted = clear_table(session, Blog, "Blogs (with authors, categories, posts, comments)")
        total_deleted += clear_table(session, Tag, "Tags")
    return total_deleted


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Clear all data from the Multiblog database")
    parser.add_argument("--confirm", action="store_true", help="Skip confirmation prompt")
    args = parser.parse_args()

    print(f"\n{Colors.BOLD}{Colors.RED}WARNING: This will DELETE ALL DATA from the database!{Colors.RESET}\n")

    if not args.confirm:
        response = input(f"{Colors.YELLOW}Are you sure you want to continue? (yes/no): {Colors.RESET}")
        if response.lower() not in ['yes', 'y']:
            print(f"\n{Colors.CYAN}Operation cancelled.{Colors.RESET}")
            sys.exit(0)

    total_deleted = clear_all_data()
    print(f"\n{Colors.GREEN}✓ Database cleared: {total_deleted} top-level rows deleted{Colors.RESET}\n")


if __name__ == "__main__":
    main()
