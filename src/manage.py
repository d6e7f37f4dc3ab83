"""Ledger database management CLI.

Creates and drops the relational schema when the record store is backed by
a SQL provider (see the ``[production]`` overlay in ledger/domain.toml).

Usage:
    PROTEAN_ENV=production python src/manage.py setup-db   # Create tables
    PROTEAN_ENV=production python src/manage.py drop-db    # Drop tables
"""

import argparse
import sys


def setup_database():
    """Create database tables for the ledger domain."""
    from ledger.domain import ledger
    from ledger.utils.db import setup_db

    print("Initializing ledger domain...")
    ledger.init()
    print("Creating ledger database schema...")
    created = setup_db(ledger)
    if created:
        print(f"  schema ready on: {', '.join(created)}")
    else:
        print("  no SQL provider configured, nothing to create.")

    print("Done.")


def drop_database():
    """Drop database tables for the ledger domain."""
    from ledger.domain import ledger
    from ledger.utils.db import drop_db

    print("Initializing ledger domain...")
    ledger.init()
    print("Dropping ledger database schema...")
    dropped = drop_db(ledger)
    if dropped:
        print(f"  schema dropped on: {', '.join(dropped)}")
    else:
        print("  no SQL provider configured, nothing to drop.")

    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Ledger database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
