#!/usr/bin/env python3
"""
Reset Script

Deletes every row from every table (children first) and leaves the
schema in place. Follow with scripts/seed.py to reload demo data.

Run: python scripts/reset_db.py
"""
import sys
sys.path.insert(0, '.')

from sqlalchemy import text

from futureflow.db.database import get_db_session
from futureflow.db.schema import DELETE_ORDER, init_db


def main():
    print("=" * 50)
    print("FUTUREFLOW - RESET DATABASE")
    print("=" * 50)

    init_db()

    with get_db_session() as db:
        for table in DELETE_ORDER:
            deleted = db.execute(text(f"DELETE FROM {table}")).rowcount
            print(f"    🗑️  {table}: {deleted} rows")

    print("\n✅ All tables cleared")


if __name__ == "__main__":
    main()
