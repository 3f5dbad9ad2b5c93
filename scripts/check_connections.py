#!/usr/bin/env python3
"""
Connection Check Script

Run this to verify the database connection and see table sizes.
Usage: python scripts/check_connections.py
"""
import sys
sys.path.insert(0, '.')

from futureflow.core.config import get_settings
from futureflow.db.database import test_database_connection, execute_raw_sql
from futureflow.db.schema import DELETE_ORDER


def main():
    settings = get_settings()
    print("=" * 50)
    print("FUTUREFLOW - CONNECTION CHECK")
    print("=" * 50)

    print("\n[1] Testing database...")
    if settings.database_url:
        print(f"    URL: {settings.database_url.split('@')[-1]}")
    else:
        print(f"    URL: postgresql://{settings.postgres_user}:****@{settings.postgres_host}:{settings.postgres_port}/{settings.postgres_db}")

    if not test_database_connection():
        print("    ❌ Database: FAILED")
        return
    print("    ✅ Database: CONNECTED")

    print("\n[2] Table sizes...")
    for table in sorted(DELETE_ORDER):
        try:
            count = execute_raw_sql(f"SELECT COUNT(*) AS total FROM {table}")[0]["total"]
            print(f"    {table}: {count}")
        except Exception as e:
            print(f"    ⚠️  {table}: {e.__class__.__name__} (run scripts/seed.py to create tables)")

    print("\n" + "=" * 50)
    print("Connection check complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
