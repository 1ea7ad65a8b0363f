# scripts/setup/init_db.py
"""
Initialize database: creates all tables and seeds the admin account.
Run once before first launch, or after adding new models.
Usage: python scripts/setup/init_db.py [--admin-email EMAIL --admin-password PASSWORD]
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

import argparse
from sqlalchemy import inspect, text
from app.database import create_tables, engine, SessionLocal
from app.config import settings
from app.services.user_service import ensure_admin


def main():
    parser = argparse.ArgumentParser(description="Create tables and seed the admin user")
    parser.add_argument("--admin-email", default=settings.ADMIN_EMAIL)
    parser.add_argument("--admin-password", default=settings.ADMIN_PASSWORD)
    parser.add_argument("--admin-name", default=settings.ADMIN_FULL_NAME)
    args = parser.parse_args()

    print("Vehicle Registration DB Initialization")
    print("=" * 40)
    print(f"Database: {settings.DATABASE_URL}")

    # Test connection
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("Database connection OK")
    except Exception as e:
        print(f"Cannot connect to database: {e}")
        print("\nMake sure PostgreSQL is running:")
        print("  docker-compose up -d db")
        print("  # or: sudo systemctl start postgresql")
        sys.exit(1)

    print("\nCreating tables...")
    create_tables()

    tables = sorted(inspect(engine).get_table_names())
    print(f"\nTables in database ({len(tables)} total):")
    for t in tables:
        print(f"   - {t}")

    if args.admin_email and args.admin_password:
        db = SessionLocal()
        try:
            admin = ensure_admin(db, args.admin_email, args.admin_password, args.admin_name)
            print(f"\nAdmin account ready: {admin.email}")
        finally:
            db.close()
    else:
        print("\nNo admin seeded (set ADMIN_EMAIL / ADMIN_PASSWORD or pass --admin-email/--admin-password)")

    print("\nDatabase ready! You can now start the backend:")
    print(f"   uvicorn app.main:app --host {settings.BACKEND_HOST} --port {settings.BACKEND_PORT} --reload")


if __name__ == "__main__":
    main()
