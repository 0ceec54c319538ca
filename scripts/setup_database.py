#!/usr/bin/env python3
"""
HealthTrack Database Setup Script
=================================

Checks the database connection and creates any missing tables. Production
deployments should prefer `alembic upgrade head`; this is for local setups.

Usage:
    python scripts/setup_database.py [--check-only] [--demo-user EMAIL]
"""

import sys
import logging
import argparse
from sqlalchemy import inspect, text

from healthtrack.db.session import engine
from healthtrack.db.base import Base
from healthtrack.core.database_utils import get_db_session
from healthtrack.core.security import create_access_token
from healthtrack import crud
from healthtrack import models  # noqa: F401
from healthtrack.schemas.user import UserCreate

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def test_connection():
    """Test database connection"""
    logger.info("🔌 Testing database connection...")
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("✅ Database connection successful")
        return True
    except Exception as e:
        logger.error(f"❌ Database connection failed: {e}")
        return False


def check_tables_exist():
    """Check if all required tables exist"""
    try:
        existing_tables = inspect(engine).get_table_names()
        required_tables = [table.name for table in Base.metadata.tables.values()]
        missing_tables = [table for table in required_tables if table not in existing_tables]

        if missing_tables:
            logger.warning(f"⚠️ Missing tables: {missing_tables}")
            return False
        logger.info("✅ All required tables exist")
        return True
    except Exception as e:
        logger.error(f"❌ Failed to check tables: {e}")
        return False


def create_tables():
    """Create all required tables"""
    try:
        logger.info("🏗️ Creating database tables...")
        Base.metadata.create_all(bind=engine)
        logger.info(f"✅ Tables: {', '.join(inspect(engine).get_table_names())}")
        return True
    except Exception as e:
        logger.error(f"❌ Failed to create tables: {e}")
        return False


def create_demo_user(email: str):
    """Create a demo user and print a bearer token for it"""
    with get_db_session() as db:
        user = crud.user.get_by_email(db, email=email)
        if user:
            logger.info(f"ℹ️ Demo user already exists: {email}")
        else:
            user = crud.user.create(db, obj_in=UserCreate(email=email, first_name="Demo"))
            logger.info(f"✅ Created demo user: {email}")
        token = create_access_token(user.id)
    logger.info(f"Bearer token: {token}")


def main():
    """Main setup function"""
    parser = argparse.ArgumentParser(description='HealthTrack Database Setup')
    parser.add_argument('--check-only', action='store_true',
                        help='Only check if tables exist, do not create')
    parser.add_argument('--demo-user', metavar='EMAIL',
                        help='Create a demo user and print an access token for it')
    args = parser.parse_args()

    if not test_connection():
        logger.error("❌ Cannot proceed without database connection")
        sys.exit(1)

    tables_exist = check_tables_exist()

    if args.check_only:
        sys.exit(0 if tables_exist else 1)

    if not tables_exist and not create_tables():
        sys.exit(1)

    if args.demo_user:
        create_demo_user(args.demo_user)

    logger.info("🎉 Database setup completed. Start the server with: healthtrack-server")


if __name__ == "__main__":
    main()
