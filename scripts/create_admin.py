#!/usr/bin/env python3
"""
Script to create an administrator account.
"""
import sys
import getpass
from pathlib import Path

# Add parent directory to the system path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pydantic import ValidationError as SchemaValidationError

from database.connection import Database
from database.models import UserRole
from schemas.user import UserCreate
from services.auth_service import AuthService
from core.exceptions import DisciplineError
import config


def create_admin():
    """Create an administrator user."""
    config.db = Database(
        database_url=config.DATABASE_URL,
        pool_size=config.DB_POOL_SIZE,
        max_overflow=config.DB_MAX_OVERFLOW
    )
    config.db.create_tables()

    print("Creating administrator user...")
    print("=" * 50)

    username = input("Username: ").strip()
    nama = input("Nama: ").strip()
    password = getpass.getpass("Password: ")

    if not username or not nama or not password:
        print("Error: Username, nama, and password are required")
        sys.exit(1)

    try:
        data = UserCreate(
            username=username,
            password=password,
            nama=nama,
            role=UserRole.ADMINISTRATOR
        )
        with config.db.get_session() as db:
            user = AuthService.create_user(db, data)
            print("\nAdministrator created successfully!")
            print(f"  Username: {user.username}")
            print(f"  Nama: {user.nama}")
            print(f"  Role: {user.role.value}")
    except SchemaValidationError as e:
        print(f"\nError: {e}")
        sys.exit(1)
    except DisciplineError as e:
        print(f"\nError: {e.message}")
        sys.exit(1)
    finally:
        config.db.dispose()


if __name__ == "__main__":
    create_admin()
