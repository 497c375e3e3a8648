"""
User account service: management of administrator/teacher accounts and
the credential check used by the login screen.
"""
from typing import List, Optional
from sqlalchemy.orm import Session

from database.models import User
from schemas.user import UserCreate, UserUpdate
from auth.security import verify_password, get_password_hash, validate_password
from core.exceptions import NotFoundError, ValidationError, ConflictError
from core.utils import apply_updates
from core.logger import logger


class AuthService:
    """Service for user accounts."""

    @staticmethod
    def _hash_checked_password(password: str) -> str:
        is_valid, error_message = validate_password(password)
        if not is_valid:
            raise ValidationError(error_message, field="password")
        return get_password_hash(password)

    @staticmethod
    def _ensure_username_free(db: Session, username: str, exclude_id: Optional[int] = None) -> None:
        query = db.query(User).filter(User.username == username)
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)
        if query.first():
            raise ConflictError("User with this username already exists", field="username")

    @staticmethod
    def list_users(db: Session) -> List[User]:
        return db.query(User).order_by(User.id.asc()).all()

    @staticmethod
    def create_user(db: Session, data: UserCreate) -> User:
        """
        Create a new user.

        Args:
            db: Database session
            data: Username, plaintext password, display name, role, active flag

        Returns:
            Created User (password stored as a bcrypt hash)

        Raises:
            ValidationError: password too short or too long
            ConflictError: username already taken
        """
        password_hash = AuthService._hash_checked_password(data.password)
        AuthService._ensure_username_free(db, data.username)

        user = User(
            username=data.username,
            password_hash=password_hash,
            nama=data.nama,
            role=data.role,
            is_active=data.is_active,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info(f"Created user: {user.username} (role: {user.role.value})")
        return user

    @staticmethod
    def update_user(db: Session, user_id: int, data: UserUpdate) -> User:
        """
        Update a user. Only supplied fields change; a supplied password is
        validated and re-hashed.
        """
        user = db.get(User, user_id)
        if user is None:
            raise NotFoundError("User", user_id)

        changes = data.model_dump(exclude_unset=True)
        if "password" in changes:
            password = changes.pop("password")
            if password is None:
                raise ValidationError("password cannot be null", field="password")
            changes["password_hash"] = AuthService._hash_checked_password(password)
        if changes.get("username") is not None and changes["username"] != user.username:
            AuthService._ensure_username_free(db, changes["username"], exclude_id=user_id)

        apply_updates(user, changes)
        db.commit()
        db.refresh(user)
        logger.info(f"Updated user {user_id} ({user.username})")
        return user

    @staticmethod
    def delete_user(db: Session, user_id: int) -> None:
        """Delete a user. Absent ids are ignored."""
        user = db.get(User, user_id)
        if user is None:
            return
        db.delete(user)
        db.commit()
        logger.info(f"Deleted user {user_id}")

    @staticmethod
    def authenticate_user(db: Session, username: str, password: str) -> Optional[User]:
        """
        Check a username/password pair.

        Returns:
            The user when the credentials match an active account, else None.
        """
        user = db.query(User).filter(User.username == username).first()
        if not user:
            logger.warning(f"Login failed: unknown username {username}")
            return None

        if not verify_password(password, user.password_hash):
            logger.warning(f"Login failed: wrong password for {username}")
            return None

        if not user.is_active:
            logger.warning(f"Login refused: user {username} is inactive")
            return None

        logger.info(f"User logged in: {username}")
        return user
