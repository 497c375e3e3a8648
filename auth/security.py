"""
Password hashing and validation.
Login is a credential check only; no tokens or sessions are issued.
"""
from typing import Optional, Tuple
from passlib.context import CryptContext
import bcrypt

from core.logger import logger
import config

# Password hashing
# Configure to avoid wrap bug detection issues
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__ident="2b",  # Use bcrypt 2b identifier
    bcrypt__rounds=config.BCRYPT_ROUNDS
)

BCRYPT_MAX_BYTES = 72


def validate_password(password: str) -> Tuple[bool, Optional[str]]:
    """
    Validate password length.

    Requirements:
    - Minimum PASSWORD_MIN_LENGTH characters (default 6)
    - Maximum 72 bytes (bcrypt limit)

    Args:
        password: Password to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not password:
        return False, "Password is required"

    if len(password) < config.PASSWORD_MIN_LENGTH:
        return False, f"Password must be at least {config.PASSWORD_MIN_LENGTH} characters long"

    if len(password.encode('utf-8')) > BCRYPT_MAX_BYTES:
        return False, "Password cannot be longer than 72 bytes. Please use a shorter password."

    return True, None


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against a hash."""
    try:
        # Try direct bcrypt first
        password_bytes = plain_password.encode('utf-8')
        hash_bytes = hashed_password.encode('utf-8')
        return bcrypt.checkpw(password_bytes, hash_bytes)
    except ValueError:
        # Hash not in a format bcrypt understands; let passlib identify it
        logger.warning("bcrypt could not read password hash, falling back to passlib")
        return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """
    Hash a password using bcrypt.

    Note: Password validation should be done before calling this function.
    Use validate_password() to check password requirements.
    """
    password_bytes = password.encode('utf-8')
    if len(password_bytes) > BCRYPT_MAX_BYTES:
        raise ValueError("Password cannot be longer than 72 bytes. Please use a shorter password.")

    # Use bcrypt directly to avoid passlib initialization issues
    salt = bcrypt.gensalt(rounds=config.BCRYPT_ROUNDS)
    hashed = bcrypt.hashpw(password_bytes, salt)
    # Return as string (passlib format: $2b$12$...)
    return hashed.decode('utf-8')
