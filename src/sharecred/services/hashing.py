"""bcrypt password hashing.

The hash is self-describing (``$2b$<cost>$<salt><digest>``), so verification
needs nothing but the stored bytes.
"""

import logging

import bcrypt

from sharecred.exceptions import HashingError
from sharecred.models.settings import DEFAULT_BCRYPT_COST

logger = logging.getLogger(__name__)


def hash_password(password: str, cost: int = DEFAULT_BCRYPT_COST) -> bytes:
    """Return the bcrypt hash of the password with a fresh salt."""
    try:
        salt = bcrypt.gensalt(rounds=cost)
        return bcrypt.hashpw(password.encode("utf-8"), salt)
    except (ValueError, TypeError) as e:
        logger.error(f"Failed to hash password: {e}")
        raise HashingError(f"failed to hash password: {e}") from e


def verify_password(password: str, password_hash: bytes) -> bool:
    """Check a password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash)
    except ValueError as e:
        logger.warning(f"Stored hash is not a valid bcrypt hash: {e}")
        return False
