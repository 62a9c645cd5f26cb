"""Password hashing with bcrypt."""

import bcrypt

from app.core.exceptions import HashingException, MalformedHashException, ValidationException

BCRYPT_ROUNDS = 12

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def password_too_long(password: str) -> bool:
    """True if bcrypt would ignore part of password."""
    return len(password.encode("utf-8")) > BCRYPT_MAX_BYTES


def hash_password(password: str) -> str:
    """
    Hash password with bcrypt (cost factor 12) and a random salt.

    Args:
        password: Plain text password, at most 72 UTF-8 bytes

    Returns:
        Bcrypt hash string

    Raises:
        ValidationException: If password is longer than 72 bytes
        HashingException: If the bcrypt backend fails
    """
    if password_too_long(password):
        raise ValidationException(f"password must be at most {BCRYPT_MAX_BYTES} bytes")

    try:
        hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_ROUNDS))
    except ValueError as e:
        raise HashingException(f"failed to hash password: {e}") from e
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str | None) -> bool:
    """
    Verify password against bcrypt hash with constant-time comparison.

    Accounts created through OAuth have no hash; they never verify. Nothing
    longer than 72 bytes was ever hashed, so such passwords never verify
    either.

    Raises:
        MalformedHashException: If password_hash is not a bcrypt hash
    """
    if not password_hash or password_too_long(password):
        return False

    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError as e:
        raise MalformedHashException("stored password hash is malformed") from e
