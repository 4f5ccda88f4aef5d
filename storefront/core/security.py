"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from storefront.core.config import settings
from storefront.schemas.auth import TokenClaims

REQUIRED_CLAIMS = ["sub", "exp", "iat"]


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(
    subject_id: int,
    email: str,
    role: str,
    *,
    issued_at: datetime | None = None,
) -> str:
    """Create a JWT access token carrying sub (user id), email, role, iat and exp."""
    now = issued_at or datetime.now(UTC)
    expire = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": str(subject_id),
        "email": email,
        "role": role,
        "exp": expire,
        "iat": now,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> TokenClaims:
    """
    Decode and validate a JWT; return its identity claims.
    Raises jwt.InvalidTokenError on a bad signature, malformed or expired token,
    or a payload without a usable subject id.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    payload = jwt.decode(
        token,
        secret,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": REQUIRED_CLAIMS},
    )
    try:
        subject_id = int(payload["sub"])
    except (TypeError, ValueError) as e:
        raise jwt.InvalidTokenError("Token subject is not a user id") from e
    if subject_id < 1:
        raise jwt.InvalidTokenError("Token subject is not a user id")
    return TokenClaims(
        subject_id=subject_id,
        email=str(payload.get("email") or ""),
        role=str(payload.get("role") or ""),
    )
