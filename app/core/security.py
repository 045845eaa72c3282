# File: app/core/security.py

"""
Security helpers for the auth portal.

- Password hashing: bcrypt with a fixed cost factor (Settings.bcrypt_rounds).
- Identity marker: HS256-signed JWT access token with expiry.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import bcrypt
import jwt

DEFAULT_BCRYPT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes of input
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    if not password:
        raise ValueError("password must not be blank")
    raw = password.encode("utf-8")
    if len(raw) > MAX_PASSWORD_BYTES:
        raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
    hashed = bcrypt.hashpw(raw, bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Compare a plaintext password against a stored bcrypt hash.

    A malformed stored hash counts as a mismatch rather than an error.
    """
    if not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(
    *,
    secret: str,
    subject: str | int,
    claims: Optional[dict[str, Any]] = None,
    expires_delta: timedelta,
    algorithm: str = "HS256",
) -> str:
    if not secret:
        raise ValueError("secret must not be blank")

    now = datetime.now(timezone.utc)
    to_encode: dict[str, Any] = dict(claims or {})
    to_encode.update(
        {
            "sub": str(subject),
            "iat": int(now.timestamp()),
            "exp": int((now + expires_delta).timestamp()),
        }
    )
    return jwt.encode(to_encode, secret, algorithm=algorithm)


def decode_access_token(token: str, *, secret: str, algorithm: str = "HS256") -> dict[str, Any]:
    """
    Decode and verify a token.

    Raises jwt.ExpiredSignatureError / jwt.InvalidTokenError on a bad token;
    callers decide how that maps to an HTTP response.
    """
    return jwt.decode(
        token,
        secret,
        algorithms=[algorithm],
        options={"require": ["sub", "exp"]},
    )
