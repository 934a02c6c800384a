import base64
import hashlib
import hmac
import os
from datetime import UTC, datetime, timedelta

import jwt

from classboard.core.config import get_settings

PASSWORD_SCHEME = "pbkdf2_sha256"
PBKDF2_ITERATIONS = 120_000
SALT_BYTES = 16


def _b64(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).decode("ascii")


def _unb64(text: str) -> bytes:
    return base64.urlsafe_b64decode(text.encode("ascii"))


def _derive(password: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)


def hash_password(password: str) -> str:
    """Return a self-describing ``scheme$iterations$salt$digest`` string."""
    salt = os.urandom(SALT_BYTES)
    digest = _derive(password, salt, PBKDF2_ITERATIONS)
    return "$".join((PASSWORD_SCHEME, str(PBKDF2_ITERATIONS), _b64(salt), _b64(digest)))


def verify_password(password: str, password_hash: str) -> bool:
    parts = password_hash.split("$")
    if len(parts) != 4 or parts[0] != PASSWORD_SCHEME:
        return False

    _, iterations, salt_b64, digest_b64 = parts
    try:
        salt = _unb64(salt_b64)
        expected = _unb64(digest_b64)
        rounds = int(iterations)
    except ValueError:
        return False
    return hmac.compare_digest(_derive(password, salt, rounds), expected)


def create_access_token(teacher_id: str, email: str, expires_minutes: int | None = None) -> str:
    settings = get_settings()
    issued_at = datetime.now(UTC)
    lifetime = timedelta(minutes=expires_minutes or settings.jwt_expire_minutes)
    claims = {
        "sub": teacher_id,
        "email": email,
        "iat": int(issued_at.timestamp()),
        "exp": int((issued_at + lifetime).timestamp()),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict:
    """Decode and verify a bearer token; raises ``jwt.InvalidTokenError`` on failure."""
    settings = get_settings()
    return jwt.decode(
        token,
        settings.jwt_secret,
        algorithms=[settings.jwt_algorithm],
        options={"require": ["sub", "exp"]},
    )
