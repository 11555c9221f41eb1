"""Password hashing and JWT access tokens."""

from datetime import datetime, timezone, timedelta
from typing import Any

import bcrypt
from jose import jwt

from lifepattern.config import settings


def hash_password(password: str) -> str:
    """Hash password with bcrypt. Bytes truncated to 72 (bcrypt limit)."""
    pwd_bytes = password.encode("utf-8")[:72]
    hashed = bcrypt.hashpw(pwd_bytes, bcrypt.gensalt())
    return hashed.decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    plain_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.checkpw(plain_bytes, password_hash.encode("utf-8"))


def _signing_key_and_algorithm() -> tuple[str, str]:
    if settings.use_rs256:
        return settings.jwt_private_key.strip(), "RS256"
    return settings.secret_key, settings.jwt_algorithm


def _verification_key_and_algorithms() -> tuple[str, list[str]]:
    if settings.use_rs256:
        return settings.jwt_public_key.strip(), ["RS256"]
    return settings.secret_key, [settings.jwt_algorithm]


def create_access_token(user_id: int, email: str) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.access_token_expire_minutes)
    payload = {"sub": str(user_id), "email": email, "exp": expire}
    key, algorithm = _signing_key_and_algorithm()
    return jwt.encode(payload, key, algorithm=algorithm)


def decode_token(token: str) -> dict[str, Any]:
    """Decode and verify an access token. Raises jose.JWTError when invalid or expired."""
    key, algorithms = _verification_key_and_algorithms()
    return jwt.decode(token, key, algorithms=algorithms)
