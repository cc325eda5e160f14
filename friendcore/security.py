"""Password hashing, random strings and signed session tokens."""

from __future__ import annotations

import random
import string
from typing import Any

import bcrypt
import jwt

from .config import config

DEFAULT_COST = 10
LETTERS = string.ascii_lowercase + string.ascii_uppercase + string.digits
ALGORITHM = "HS256"


def hash_password(text: str) -> str:
    """Return a bcrypt hash of ``text`` at the default cost."""
    return bcrypt.hashpw(text.encode(), bcrypt.gensalt(rounds=DEFAULT_COST)).decode()


def is_same(text: str, hashed: str) -> bool:
    """Tell whether ``text`` matches the bcrypt ``hashed`` value."""
    try:
        return bcrypt.checkpw(text.encode(), hashed.encode())
    except ValueError:
        return False


def random_string(n: int) -> str:
    """Return ``n`` random ASCII letters and digits."""
    if n < 0:
        raise ValueError("length must not be negative")
    return "".join(random.choices(LETTERS, k=n))


def _secret(secret: str | None) -> str:
    return config("JWT_SECRET") if secret is None else secret


def new_token(user: Any, secret: str | None = None) -> str:
    """Sign an HS256 token carrying the user's id and username."""
    claims = {"user_id": user.id, "username": user.username}
    return jwt.encode(claims, _secret(secret), algorithm=ALGORITHM)


def decode_token(token: str, secret: str | None = None) -> dict[str, Any]:
    """Verify an HS256 token and return its claims."""
    return jwt.decode(token, _secret(secret), algorithms=[ALGORITHM])