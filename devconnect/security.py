from __future__ import annotations

import datetime as dt
from functools import lru_cache
from typing import Any, Dict

import jwt  # PyJWT
from passlib.context import CryptContext

DEFAULT_ROUNDS = 10


@lru_cache(maxsize=None)
def _pwd(rounds: int) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def hash_password(plain: str, rounds: int = DEFAULT_ROUNDS) -> str:
    return _pwd(rounds).hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    # the cost is read back from the hash itself
    return _pwd(DEFAULT_ROUNDS).verify(plain, hashed)


def create_access_token(
    claims: Dict[str, Any],
    secret: str,
    algorithm: str = "HS256",
    expires_in: int = 3600,
) -> str:
    """Sign `claims` with `iat`/`exp` added. `expires_in` is in seconds."""
    now = dt.datetime.now(dt.timezone.utc)
    payload = dict(claims)
    payload["iat"] = int(now.timestamp())
    payload["exp"] = int((now + dt.timedelta(seconds=expires_in)).timestamp())
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_token(token: str, secret: str, algorithm: str = "HS256", leeway: int = 0) -> Dict[str, Any]:
    """Raises jwt.ExpiredSignatureError / jwt.InvalidTokenError."""
    return jwt.decode(token, secret, algorithms=[algorithm], leeway=leeway)
