# devconnect/middleware/auth_middleware.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import jwt  # PyJWT
from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from devconnect.config import Settings
from devconnect.database import get_db
from devconnect.models import User
from devconnect.security import create_access_token, decode_token

logger = logging.getLogger(__name__)

# NOTE: auto_error=False so we can consistently return 401 on problems
security = HTTPBearer(auto_error=False)


class AuthenticationFailed(Exception):
    """The credential was rejected. Carries a short, client-safe reason."""

    def __init__(self, reason: str = "Unauthorized"):
        self.reason = reason
        super().__init__(reason)


# ---------- Bearer strategy ----------
class JwtStrategy:
    """
    Issues and verifies signed bearer tokens.

    The strategy knows nothing about HTTP: `authenticate` maps a raw token
    to a User or raises AuthenticationFailed. Swap it on `app.state.auth`
    to change how requests are authenticated.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expires_in: int = 3600, leeway: int = 0):
        if not secret:
            raise ValueError("secret must be a non-empty string")
        self.secret = secret
        self.algorithm = algorithm
        self.expires_in = expires_in
        self.leeway = leeway

    @classmethod
    def from_settings(cls, settings: Settings) -> "JwtStrategy":
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            expires_in=settings.jwt_expires_seconds,
            leeway=settings.jwt_leeway_seconds,
        )

    def issue(self, user: User) -> str:
        claims = {"id": user.id, "name": user.name, "avatar": user.avatar}
        return create_access_token(claims, self.secret, self.algorithm, self.expires_in)

    def verify(self, token: str) -> Dict[str, Any]:
        try:
            return decode_token(token, self.secret, self.algorithm, leeway=self.leeway)
        except jwt.ExpiredSignatureError:
            raise AuthenticationFailed("Token expired")
        except jwt.PyJWTError:
            raise AuthenticationFailed("Invalid token")

    def authenticate(self, token: str, db: Session) -> User:
        claims = self.verify(token)
        user_id = claims.get("id")
        if not isinstance(user_id, int):
            raise AuthenticationFailed("Invalid token subject")
        user = db.get(User, user_id)
        if user is None:
            raise AuthenticationFailed("Unauthorized")
        return user


# ---------- FastAPI dependencies ----------
def get_strategy(request: Request) -> JwtStrategy:
    return request.app.state.auth


def require_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
    strategy: JwtStrategy = Depends(get_strategy),
) -> User:
    """
    Strict auth dependency. Returns the authenticated User.
    Always raises 401 (not 403) if the header is missing/invalid.
    """
    if credentials is None or not credentials.scheme or credentials.scheme.lower() != "bearer":
        raise HTTPException(
            status_code=401,
            detail="Missing or invalid Authorization header",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = (credentials.credentials or "").strip()
    if not token:
        raise HTTPException(status_code=401, detail="Missing token", headers={"WWW-Authenticate": "Bearer"})

    try:
        return strategy.authenticate(token, db)
    except AuthenticationFailed as e:
        logger.info("Bearer token rejected: %s", e.reason)
        raise HTTPException(status_code=401, detail=e.reason, headers={"WWW-Authenticate": "Bearer"})


__all__ = ["AuthenticationFailed", "JwtStrategy", "get_strategy", "require_user", "security"]
