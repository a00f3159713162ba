# devconnect/config.py
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# --- Load env from devconnect/.env OR .env (whichever exists) ---
root = Path(__file__).resolve().parents[1]          # project root
package_env = root / "devconnect" / ".env"
root_env = root / ".env"
if package_env.exists():
    load_dotenv(package_env)
elif root_env.exists():
    load_dotenv(root_env)

logger = logging.getLogger(__name__)

DEV_ENVS = {"dev", "local", "test"}
DEV_JWT_SECRET = "dev_insecure_change_me"

DEFAULT_ORIGINS = [
    "http://localhost:3000", "http://127.0.0.1:3000",
    "http://localhost:5173", "http://127.0.0.1:5173",
]


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() == "true"


class Settings(BaseModel):
    """Process configuration, built once at start-up and handed to create_app."""

    env: str = "dev"
    database_url: str = "sqlite:///./devconnect.db"
    sql_echo: bool = False

    # === 🔐 Tokens ===
    jwt_secret: str = DEV_JWT_SECRET
    jwt_algorithm: str = "HS256"
    jwt_expires_seconds: int = Field(default=3600, gt=0)
    jwt_leeway_seconds: int = Field(default=0, ge=0)

    # bcrypt accepts 4..31
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    allowed_origins: List[str] = Field(default_factory=lambda: list(DEFAULT_ORIGINS))
    log_level: str = "INFO"
    port: int = 5000

    @classmethod
    def from_env(cls) -> "Settings":
        env = os.getenv("ENV", "dev").strip().lower()

        secret = os.getenv("JWT_SECRET") or os.getenv("SECRET_KEY")
        if not secret:
            if env not in DEV_ENVS:
                raise ValueError("Missing JWT_SECRET in .env")
            logger.warning("JWT_SECRET not set, using the insecure dev secret")
            secret = DEV_JWT_SECRET

        origins = [
            origin.strip()
            for origin in os.getenv("ALLOWED_ORIGINS", ",".join(DEFAULT_ORIGINS)).split(",")
            if origin.strip()
        ]

        return cls(
            env=env,
            database_url=os.getenv("DATABASE_URL", "sqlite:///./devconnect.db"),
            sql_echo=_env_bool("SQL_ECHO"),
            jwt_secret=secret,
            jwt_algorithm=os.getenv("JWT_ALGO", "HS256"),
            jwt_expires_seconds=int(os.getenv("JWT_EXPIRES_SECONDS", "3600")),
            jwt_leeway_seconds=int(os.getenv("JWT_LEEWAY_SEC", "0")),
            bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", "10")),
            allowed_origins=origins,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            port=int(os.getenv("PORT", "5000")),
        )
