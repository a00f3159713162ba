# devconnect/schemas/users.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


# ---------- Requests ----------
# Shapes only; the rules live in devconnect.validation
class RegisterIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    password2: Optional[str] = None


class LoginIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email: Optional[str] = None
    password: Optional[str] = None


# ---------- Responses (allow-lists: never add password_hash here) ----------
class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    avatar: Optional[str] = None
    date: Optional[datetime] = None


class CurrentUserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


class TokenOut(BaseModel):
    success: bool = True
    token: str
