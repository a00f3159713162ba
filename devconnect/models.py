# devconnect/models.py
from __future__ import annotations

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.mutable import MutableDict, MutableList
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func as sa_func

from devconnect.database import Base

# JSONB on Postgres, plain JSON elsewhere (e.g. SQLite)
JSONType = JSON().with_variant(JSONB(), "postgresql")

SOCIAL_KEYS = ("youtube", "twitter", "facebook", "linkedin", "instagram")


# =======================
# User model
# =======================
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    # stored lower-cased, see services.users
    email = Column(String(255), unique=True, index=True, nullable=False)
    avatar = Column(String(255), nullable=True)
    password_hash = Column(String(255), nullable=False)

    date = Column(DateTime, nullable=False, server_default=sa_func.now())

    profile = relationship(
        "Profile",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"


# =======================
# Profile model
# =======================
class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, index=True, nullable=False)

    handle         = Column(String(40), unique=True, index=True, nullable=False)
    company        = Column(String(255), nullable=True)
    website        = Column(String(255), nullable=True)
    location       = Column(String(255), nullable=True)
    status         = Column(String(255), nullable=False)
    bio            = Column(Text, nullable=True)
    githubusername = Column(String(255), nullable=True)

    # Arrays/objects
    skills     = Column(MutableList.as_mutable(JSONType), nullable=False, default=list)
    social     = Column(MutableDict.as_mutable(JSONType), nullable=False, default=dict)
    # embedded sub-records, newest first; each dict carries its own "id"
    experience = Column(MutableList.as_mutable(JSONType), nullable=False, default=list)
    education  = Column(MutableList.as_mutable(JSONType), nullable=False, default=list)

    date = Column(DateTime, nullable=False, server_default=sa_func.now())

    user = relationship("User", back_populates="profile")

    def __repr__(self) -> str:
        return f"<Profile id={self.id} user_id={self.user_id} handle={self.handle!r}>"
