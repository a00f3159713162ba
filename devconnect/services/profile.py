# devconnect/services/profile.py
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, fields
from typing import Any, Dict, Iterable, List, Mapping, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from devconnect.errors import DuplicateHandle, Internal, NotFound, ProfileNotFound, ValidationFailed
from devconnect.models import SOCIAL_KEYS, Profile, User
from devconnect.schemas.profile import ProfileOut
from devconnect.validation.entries import validate_education_input, validate_experience_input
from devconnect.validation.profile import validate_profile_input

logger = logging.getLogger(__name__)


class _Unset:
    """Marker for "not in the request", distinct from None and ''."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


# =======================
# Partial update record
# =======================
@dataclass
class ProfileFields:
    handle: Any = UNSET
    company: Any = UNSET
    website: Any = UNSET
    location: Any = UNSET
    bio: Any = UNSET
    status: Any = UNSET
    githubusername: Any = UNSET
    skills: Any = UNSET
    youtube: Any = UNSET
    twitter: Any = UNSET
    facebook: Any = UNSET
    linkedin: Any = UNSET
    instagram: Any = UNSET

    @classmethod
    def from_input(cls, data: Mapping[str, Any], present: Iterable[str]) -> "ProfileFields":
        """Only keys listed in `present` are taken; everything else stays UNSET."""
        known = {f.name for f in fields(cls)}
        values = {}
        for key in present:
            if key not in known:
                continue
            value = data.get(key)
            if key == "skills":
                value = split_skills(value)
            elif isinstance(value, str):
                value = value.strip() or None
            values[key] = value
        return cls(**values)

    def changes(self) -> Dict[str, Any]:
        """Top-level column updates."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in SOCIAL_KEYS and getattr(self, f.name) is not UNSET
        }

    def social_changes(self) -> Dict[str, Optional[str]]:
        return {key: getattr(self, key) for key in SOCIAL_KEYS if getattr(self, key) is not UNSET}


def split_skills(raw: Any) -> List[str]:
    if raw is None:
        return []
    items = raw if isinstance(raw, (list, tuple)) else str(raw).split(",")
    return [s.strip() for s in (str(i) for i in items) if s.strip()]


# ---- Helpers ----
def _query(db: Session):
    return db.query(Profile).options(joinedload(Profile.user))


def _get_profile_by_user(db: Session, user_id: int) -> Optional[Profile]:
    return _query(db).filter(Profile.user_id == user_id).first()


def _require_own_profile(db: Session, user: User) -> Profile:
    profile = _get_profile_by_user(db, user.id)
    if profile is None:
        raise ProfileNotFound()
    return profile


def _handle_taken(db: Session, handle: str, owner_id: Optional[int]) -> bool:
    q = db.query(Profile.id).filter(Profile.handle == handle)
    if owner_id is not None:
        q = q.filter(Profile.user_id != owner_id)
    return q.first() is not None


def _commit(db: Session, what: str) -> None:
    try:
        db.commit()
    except IntegrityError:
        # unique handle (or user_id, on a racing create by the same user)
        db.rollback()
        raise DuplicateHandle()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("%s failed: %s", what, e)
        raise Internal()


def _out(db: Session, profile: Profile) -> ProfileOut:
    db.refresh(profile)
    return ProfileOut.model_validate(profile)


# =======================
# Reads
# =======================
def get_own_profile(db: Session, user: User) -> ProfileOut:
    return ProfileOut.model_validate(_require_own_profile(db, user))


def get_profile_by_handle(db: Session, handle: str) -> ProfileOut:
    profile = _query(db).filter(Profile.handle == handle).first()
    if profile is None:
        raise ProfileNotFound()
    return ProfileOut.model_validate(profile)


def get_profile_by_user_id(db: Session, user_id: str) -> ProfileOut:
    try:
        uid = int(user_id)
    except (TypeError, ValueError):
        raise NotFound({"profile": "There is no profile for this user"})
    profile = _get_profile_by_user(db, uid)
    if profile is None:
        raise ProfileNotFound()
    return ProfileOut.model_validate(profile)


def list_profiles(db: Session) -> List[ProfileOut]:
    # an empty table is an empty list, not a 404
    profiles = _query(db).order_by(Profile.id).all()
    return [ProfileOut.model_validate(p) for p in profiles]


# =======================
# Writes
# =======================
def save_profile(db: Session, user: User, data: Mapping[str, Any], present: Iterable[str]) -> ProfileOut:
    """
    Create the caller's profile, or update it in place.
    Fields missing from the request are left untouched on update.
    """
    errors, is_valid = validate_profile_input(data)
    if not is_valid:
        raise ValidationFailed(errors)

    update = ProfileFields.from_input(data, present)
    profile = _get_profile_by_user(db, user.id)

    if profile is None:
        if _handle_taken(db, update.handle, owner_id=None):
            raise DuplicateHandle()
        profile = Profile(user_id=user.id, skills=[], social={}, experience=[], education=[])
        db.add(profile)
        action = "Created"
    else:
        if update.handle is not UNSET and update.handle != profile.handle:
            if _handle_taken(db, update.handle, owner_id=user.id):
                raise DuplicateHandle()
        action = "Updated"

    for key, value in update.changes().items():
        setattr(profile, key, value)
    for key, value in update.social_changes().items():
        if value is None:
            profile.social.pop(key, None)
        else:
            profile.social[key] = value

    _commit(db, "Saving profile")
    logger.info("%s profile handle=%r for user id=%s", action, profile.handle, user.id)
    return _out(db, profile)


def _new_entry(body: Mapping[str, Any], keys: Iterable[str]) -> Dict[str, Any]:
    entry: Dict[str, Any] = {"id": uuid.uuid4().hex}
    for key in keys:
        value = body.get(key)
        entry[key] = value.strip() if isinstance(value, str) else value
    entry["current"] = bool(body.get("current"))
    return entry


EXPERIENCE_KEYS = ("title", "company", "location", "from", "to", "description")
EDUCATION_KEYS = ("school", "degree", "fieldofstudy", "from", "to", "description")


def add_experience(db: Session, user: User, data: Mapping[str, Any]) -> ProfileOut:
    errors, is_valid = validate_experience_input(data)
    if not is_valid:
        raise ValidationFailed(errors)

    profile = _require_own_profile(db, user)
    entry = _new_entry(data, EXPERIENCE_KEYS)
    profile.experience.insert(0, entry)

    _commit(db, "Adding experience")
    logger.info("Added experience id=%s to profile id=%s", entry["id"], profile.id)
    return _out(db, profile)


def add_education(db: Session, user: User, data: Mapping[str, Any]) -> ProfileOut:
    errors, is_valid = validate_education_input(data)
    if not is_valid:
        raise ValidationFailed(errors)

    profile = _require_own_profile(db, user)
    entry = _new_entry(data, EDUCATION_KEYS)
    profile.education.insert(0, entry)

    _commit(db, "Adding education")
    logger.info("Added education id=%s to profile id=%s", entry["id"], profile.id)
    return _out(db, profile)


def _remove_entry(db: Session, user: User, collection: str, entry_id: str) -> ProfileOut:
    profile = _require_own_profile(db, user)
    entries = getattr(profile, collection)

    index = next((i for i, item in enumerate(entries) if item.get("id") == entry_id), None)
    if index is None:
        # unknown ids are not an error; the list stays as it is
        logger.debug("No %s entry id=%s on profile id=%s", collection, entry_id, profile.id)
        return ProfileOut.model_validate(profile)

    entries.pop(index)
    _commit(db, f"Removing {collection}")
    logger.info("Removed %s id=%s from profile id=%s", collection, entry_id, profile.id)
    return _out(db, profile)


def remove_experience(db: Session, user: User, exp_id: str) -> ProfileOut:
    return _remove_entry(db, user, "experience", exp_id)


def remove_education(db: Session, user: User, edu_id: str) -> ProfileOut:
    return _remove_entry(db, user, "education", edu_id)


def delete_account(db: Session, user: User) -> Dict[str, bool]:
    """Delete the caller's profile (if any) and user in one transaction."""
    user_id = user.id
    profile = _get_profile_by_user(db, user_id)
    if profile is not None:
        db.delete(profile)
    db.delete(user)

    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Deleting user id=%s failed: %s", user_id, e)
        raise Internal()

    logger.info("Deleted user id=%s and their profile", user_id)
    return {"success": True}
