# devconnect/routes/profile.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from devconnect.database import get_db
from devconnect.middleware.auth_middleware import require_user
from devconnect.models import User
from devconnect.schemas.profile import EducationIn, ExperienceIn, ProfileIn, ProfileOut
from devconnect.services import profile as profile_service

router = APIRouter(prefix="/profile", tags=["Profile"])


# ---- Public ----
@router.get("/test")
def profile_test():
    return {"msg": "Profile works"}


@router.get("/all", response_model=List[ProfileOut])
def all_profiles(db: Session = Depends(get_db)):
    return profile_service.list_profiles(db)


@router.get("/handle/{handle}", response_model=ProfileOut)
def profile_by_handle(handle: str, db: Session = Depends(get_db)):
    return profile_service.get_profile_by_handle(db, handle)


@router.get("/user/{user_id}", response_model=ProfileOut)
def profile_by_user(user_id: str, db: Session = Depends(get_db)):
    return profile_service.get_profile_by_user_id(db, user_id)


# ---- Private ----
@router.get("", response_model=ProfileOut)
def my_profile(db: Session = Depends(get_db), user: User = Depends(require_user)):
    return profile_service.get_own_profile(db, user)


@router.post("", response_model=ProfileOut)
def save_profile(body: ProfileIn, db: Session = Depends(get_db), user: User = Depends(require_user)):
    """
    Upsert:
    - create if none exists for this user
    - update otherwise (only the fields sent in the body)
    """
    return profile_service.save_profile(db, user, body.model_dump(), present=body.model_fields_set)


@router.post("/experience", response_model=ProfileOut)
def add_experience(body: ExperienceIn, db: Session = Depends(get_db), user: User = Depends(require_user)):
    return profile_service.add_experience(db, user, body.model_dump(by_alias=True))


@router.post("/education", response_model=ProfileOut)
def add_education(body: EducationIn, db: Session = Depends(get_db), user: User = Depends(require_user)):
    return profile_service.add_education(db, user, body.model_dump(by_alias=True))


@router.delete("/experience/{exp_id}", response_model=ProfileOut)
def delete_experience(exp_id: str, db: Session = Depends(get_db), user: User = Depends(require_user)):
    return profile_service.remove_experience(db, user, exp_id)


@router.delete("/education/{edu_id}", response_model=ProfileOut)
def delete_education(edu_id: str, db: Session = Depends(get_db), user: User = Depends(require_user)):
    return profile_service.remove_education(db, user, edu_id)


@router.delete("")
def delete_account(db: Session = Depends(get_db), user: User = Depends(require_user)):
    """Delete the caller's profile and user."""
    return profile_service.delete_account(db, user)
