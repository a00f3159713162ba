# devconnect/schemas/profile.py
from datetime import datetime
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ---- Requests ----
class ProfileIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    handle: Optional[str] = None
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    status: Optional[str] = None
    githubusername: Optional[str] = None
    # "python, sql, docker" or ["python", "sql", "docker"]
    skills: Optional[Union[str, List[str]]] = None

    # flat in the request, nested under "social" in the stored profile
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None


class ExperienceIn(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    from_: Optional[str] = Field(None, alias="from")
    to: Optional[str] = None
    current: bool = False
    description: Optional[str] = None


class EducationIn(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    school: Optional[str] = None
    degree: Optional[str] = None
    fieldofstudy: Optional[str] = None
    from_: Optional[str] = Field(None, alias="from")
    to: Optional[str] = None
    current: bool = False
    description: Optional[str] = None


# ---- Responses ----
class ProfileUserOut(BaseModel):
    """The populated owner: name and avatar only."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    avatar: Optional[str] = None


class ExperienceOut(ExperienceIn):
    id: str


class EducationOut(EducationIn):
    id: str


class ProfileOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user: ProfileUserOut
    handle: str
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    status: str
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    skills: List[str] = []
    social: Dict[str, str] = {}
    experience: List[ExperienceOut] = []
    education: List[EducationOut] = []
    date: Optional[datetime] = None
