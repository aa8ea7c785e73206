from typing import Annotated, Any

from pydantic import BaseModel, Field

from app.schemas.forms import optional_text, required


class ProfileRow(BaseModel):
    id: str
    user_id: str
    full_name: str
    email: str
    phone: str | None
    location: str | None
    bio: str | None
    skills: list[str] | None
    experience: Any
    education: Any
    created_at: str
    updated_at: str


class ProfileInsert(BaseModel):
    model_config = {"extra": "forbid"}

    id: str | None = None
    user_id: str
    full_name: str
    email: str
    phone: str | None = None
    location: str | None = None
    bio: str | None = None
    skills: list[str] | None = None
    experience: Any = None
    education: Any = None
    created_at: str | None = None
    updated_at: str | None = None


class ProfileUpdate(BaseModel):
    model_config = {"extra": "forbid"}

    user_id: str | None = None
    full_name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    bio: str | None = None
    skills: list[str] | None = None
    experience: Any = None
    education: Any = None
    updated_at: str | None = None


class ProfileForm(BaseModel):
    full_name: Annotated[str, required("Full name is required")] = Field("", validate_default=True)
    email: Annotated[str, required("Email is required")] = Field("", validate_default=True)
    phone: Annotated[str | None, optional_text()] = None
    location: Annotated[str | None, optional_text()] = None
    bio: Annotated[str | None, optional_text()] = None
    skills: str | None = None


def split_skills(raw: str | None) -> list[str]:
    """``"React, Node.js,  TypeScript"`` -> ``["React", "Node.js", "TypeScript"]``."""
    if not raw:
        return []
    return [skill.strip() for skill in raw.split(",") if skill.strip()]


def join_skills(skills: list[str] | None) -> str:
    return ", ".join(skills or [])
