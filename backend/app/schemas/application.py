from typing import Annotated

from pydantic import BaseModel, Field

from app.schemas.forms import http_url, required


class ApplicationRow(BaseModel):
    id: str
    job_id: str
    user_id: str
    status: str
    created_at: str
    resume_url: str | None
    cover_letter: str | None


class ApplicationInsert(BaseModel):
    model_config = {"extra": "forbid"}

    id: str | None = None
    job_id: str
    user_id: str
    status: str | None = None
    created_at: str | None = None
    resume_url: str | None = None
    cover_letter: str | None = None


class ApplicationUpdate(BaseModel):
    model_config = {"extra": "forbid"}

    status: str | None = None
    resume_url: str | None = None
    cover_letter: str | None = None


class ApplicationForm(BaseModel):
    resume_url: Annotated[
        str,
        required("Resume URL is required"),
        http_url("Resume URL must be a valid URL"),
    ] = Field("", validate_default=True)
    cover_letter: Annotated[str, required("Cover letter is required")] = Field("", validate_default=True)
