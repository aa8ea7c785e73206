from typing import Annotated

from pydantic import BaseModel, Field

from app.models.job import JOB_TYPES
from app.schemas.forms import iso_date, one_of, optional_text, required


class JobRow(BaseModel):
    id: str
    title: str
    company: str
    location: str
    description: str
    requirements: str
    salary_range: str | None
    type: str
    created_at: str
    deadline: str
    status: str


class JobInsert(BaseModel):
    model_config = {"extra": "forbid"}

    id: str | None = None
    title: str
    company: str
    location: str
    description: str
    requirements: str
    salary_range: str | None = None
    type: str
    created_at: str | None = None
    deadline: str
    status: str | None = None


class JobUpdate(BaseModel):
    model_config = {"extra": "forbid"}

    title: str | None = None
    company: str | None = None
    location: str | None = None
    description: str | None = None
    requirements: str | None = None
    salary_range: str | None = None
    type: str | None = None
    deadline: str | None = None
    status: str | None = None


class JobForm(BaseModel):
    """Post-a-job form. Any ``status`` the caller sends is ignored."""

    title: Annotated[str, required("Job title is required")] = Field("", validate_default=True)
    company: Annotated[str, required("Company name is required")] = Field("", validate_default=True)
    location: Annotated[str, required("Location is required")] = Field("", validate_default=True)
    type: Annotated[
        str,
        required("Employment type is required"),
        one_of(JOB_TYPES, f"Employment type must be one of: {', '.join(JOB_TYPES)}"),
    ] = Field("", validate_default=True)
    description: Annotated[str, required("Job description is required")] = Field("", validate_default=True)
    requirements: Annotated[str, required("Requirements are required")] = Field("", validate_default=True)
    salary_range: Annotated[str | None, optional_text()] = None
    deadline: Annotated[
        str,
        required("Deadline is required"),
        iso_date("Deadline must be a valid date"),
    ] = Field("", validate_default=True)
