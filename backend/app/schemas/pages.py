from enum import Enum
from typing import Any

from pydantic import BaseModel


class LoadState(str, Enum):
    LOADING = "loading"
    POPULATED = "populated"
    EMPTY = "empty"
    READY = "ready"
    NOT_FOUND = "not_found"
    FAILED = "failed"


class SubmitState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    INVALID = "invalid"
    SUCCESS = "success"
    FAILED = "failed"


class BadgeTier(str, Enum):
    HIGHLIGHT = "highlight"  # pending
    POSITIVE = "positive"  # accepted
    NEGATIVE = "negative"  # everything else


class SubmissionView(BaseModel):
    state: SubmitState
    field_errors: dict[str, str] = {}
    error: str | None = None
    error_code: str | None = None
    redirect_to: str | None = None
    values: dict[str, Any] = {}


class JobCard(BaseModel):
    id: str
    title: str
    company: str
    location: str
    type: str
    salary_range: str | None
    deadline: str
    deadline_display: str
    apply_url: str


class JobsListingView(BaseModel):
    state: LoadState
    query: str | None = None
    jobs: list[JobCard] = []
    title: str | None = None
    message: str | None = None


class JobDetail(BaseModel):
    id: str
    title: str
    company: str
    location: str
    type: str
    description: str
    requirements: str
    salary_range: str | None
    deadline: str
    deadline_display: str


class ApplyPageView(BaseModel):
    state: LoadState
    job: JobDetail | None = None
    error: str | None = None


class ApplicationCard(BaseModel):
    id: str
    job_id: str
    job_title: str | None
    job_company: str | None
    job_location: str | None
    status: str
    status_label: str
    badge: BadgeTier
    created_at: str


class ProfileFormValues(BaseModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    bio: str = ""
    skills: str = ""


class ProfilePageView(BaseModel):
    state: LoadState
    authenticated: bool
    form: ProfileFormValues
    applications: list[ApplicationCard] = []
    applications_message: str | None = None
