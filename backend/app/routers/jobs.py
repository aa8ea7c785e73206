from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Response

from app.config import settings
from app.dependencies import get_gateway
from app.pages import JobsListingPage, PostJobPage
from app.routers.common import set_submission_status
from app.schemas.pages import JobsListingView, LoadState, SubmissionView
from app.services.gateway import DataGateway

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=JobsListingView)
async def list_jobs(
    response: Response,
    q: str | None = Query(None, max_length=200),
    gateway: DataGateway = Depends(get_gateway),
):
    view = JobsListingPage(gateway).load(query=q)
    if view.state == LoadState.FAILED:
        response.status_code = 503
    return view


@router.post("", response_model=SubmissionView)
async def post_job(
    response: Response,
    data: dict[str, Any] = Body(...),
    gateway: DataGateway = Depends(get_gateway),
):
    page = PostJobPage(gateway, require_identity=not settings.allow_anonymous_job_posts)
    view = page.submit(data)
    set_submission_status(response, view, success_status=201)
    return view
