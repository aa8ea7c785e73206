from typing import Any

from fastapi import APIRouter, Body, Depends, Response

from app.dependencies import get_gateway
from app.pages import ApplyJobPage
from app.routers.common import set_submission_status
from app.schemas.pages import ApplyPageView, LoadState, SubmissionView
from app.services.gateway import DataGateway

router = APIRouter(prefix="/jobs/{job_id}", tags=["applications"])


@router.get("/apply", response_model=ApplyPageView)
async def apply_page(job_id: str, response: Response, gateway: DataGateway = Depends(get_gateway)):
    view = ApplyJobPage(gateway, job_id).load()
    if view.state == LoadState.NOT_FOUND:
        response.status_code = 404
    return view


@router.post("/applications", response_model=SubmissionView)
async def submit_application(
    job_id: str,
    response: Response,
    data: dict[str, Any] = Body(...),
    gateway: DataGateway = Depends(get_gateway),
):
    view = ApplyJobPage(gateway, job_id).submit(data)
    set_submission_status(response, view, success_status=201)
    return view
