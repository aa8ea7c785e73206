from typing import Any

from fastapi import APIRouter, Body, Depends, Response

from app.dependencies import get_gateway
from app.pages import ProfilePage
from app.routers.common import set_submission_status
from app.schemas.pages import ProfilePageView, SubmissionView
from app.services.gateway import DataGateway

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=ProfilePageView)
async def profile_page(gateway: DataGateway = Depends(get_gateway)):
    return ProfilePage(gateway).load()


@router.put("", response_model=SubmissionView)
async def save_profile(
    response: Response,
    data: dict[str, Any] = Body(...),
    gateway: DataGateway = Depends(get_gateway),
):
    view = ProfilePage(gateway).submit(data)
    set_submission_status(response, view)
    return view
