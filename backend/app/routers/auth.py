from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.dependencies import bearer_token, require_identity
from app.schemas.auth import (
    Identity,
    IdentityResponse,
    SignInRequest,
    SignInResponse,
    SignUpRequest,
    SignUpResponse,
)
from app.services import auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/sign-up", response_model=SignUpResponse, status_code=201)
async def sign_up(req: SignUpRequest, db: Session = Depends(get_db)):
    if "@" not in req.email.strip():
        raise HTTPException(status_code=400, detail="A valid email address is required")
    if len(req.password) < settings.min_password_length:
        raise HTTPException(
            status_code=400,
            detail=f"Password must be at least {settings.min_password_length} characters",
        )
    if auth_service.find_user_by_email(db, req.email):
        raise HTTPException(status_code=409, detail="User already registered")

    user = auth_service.sign_up(db, req.email, req.password)
    if user is None:
        raise HTTPException(status_code=409, detail="User already registered")
    return SignUpResponse(user_id=user.id, email=user.email)


@router.post("/sign-in", response_model=SignInResponse)
async def sign_in(req: SignInRequest, db: Session = Depends(get_db)):
    result = auth_service.sign_in(db, req.email, req.password)
    if result is None:
        raise HTTPException(status_code=401, detail="Invalid login credentials")
    return SignInResponse(**result)


@router.post("/sign-out")
async def sign_out(
    _identity: Identity = Depends(require_identity),
    token: str | None = Depends(bearer_token),
    db: Session = Depends(get_db),
):
    auth_service.sign_out(db, token)
    return {"message": "Signed out"}


@router.get("/user", response_model=IdentityResponse)
async def current_user(identity: Identity = Depends(require_identity)):
    return IdentityResponse(user_id=identity.user_id, email=identity.email)
