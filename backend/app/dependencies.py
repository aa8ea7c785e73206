from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.auth import Identity
from app.services.auth_service import identity_for_token
from app.services.gateway import DataGateway


async def bearer_token(authorization: str | None = Header(None)) -> str | None:
    # Any other scheme is treated as an anonymous caller
    if authorization is None or not authorization.startswith("Bearer "):
        return None
    return authorization[7:]


def get_gateway(
    db: Session = Depends(get_db),
    token: str | None = Depends(bearer_token),
) -> DataGateway:
    return DataGateway(db, access_token=token)


async def require_identity(
    authorization: str | None = Header(None),
    token: str | None = Depends(bearer_token),
    db: Session = Depends(get_db),
) -> Identity:
    if authorization is not None and token is None:
        raise HTTPException(status_code=401, detail="Missing bearer token")
    identity = identity_for_token(db, token)
    if identity is None:
        raise HTTPException(status_code=401, detail="Not signed in or session expired")
    return identity
