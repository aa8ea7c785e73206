import logging
import time
import uuid

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.config import settings
from app.models.user import AuthSession, User
from app.schemas.auth import Identity
from app.utils.security import generate_token, hash_password, token_digest, verify_password
from app.utils.timestamps import utcnow_iso

logger = logging.getLogger("app.auth")


def normalize_email(email: str) -> str:
    return email.strip().lower()


def find_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == normalize_email(email)).first()


def sign_up(db: Session, email: str, password: str) -> User | None:
    """Create a user; returns None when the email is already registered."""
    user = User(
        id=str(uuid.uuid4()),
        email=normalize_email(email),
        password_hash=hash_password(password),
        created_at=utcnow_iso(),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info("Sign-up rejected, email already registered")
        return None
    db.refresh(user)
    logger.info("Registered user %s", user.id)
    return user


def sign_in(db: Session, email: str, password: str) -> dict | None:
    user = find_user_by_email(db, email)
    if user is None or not verify_password(user.password_hash, password):
        return None

    token = generate_token()
    db.add(AuthSession(
        token_hash=token_digest(token),
        user_id=user.id,
        created_at=utcnow_iso(),
        expires_at=time.time() + settings.session_ttl_seconds,
    ))
    db.commit()
    return {
        "access_token": token,
        "user_id": user.id,
        "expires_in_seconds": settings.session_ttl_seconds,
    }


def sign_out(db: Session, token: str) -> bool:
    deleted = db.query(AuthSession).filter(AuthSession.token_hash == token_digest(token)).delete()
    db.commit()
    return deleted > 0


def identity_for_token(db: Session, token: str | None) -> Identity | None:
    if not token:
        return None
    _purge_expired(db)
    row = (
        db.query(AuthSession, User)
        .join(User, User.id == AuthSession.user_id)
        .filter(AuthSession.token_hash == token_digest(token))
        .first()
    )
    if row is None:
        return None
    _session, user = row
    return Identity(user_id=user.id, email=user.email)


def _purge_expired(db: Session):
    expired = db.query(AuthSession).filter(AuthSession.expires_at <= time.time()).delete()
    if expired:
        db.commit()
