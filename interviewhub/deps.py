# interviewhub/deps.py
import logging

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from interviewhub.db.base import SessionLocal
from interviewhub.errors import NotFound, Unauthorized
from interviewhub.models.user import User
from interviewhub.services.token_auth import verify_bearer
from interviewhub.services import user_service

logger = logging.getLogger(__name__)


# ----------------------------
# DB session
# ----------------------------
def get_db():
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


# ----------------------------
# identity (token only, no DB)
# ----------------------------
async def get_identity(
    authorization: str | None = Header(None),
) -> dict | None:
    """Claims of the caller, or None when there is no valid token. Never raises."""
    if not authorization:
        return None
    try:
        return await verify_bearer(authorization)
    except ValueError as e:
        logger.warning("verify_bearer failed: %s", e)
        return None


async def require_identity(identity: dict | None = Depends(get_identity)) -> dict:
    if identity is None:
        raise Unauthorized()
    return identity


# ----------------------------
# registered user
# ----------------------------
def get_current_user(
    identity: dict = Depends(require_identity),
    db: Session = Depends(get_db),
) -> User:
    user = user_service.get_by_external_id(db, identity["user_id"])
    if user is None:
        raise NotFound("user_not_found", "Authenticated user is not registered")
    return user


def get_optional_user(
    identity: dict | None = Depends(get_identity),
    db: Session = Depends(get_db),
) -> User | None:
    """For public-safe probes: None instead of 401/404."""
    if identity is None:
        return None
    return user_service.get_by_external_id(db, identity["user_id"])


def require_admin(
    identity: dict = Depends(require_identity),
    db: Session = Depends(get_db),
) -> User:
    # role is always re-read from the store, never taken from the client
    return user_service.require_admin(db, identity["user_id"])
