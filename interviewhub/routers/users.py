# interviewhub/routers/users.py
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from interviewhub.deps import get_db, get_current_user, require_identity
from interviewhub.models.user import User
from interviewhub.schemas.user import RoleUpdateIn, UserOut, UserSyncIn
from interviewhub.services import user_service

router = APIRouter(prefix="/api/users", tags=["users"])


# 1) first sign-in: register the caller (idempotent)
@router.post("/sync", response_model=UserOut)
def sync_user(
    body: UserSyncIn,
    identity: dict = Depends(require_identity),
    db: Session = Depends(get_db),
):
    """
    Register the authenticated caller.
    - external id always comes from the token subject, never from the body
    - the very first registered user becomes admin
    """
    return user_service.sync_user(
        db,
        external_id=identity["user_id"],
        name=body.name.strip(),
        email=body.email,
        image=body.image,
    )


# 2) current user
@router.get("/me", response_model=UserOut)
def me(user: User = Depends(get_current_user)):
    return user


# 3) all users (any authenticated caller)
@router.get("", response_model=List[UserOut])
def list_users(
    identity: dict = Depends(require_identity),
    db: Session = Depends(get_db),
):
    return user_service.list_users(db)


@router.get("/by-external-id/{external_id}", response_model=Optional[UserOut])
def get_user_by_external_id(external_id: str, db: Session = Depends(get_db)):
    return user_service.get_by_external_id(db, external_id)


# 4) role change (admin only, last admin protected)
@router.patch("/{user_id}/role", response_model=UserOut)
def update_role(
    user_id: int,
    body: RoleUpdateIn,
    identity: dict = Depends(require_identity),
    db: Session = Depends(get_db),
):
    return user_service.update_role(db, identity["user_id"], user_id, body.role)
