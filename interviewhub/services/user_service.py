"""
Identity & role resolution
- register a user on first sign-in (first one becomes admin)
- admin checks (role re-read from the store on every call)
- role changes with last-admin protection
"""
import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from interviewhub.errors import NotFound, PolicyViolation, Unauthorized
from interviewhub.models.user import User, SystemBootstrap

logger = logging.getLogger(__name__)

FIRST_ADMIN_KEY = "first_admin"


def is_admin(user: Optional[User]) -> bool:
    return user is not None and user.role == "admin"


def get_by_external_id(db: Session, external_id: str) -> Optional[User]:
    return db.query(User).filter(User.external_id == external_id).first()


def list_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.id.asc()).all()


def require_admin(db: Session, external_id: str) -> User:
    user = get_by_external_id(db, external_id)
    if not is_admin(user):
        raise Unauthorized.forbidden("Admin role required")
    return user


def _claim_first_admin(db: Session, user: User) -> bool:
    """
    Try to insert the bootstrap marker. The primary key turns concurrent
    first sign-ins into exactly one winner.
    """
    if db.get(SystemBootstrap, FIRST_ADMIN_KEY) is not None:
        return False
    try:
        with db.begin_nested():
            db.add(SystemBootstrap(key=FIRST_ADMIN_KEY, user_id=user.id))
    except IntegrityError:
        return False
    return True


def sync_user(
    db: Session,
    external_id: str,
    name: str,
    email: str,
    image: Optional[str] = None,
) -> User:
    """Idempotent registration: an existing record is returned untouched."""
    existing = get_by_external_id(db, external_id)
    if existing is not None:
        return existing

    user = User(
        external_id=external_id,
        name=name,
        email=email,
        image=image,
        role="candidate",
    )
    db.add(user)
    db.flush()  # user.id for the marker

    if _claim_first_admin(db, user):
        user.role = "admin"
        logger.info("bootstrap: user %s (%s) is the first admin", user.id, email)

    db.commit()
    db.refresh(user)
    logger.info("registered user %s role=%s", user.id, user.role)
    return user


def update_role(db: Session, actor_external_id: str, user_id: int, role: str) -> User:
    require_admin(db, actor_external_id)

    target = db.get(User, user_id)
    if target is None:
        raise NotFound("user_not_found", f"User {user_id} does not exist")

    if target.role == "admin" and role != "admin":
        # lock the admin rows so concurrent demotions serialize on the count
        admins = (
            db.query(User)
            .filter(User.role == "admin")
            .with_for_update()
            .all()
        )
        if len(admins) <= 1:
            logger.warning("rejected demotion of last admin %s", target.id)
            raise PolicyViolation("last_admin", "Cannot remove the last admin")

    target.role = role
    db.commit()
    db.refresh(target)
    logger.info("user %s role -> %s (by %s)", target.id, role, actor_external_id)
    return target
