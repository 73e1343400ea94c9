# interviewhub/routers/skills_profile.py

from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from interviewhub.deps import get_current_user, get_db, get_optional_user, require_identity
from interviewhub.models.user import User
from interviewhub.schemas.skills_profile import SkillsProfileIn, SkillsProfileOut
from interviewhub.services import skills_profile_service

router = APIRouter(prefix="/api/me", tags=["me"])


# ---- my skills profile (null when signed out or not registered) ----

@router.get("/skills-profile", response_model=Optional[SkillsProfileOut])
def get_my_skills_profile(
    user: Optional[User] = Depends(get_optional_user),
    db: Session = Depends(get_db),
):
    if user is None:
        return None
    return skills_profile_service.get_for_user(db, user.external_id)


# ---- create or update ----

@router.put("/skills-profile", response_model=SkillsProfileOut)
def save_my_skills_profile(
    payload: SkillsProfileIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return skills_profile_service.save(
        db,
        user.external_id,
        industry=payload.industry,
        years_of_experience=payload.years_of_experience,
        skills=payload.skills,
        bio=payload.bio,
    )


# ---- profiles in one industry ----

@router.get("/skills-profiles/by-industry/{industry}", response_model=List[SkillsProfileOut])
def profiles_by_industry(
    industry: str,
    identity: dict = Depends(require_identity),
    db: Session = Depends(get_db),
):
    return skills_profile_service.list_by_industry(db, industry)
