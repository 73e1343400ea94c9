# interviewhub/services/skills_profile_service.py
from typing import List, Optional

from sqlalchemy.orm import Session

from interviewhub.db.base import utcnow
from interviewhub.models.user_skills_profile import UserSkillsProfile


def get_for_user(db: Session, user_id: str) -> Optional[UserSkillsProfile]:
    return (
        db.query(UserSkillsProfile)
        .filter(UserSkillsProfile.user_id == user_id)
        .first()
    )


def save(
    db: Session,
    user_id: str,
    industry: str,
    years_of_experience: int,
    skills: List[str],
    bio: str,
) -> UserSkillsProfile:
    """Upsert: at most one profile per user."""
    profile = get_for_user(db, user_id)
    if profile is None:
        profile = UserSkillsProfile(user_id=user_id)
        db.add(profile)

    profile.industry = industry
    profile.years_of_experience = years_of_experience
    profile.skills = list(skills)
    profile.bio = bio
    profile.updated_at = utcnow()

    db.commit()
    db.refresh(profile)
    return profile


def list_by_industry(db: Session, industry: str) -> List[UserSkillsProfile]:
    return (
        db.query(UserSkillsProfile)
        .filter(UserSkillsProfile.industry == industry)
        .order_by(UserSkillsProfile.id.asc())
        .all()
    )
