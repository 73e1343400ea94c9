# interviewhub/models/user_skills_profile.py
# 1:1 with users (by external id), written through an upsert
from sqlalchemy import Column, Integer, String, Text, DateTime, JSON
from interviewhub.db.base import Base, BigIntPK, utcnow


class UserSkillsProfile(Base):
    __tablename__ = "user_skills_profiles"

    id = Column(BigIntPK, primary_key=True, index=True)
    user_id = Column(String(255), unique=True, index=True, nullable=False)
    industry = Column(String(100), nullable=False, index=True)
    years_of_experience = Column(Integer, nullable=False, default=0)
    skills = Column(JSON, nullable=False, default=list)
    bio = Column(Text, nullable=False, default="")

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
