# interviewhub/models/resume.py
from sqlalchemy import Column, String, Text, DateTime, JSON, Index
from interviewhub.db.base import Base, BigIntPK, utcnow


class Resume(Base):
    __tablename__ = "resumes"

    id = Column(BigIntPK, primary_key=True, index=True)
    user_id = Column(String(255), nullable=False, index=True)  # owner, external id

    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    job_description = Column(Text, nullable=True)
    skills = Column(JSON, nullable=True)
    template = Column(String(50), nullable=True)
    feedback = Column(Text, nullable=True)

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)

    __table_args__ = (
        Index("ix_resumes_user_id_created_at", "user_id", "created_at"),
    )
