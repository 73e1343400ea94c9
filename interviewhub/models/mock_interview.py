# interviewhub/models/mock_interview.py
from sqlalchemy import Column, String, Text, Float, DateTime, Enum, JSON, Index
from interviewhub.db.base import Base, BigIntPK, utcnow


class MockInterview(Base):
    __tablename__ = "mock_interviews"

    id = Column(BigIntPK, primary_key=True, index=True)
    user_id = Column(String(255), nullable=False, index=True)  # owner, external id
    title = Column(String(200), nullable=False)
    category = Column(String(100), nullable=True)

    # [{question, options[4], correctAnswer, userAnswer?, explanation}, ...]
    questions = Column(JSON, nullable=False, default=list)

    status = Column(
        Enum("in_progress", "completed", name="mock_interview_status", native_enum=False),
        nullable=False,
        default="in_progress",
    )
    score = Column(Float, nullable=True)
    feedback = Column(Text, nullable=True)

    created_at = Column(DateTime, nullable=False, default=utcnow)
    completed_at = Column(DateTime, nullable=True)

    __table_args__ = (
        Index("ix_mock_interviews_user_id_created_at", "user_id", "created_at"),
    )
