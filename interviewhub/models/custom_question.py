# interviewhub/models/custom_question.py
from sqlalchemy import Column, String, Text, DateTime, JSON
from interviewhub.db.base import Base, BigIntPK, utcnow


class CustomQuestion(Base):
    __tablename__ = "custom_questions"

    id = Column(BigIntPK, primary_key=True, index=True)
    interview_id = Column(String(255), nullable=False, index=True)
    interviewer_id = Column(String(255), nullable=False, index=True)  # owner, external id

    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)

    # {"javascript": "...", "python": "...", "java": "..."}
    starter_code = Column(JSON, nullable=False)
    # [{input, output, explanation?}, ...]
    examples = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime, nullable=False, default=utcnow)
