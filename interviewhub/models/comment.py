# interviewhub/models/comment.py
from sqlalchemy import Column, BigInteger, Integer, String, Text, DateTime, ForeignKey
from interviewhub.db.base import Base, BigIntPK, utcnow


class Comment(Base):
    __tablename__ = "comments"

    id = Column(BigIntPK, primary_key=True, index=True)
    interview_id = Column(BigInteger, ForeignKey("interviews.id"), nullable=False, index=True)

    content = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False)  # 1..5

    interviewer_id = Column(String(255), nullable=False)
    interviewer_name = Column(String(100), nullable=True)
    candidate_name = Column(String(100), nullable=True)

    created_at = Column(DateTime, nullable=False, default=utcnow, index=True)
