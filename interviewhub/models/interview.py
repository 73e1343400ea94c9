# interviewhub/models/interview.py
from sqlalchemy import Column, String, Text, DateTime, Enum, JSON, Index
from interviewhub.db.base import Base, BigIntPK, utcnow

INTERVIEW_STATUSES = (
    "scheduled",
    "in_progress",
    "completed",
    "active",
    "succeeded",
    "upcoming",
)


class Interview(Base):
    __tablename__ = "interviews"

    id = Column(BigIntPK, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)

    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=True)  # set only on -> completed

    status = Column(
        Enum(*INTERVIEW_STATUSES, name="interview_status", native_enum=False),
        nullable=False,
    )
    stream_call_id = Column(String(255), nullable=False, index=True)
    candidate_id = Column(String(255), nullable=False, index=True)  # external id
    interviewer_ids = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime, nullable=False, default=utcnow)

    __table_args__ = (
        Index("ix_interviews_candidate_id_start_time", "candidate_id", "start_time"),
    )
