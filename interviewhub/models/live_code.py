# interviewhub/models/live_code.py
from sqlalchemy import Column, Integer, String, Text, DateTime, Enum, Index, UniqueConstraint
from interviewhub.db.base import Base, BigIntPK, utcnow

LANGUAGES = ("javascript", "python", "java")


class LiveCodeEvent(Base):
    """One row per editor snapshot. Append-only: never updated, never deleted."""
    __tablename__ = "live_code_events"

    id = Column(BigIntPK, primary_key=True, index=True)
    interview_id = Column(String(255), nullable=False)
    seq = Column(Integer, nullable=False)  # per-interview, monotonic

    code = Column(Text, nullable=False, default="")
    language = Column(
        Enum(*LANGUAGES, name="code_language", native_enum=False),
        nullable=False,
    )
    question_id = Column(String(255), nullable=True)

    updated_by = Column(String(255), nullable=False)  # external id
    last_updated = Column(DateTime, nullable=False, default=utcnow)

    __table_args__ = (
        UniqueConstraint("interview_id", "seq", name="uq_live_code_events_interview_seq"),
        Index("ix_live_code_events_interview_recent", "interview_id", "last_updated", "seq"),
    )
