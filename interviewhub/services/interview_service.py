"""
Interview record business logic
- create / status transitions
- candidate-scoped and open listings
"""
import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from interviewhub.db.base import as_naive_utc, utcnow
from interviewhub.errors import NotFound
from interviewhub.models.interview import Interview

logger = logging.getLogger(__name__)

SCHEDULED_STATUSES = ("scheduled", "upcoming")


class InterviewService:
    """Interview CRUD. Interviews are never deleted."""

    @staticmethod
    def create_interview(
        db: Session,
        title: str,
        start_time: datetime,
        status: str,
        stream_call_id: str,
        candidate_id: str,
        interviewer_ids: List[str],
        description: Optional[str] = None,
    ) -> Interview:
        interview = Interview(
            title=title,
            description=description,
            start_time=as_naive_utc(start_time),
            status=status,
            stream_call_id=stream_call_id,
            candidate_id=candidate_id,
            interviewer_ids=list(interviewer_ids),
        )
        db.add(interview)
        db.commit()
        db.refresh(interview)
        logger.info("interview %s created (%s)", interview.id, status)
        return interview

    @staticmethod
    def get_interview(db: Session, interview_id: int) -> Interview:
        """
        Raises:
            NotFound: unknown id
        """
        interview = db.get(Interview, interview_id)
        if interview is None:
            raise NotFound("interview_not_found", f"Interview {interview_id} does not exist")
        return interview

    @staticmethod
    def update_status(db: Session, interview_id: int, status: str) -> Interview:
        """
        Patch the status. end_time is stamped only on the transition to
        completed.
        """
        interview = InterviewService.get_interview(db, interview_id)
        previous = interview.status
        interview.status = status
        if status == "completed":
            interview.end_time = utcnow()
        db.commit()
        db.refresh(interview)
        logger.info("interview %s status %s -> %s", interview.id, previous, status)
        return interview

    @staticmethod
    def list_all(db: Session) -> List[Interview]:
        return db.query(Interview).order_by(Interview.id.asc()).all()

    @staticmethod
    def list_for_candidate(db: Session, candidate_id: str) -> List[Interview]:
        return (
            db.query(Interview)
            .filter(Interview.candidate_id == candidate_id)
            .order_by(Interview.id.asc())
            .all()
        )

    @staticmethod
    def list_scheduled_for_candidate(db: Session, candidate_id: str) -> List[Interview]:
        return (
            db.query(Interview)
            .filter(
                Interview.candidate_id == candidate_id,
                Interview.status.in_(SCHEDULED_STATUSES),
            )
            .order_by(Interview.start_time.desc())
            .all()
        )

    @staticmethod
    def get_by_stream_call_id(db: Session, stream_call_id: str) -> Optional[Interview]:
        return (
            db.query(Interview)
            .filter(Interview.stream_call_id == stream_call_id)
            .first()
        )
