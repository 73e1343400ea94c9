"""
Post-interview feedback (comments). Comments are never mutated.
"""
import logging
from typing import Dict, List

from sqlalchemy.orm import Session

from interviewhub.errors import NotFound
from interviewhub.models.comment import Comment
from interviewhub.models.interview import Interview
from interviewhub.services import user_service
from interviewhub.services.interview_service import InterviewService

logger = logging.getLogger(__name__)


def add_comment(
    db: Session,
    interviewer_id: str,
    interview_id: int,
    content: str,
    rating: int,
) -> Comment:
    """
    Raises:
        NotFound: interview, interviewer or candidate unknown
    """
    interview = InterviewService.get_interview(db, interview_id)

    interviewer = user_service.get_by_external_id(db, interviewer_id)
    if interviewer is None:
        raise NotFound("interviewer_not_found", "Interviewer is not registered")

    candidate = user_service.get_by_external_id(db, interview.candidate_id)
    if candidate is None:
        raise NotFound("candidate_not_found", "Candidate is not registered")

    comment = Comment(
        interview_id=interview.id,
        content=content,
        rating=rating,
        interviewer_id=interviewer_id,
        interviewer_name=interviewer.name,
        candidate_name=candidate.name,
    )
    db.add(comment)
    db.commit()
    db.refresh(comment)
    logger.info("comment %s on interview %s", comment.id, interview.id)
    return comment


def list_for_interview(db: Session, interview_id: int) -> List[Comment]:
    return (
        db.query(Comment)
        .filter(Comment.interview_id == interview_id)
        .order_by(Comment.id.asc())
        .all()
    )


def feedback_for_candidate(db: Session, candidate_id: str) -> List[Dict]:
    """Comments on all of the candidate's interviews, newest interview first."""
    rows = (
        db.query(Comment, Interview)
        .join(Interview, Comment.interview_id == Interview.id)
        .filter(Interview.candidate_id == candidate_id)
        .all()
    )
    items = [
        {"comment": c, "interview_title": i.title, "interview_date": i.start_time}
        for c, i in rows
    ]
    items.sort(key=lambda x: x["interview_date"], reverse=True)
    return items
