"""
Interviewer-authored coding questions, scoped to one interview.
Immutable once created: replace = delete + create.
"""
import logging
from typing import Dict, List

from sqlalchemy.orm import Session

from interviewhub.errors import NotFound, Unauthorized
from interviewhub.models.custom_question import CustomQuestion

logger = logging.getLogger(__name__)


def create(
    db: Session,
    interviewer_id: str,
    interview_id: str,
    title: str,
    description: str,
    starter_code: Dict[str, str],
    examples: List[Dict],
) -> CustomQuestion:
    question = CustomQuestion(
        interviewer_id=interviewer_id,
        interview_id=interview_id,
        title=title,
        description=description,
        starter_code=dict(starter_code),
        examples=[dict(e) for e in examples],
    )
    db.add(question)
    db.commit()
    db.refresh(question)
    logger.info("custom question %s added to %s", question.id, interview_id)
    return question


def list_for_interview(db: Session, interview_id: str) -> List[CustomQuestion]:
    return (
        db.query(CustomQuestion)
        .filter(CustomQuestion.interview_id == interview_id)
        .order_by(CustomQuestion.id.asc())
        .all()
    )


def delete(db: Session, interviewer_id: str, question_id: int) -> None:
    question = db.get(CustomQuestion, question_id)
    if question is None:
        raise NotFound("question_not_found", f"Question {question_id} does not exist")
    if question.interviewer_id != interviewer_id:
        raise Unauthorized.forbidden("Only the interviewer who created the question can delete it")

    db.delete(question)
    db.commit()
    logger.info("custom question %s deleted", question_id)
