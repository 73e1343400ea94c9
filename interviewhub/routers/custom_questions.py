# interviewhub/routers/custom_questions.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from interviewhub.deps import get_db, get_identity, require_identity
from interviewhub.schemas.custom_question import CustomQuestionCreateIn, CustomQuestionOut
from interviewhub.services import custom_question_service

router = APIRouter(prefix="/api/custom-questions", tags=["custom-questions"])


@router.post("", response_model=CustomQuestionOut, status_code=201)
def create_custom_question(
    body: CustomQuestionCreateIn,
    identity: dict = Depends(require_identity),
    db: Session = Depends(get_db),
):
    return custom_question_service.create(
        db,
        interviewer_id=identity["user_id"],
        interview_id=body.interview_id,
        title=body.title.strip(),
        description=body.description,
        starter_code=body.starter_code.model_dump(),
        examples=[e.model_dump(exclude_none=True) for e in body.examples],
    )


@router.get("", response_model=List[CustomQuestionOut])
def list_custom_questions(
    interview_id: str = Query(..., min_length=1),
    identity: Optional[dict] = Depends(get_identity),
    db: Session = Depends(get_db),
):
    if identity is None:
        return []
    return custom_question_service.list_for_interview(db, interview_id)


@router.delete("/{question_id}", status_code=204)
def delete_custom_question(
    question_id: int,
    identity: dict = Depends(require_identity),
    db: Session = Depends(get_db),
):
    custom_question_service.delete(db, identity["user_id"], question_id)
