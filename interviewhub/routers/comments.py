# interviewhub/routers/comments.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from interviewhub.deps import get_db, require_identity
from interviewhub.schemas.comment import CandidateFeedbackOut, CommentCreateIn, CommentOut
from interviewhub.services import comment_service

router = APIRouter(prefix="/api/comments", tags=["comments"])


# 1) interviewer leaves feedback after the interview
@router.post("", response_model=CommentOut, status_code=201)
def add_comment(
    body: CommentCreateIn,
    identity: dict = Depends(require_identity),
    db: Session = Depends(get_db),
):
    return comment_service.add_comment(
        db,
        interviewer_id=identity["user_id"],
        interview_id=body.interview_id,
        content=body.content,
        rating=body.rating,
    )


# 2) feedback on one interview
@router.get("/interview/{interview_id}", response_model=List[CommentOut])
def list_comments(
    interview_id: int,
    identity: dict = Depends(require_identity),
    db: Session = Depends(get_db),
):
    return comment_service.list_for_interview(db, interview_id)


# 3) candidate: everything said about me
@router.get("/mine", response_model=List[CandidateFeedbackOut])
def my_feedback(
    identity: dict = Depends(require_identity),
    db: Session = Depends(get_db),
):
    return [
        CandidateFeedbackOut(
            **CommentOut.model_validate(item["comment"]).model_dump(),
            interview_title=item["interview_title"],
            interview_date=item["interview_date"],
        )
        for item in comment_service.feedback_for_candidate(db, identity["user_id"])
    ]
