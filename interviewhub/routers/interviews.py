# interviewhub/routers/interviews.py
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from interviewhub.deps import get_db, get_identity, require_identity
from interviewhub.schemas.interview import InterviewCreateIn, InterviewOut, InterviewStatusIn
from interviewhub.services.interview_service import InterviewService

router = APIRouter(prefix="/api/interviews", tags=["interviews"])


# 1) schedule an interview
@router.post("", response_model=InterviewOut, status_code=201)
def create_interview(
    body: InterviewCreateIn,
    identity: dict = Depends(require_identity),
    db: Session = Depends(get_db),
):
    return InterviewService.create_interview(
        db,
        title=body.title.strip(),
        description=body.description,
        start_time=body.start_time,
        status=body.status,
        stream_call_id=body.stream_call_id,
        candidate_id=body.candidate_id,
        interviewer_ids=body.interviewer_ids,
    )


# 2) status transition (completed stamps end_time)
@router.patch("/{interview_id}/status", response_model=InterviewOut)
def update_interview_status(
    interview_id: int,
    body: InterviewStatusIn,
    identity: dict = Depends(require_identity),
    db: Session = Depends(get_db),
):
    return InterviewService.update_status(db, interview_id, body.status)


# 3) listings
@router.get("", response_model=List[InterviewOut])
def list_interviews(
    identity: dict = Depends(require_identity),
    db: Session = Depends(get_db),
):
    return InterviewService.list_all(db)


@router.get("/mine", response_model=List[InterviewOut])
def my_interviews(
    identity: Optional[dict] = Depends(get_identity),
    db: Session = Depends(get_db),
):
    # unauthenticated -> empty list, not 401
    if identity is None:
        return []
    return InterviewService.list_for_candidate(db, identity["user_id"])


@router.get("/scheduled", response_model=List[InterviewOut])
def scheduled_interviews(
    identity: Optional[dict] = Depends(get_identity),
    db: Session = Depends(get_db),
):
    if identity is None:
        return []
    return InterviewService.list_scheduled_for_candidate(db, identity["user_id"])


@router.get("/by-candidate/{candidate_id}", response_model=List[InterviewOut])
def interviews_by_candidate(
    candidate_id: str,
    identity: dict = Depends(require_identity),
    db: Session = Depends(get_db),
):
    return InterviewService.list_for_candidate(db, candidate_id)


@router.get("/by-stream-call/{stream_call_id}", response_model=Optional[InterviewOut])
def interview_by_stream_call_id(stream_call_id: str, db: Session = Depends(get_db)):
    return InterviewService.get_by_stream_call_id(db, stream_call_id)


@router.get("/{interview_id}", response_model=InterviewOut)
def get_interview(
    interview_id: int,
    identity: dict = Depends(require_identity),
    db: Session = Depends(get_db),
):
    return InterviewService.get_interview(db, interview_id)
