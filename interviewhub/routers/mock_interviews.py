# interviewhub/routers/mock_interviews.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from interviewhub.deps import get_db, get_current_user
from interviewhub.models.user import User
from interviewhub.schemas.mock_interview import (
    AnswerIn,
    MockInterviewCreateIn,
    MockInterviewGenerateIn,
    MockInterviewOut,
)
from interviewhub.services import mock_interview_service

router = APIRouter(prefix="/api/mock-interviews", tags=["mock-interviews"])


# 1) start a quiz from the caller's skills profile
@router.post("/generate", response_model=MockInterviewOut, status_code=201)
def generate_mock_interview(
    body: MockInterviewGenerateIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return mock_interview_service.generate(
        db,
        user.external_id,
        category=body.category,
        number_of_questions=body.number_of_questions,
    )


# 2) start a quiz from an explicit question list
@router.post("", response_model=MockInterviewOut, status_code=201)
def create_mock_interview(
    body: MockInterviewCreateIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return mock_interview_service.create(
        db,
        user.external_id,
        title=body.title.strip(),
        questions=[q.to_record() for q in body.questions],
        category=body.category,
    )


# 3) listings (own only)
@router.get("", response_model=List[MockInterviewOut])
def list_mock_interviews(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return mock_interview_service.list_for_owner(db, user.external_id)


@router.get("/in-progress", response_model=List[MockInterviewOut])
def list_in_progress(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return mock_interview_service.list_for_owner(db, user.external_id, status="in_progress")


@router.get("/{mock_interview_id}", response_model=MockInterviewOut)
def get_mock_interview(
    mock_interview_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return mock_interview_service.get_owned(db, user.external_id, mock_interview_id)


# 4) answer one question (overwrites a previous answer)
@router.post("/{mock_interview_id}/answers", response_model=MockInterviewOut)
def submit_answer(
    mock_interview_id: int,
    body: AnswerIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return mock_interview_service.submit_answer(
        db,
        user.external_id,
        mock_interview_id,
        question_index=body.question_index,
        answer=body.answer,
    )


# 5) finish: score + feedback
@router.post("/{mock_interview_id}/complete", response_model=MockInterviewOut)
def complete_mock_interview(
    mock_interview_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return mock_interview_service.complete(db, user.external_id, mock_interview_id)
