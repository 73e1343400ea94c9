# interviewhub/routers/resumes.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from interviewhub.deps import get_db, get_current_user
from interviewhub.models.user import User
from interviewhub.schemas.resume import ResumeCreateIn, ResumeGenerateIn, ResumeOut, ResumeUpdateIn
from interviewhub.services.resume_service import ResumeService

router = APIRouter(prefix="/api/resumes", tags=["resumes"])


@router.post("", response_model=ResumeOut, status_code=201)
def create_resume(
    body: ResumeCreateIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return ResumeService.create(
        db,
        user.external_id,
        title=body.title,
        content=body.content,
        job_description=body.job_description,
        template=body.template,
    )


@router.get("", response_model=List[ResumeOut])
def list_resumes(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return ResumeService.list_for_owner(db, user.external_id)


@router.post("/generate", response_model=ResumeOut, status_code=201)
def generate_resume(
    body: ResumeGenerateIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return ResumeService.generate(
        db,
        user.external_id,
        current_resume_content=body.current_resume_content,
        job_description=body.job_description,
        template=body.template,
    )


@router.get("/{resume_id}", response_model=ResumeOut)
def get_resume(
    resume_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return ResumeService.get_owned(db, user.external_id, resume_id)


@router.patch("/{resume_id}", response_model=ResumeOut)
def update_resume(
    resume_id: int,
    body: ResumeUpdateIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return ResumeService.update(db, user.external_id, resume_id, **body.model_dump())


@router.delete("/{resume_id}", status_code=204)
def delete_resume(
    resume_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    ResumeService.delete(db, user.external_id, resume_id)
