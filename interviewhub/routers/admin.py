# interviewhub/routers/admin.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from interviewhub.deps import get_db, require_admin
from interviewhub.models.interview import Interview
from interviewhub.models.user import User
from interviewhub.schemas.admin import ActivityOut, SystemStatsOut
from interviewhub.schemas.comment import CommentOut
from interviewhub.schemas.interview import InterviewOut
from interviewhub.schemas.mock_interview import AdminMockInterviewOut, MockInterviewOut
from interviewhub.schemas.user import UserOut
from interviewhub.services import admin_service, user_service

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.get("/stats", response_model=SystemStatsOut)
def system_stats(
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return admin_service.system_stats(db)


@router.get("/activity", response_model=List[ActivityOut])
def recent_activity(
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    results = []
    for a in admin_service.recent_activity(db):
        if isinstance(a["data"], Interview):
            data = InterviewOut.model_validate(a["data"])
        else:
            data = CommentOut.model_validate(a["data"])
        results.append(ActivityOut(type=a["type"], data=data, timestamp=a["timestamp"]))
    return results


@router.get("/users", response_model=List[UserOut])
def all_users(
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return user_service.list_users(db)


@router.get("/mock-interviews", response_model=List[AdminMockInterviewOut])
def all_mock_interviews(
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return [
        AdminMockInterviewOut(
            **MockInterviewOut.model_validate(item["interview"]).model_dump(),
            user_name=item["user_name"],
            user_email=item["user_email"],
            user_image=item["user_image"],
        )
        for item in admin_service.all_mock_interviews(db)
    ]
