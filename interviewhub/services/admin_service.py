"""
Admin read-only rollups. Collections are loaded and counted in memory.
Callers must already have passed require_admin.
"""
from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from interviewhub.db.base import utcnow
from interviewhub.models.comment import Comment
from interviewhub.models.custom_question import CustomQuestion
from interviewhub.models.interview import Interview
from interviewhub.models.user import User
from interviewhub.services import mock_interview_service

RECENT_LIMIT = 10


def _is_scheduled(i: Interview, now: datetime) -> bool:
    return i.status == "scheduled" and i.start_time > now


def _is_completed(i: Interview, now: datetime) -> bool:
    return i.status == "completed" or (i.end_time is not None and i.end_time < now)


def _is_in_progress(i: Interview, now: datetime) -> bool:
    if i.status in ("in_progress", "active"):
        return True
    return i.start_time <= now and (i.end_time is None or i.end_time > now)


def system_stats(db: Session, now: Optional[datetime] = None) -> Dict:
    """Status buckets mix stored status with time inference and may overlap."""
    now = now or utcnow()

    users = db.query(User).all()
    interviews = db.query(Interview).all()
    custom_question_count = db.query(CustomQuestion).count()

    return {
        "total_users": len(users),
        "users_by_role": {
            "candidates": sum(1 for u in users if u.role == "candidate"),
            "interviewers": sum(1 for u in users if u.role == "interviewer"),
            "admins": sum(1 for u in users if u.role == "admin"),
        },
        "total_interviews": len(interviews),
        "interviews_by_status": {
            "scheduled": sum(1 for i in interviews if _is_scheduled(i, now)),
            "completed": sum(1 for i in interviews if _is_completed(i, now)),
            "in_progress": sum(1 for i in interviews if _is_in_progress(i, now)),
        },
        "total_custom_questions": custom_question_count,
    }


def recent_activity(db: Session) -> List[Dict]:
    interviews = (
        db.query(Interview)
        .order_by(Interview.created_at.desc(), Interview.id.desc())
        .limit(RECENT_LIMIT)
        .all()
    )
    comments = (
        db.query(Comment)
        .order_by(Comment.created_at.desc(), Comment.id.desc())
        .limit(RECENT_LIMIT)
        .all()
    )

    activities = [
        {"type": "interview", "data": i, "timestamp": i.start_time}
        for i in interviews
    ] + [
        {"type": "feedback", "data": c, "timestamp": c.created_at}
        for c in comments
    ]
    activities.sort(key=lambda a: a["timestamp"], reverse=True)
    return activities[:RECENT_LIMIT]


def all_mock_interviews(db: Session) -> List[Dict]:
    """Every mock interview with its owner's name/email/image."""
    users_by_external_id = {u.external_id: u for u in db.query(User).all()}

    results = []
    for mi in mock_interview_service.list_all(db):
        owner: Optional[User] = users_by_external_id.get(mi.user_id)
        results.append(
            {
                "interview": mi,
                "user_name": owner.name if owner else "Unknown User",
                "user_email": owner.email if owner else "Unknown Email",
                "user_image": (owner.image or "") if owner else "",
            }
        )
    return results
