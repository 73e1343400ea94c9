from datetime import datetime
from typing import Literal, Union

from pydantic import BaseModel

from interviewhub.schemas.comment import CommentOut
from interviewhub.schemas.interview import InterviewOut


class UsersByRole(BaseModel):
    candidates: int
    interviewers: int
    admins: int


class InterviewsByStatus(BaseModel):
    scheduled: int
    completed: int
    in_progress: int


class SystemStatsOut(BaseModel):
    total_users: int
    users_by_role: UsersByRole
    total_interviews: int
    interviews_by_status: InterviewsByStatus
    total_custom_questions: int


class ActivityOut(BaseModel):
    type: Literal["interview", "feedback"]
    data: Union[InterviewOut, CommentOut]
    timestamp: datetime
