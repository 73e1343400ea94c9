from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

InterviewStatus = Literal[
    "scheduled",
    "in_progress",
    "completed",
    "active",
    "succeeded",
    "upcoming",
]


# -- Request --

# interview registration
class InterviewCreateIn(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    start_time: datetime
    status: InterviewStatus
    stream_call_id: str = Field(..., min_length=1)
    candidate_id: str = Field(..., min_length=1, description="candidate external id")
    interviewer_ids: List[str] = Field(default_factory=list)


class InterviewStatusIn(BaseModel):
    status: InterviewStatus


# -- Response --

class InterviewOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    start_time: datetime
    end_time: Optional[datetime] = None
    status: InterviewStatus
    stream_call_id: str
    candidate_id: str
    interviewer_ids: List[str]
    created_at: Optional[datetime] = None
