from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# -- Request --

class CommentCreateIn(BaseModel):
    interview_id: int
    content: str = Field(..., min_length=1, max_length=5000)
    rating: int = Field(..., ge=1, le=5)


# -- Response --

class CommentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    interview_id: int
    content: str
    rating: int
    interviewer_id: str
    interviewer_name: Optional[str] = None
    candidate_name: Optional[str] = None
    created_at: datetime


class CandidateFeedbackOut(CommentOut):
    interview_title: str
    interview_date: datetime
