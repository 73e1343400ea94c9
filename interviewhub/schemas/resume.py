from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# -- Request --

class ResumeCreateIn(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    content: str
    job_description: Optional[str] = None
    template: Optional[str] = None


class ResumeUpdateIn(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    content: Optional[str] = None
    job_description: Optional[str] = None
    template: Optional[str] = None


class ResumeGenerateIn(BaseModel):
    current_resume_content: str = ""
    job_description: str = Field(..., min_length=1)
    template: Optional[str] = None


# -- Response --

class ResumeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    title: str
    content: str
    job_description: Optional[str] = None
    skills: Optional[List[str]] = None
    template: Optional[str] = None
    feedback: Optional[str] = None
    created_at: datetime
    updated_at: datetime
