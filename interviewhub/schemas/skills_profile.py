from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class SkillsProfileIn(BaseModel):
    industry: str = Field(..., min_length=1, max_length=100)
    years_of_experience: int = Field(..., ge=0, le=80)
    skills: List[str] = Field(default_factory=list)
    bio: str = ""


class SkillsProfileOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    industry: str
    years_of_experience: int
    skills: List[str]
    bio: str
    created_at: datetime
    updated_at: datetime
