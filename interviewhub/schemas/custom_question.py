from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StarterCode(BaseModel):
    javascript: str = ""
    python: str = ""
    java: str = ""


class Example(BaseModel):
    input: str
    output: str
    explanation: Optional[str] = None


# -- Request --

class CustomQuestionCreateIn(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    interview_id: str = Field(..., min_length=1)
    starter_code: StarterCode
    examples: List[Example] = Field(default_factory=list)


# -- Response --

class CustomQuestionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    interview_id: str
    interviewer_id: str
    title: str
    description: str
    starter_code: StarterCode
    examples: List[Example]
    created_at: Optional[datetime] = None
