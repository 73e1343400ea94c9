from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Language = Literal["javascript", "python", "java"]


# -- Request --

class CodeUpdateIn(BaseModel):
    code: str = Field(..., max_length=200_000)
    language: Language
    question_id: Optional[str] = None


class QuestionSwitchIn(BaseModel):
    question_id: str = Field(..., min_length=1)


# -- Response --

class LiveCodeEventOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    interview_id: str
    seq: int
    code: str
    language: Language
    question_id: Optional[str] = None
    updated_by: str
    last_updated: datetime
