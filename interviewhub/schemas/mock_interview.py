from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class MockQuestion(BaseModel):
    # stored keys are camelCase inside the JSON column
    model_config = ConfigDict(populate_by_name=True)

    question: str
    options: List[str]
    correct_answer: str = Field(..., alias="correctAnswer")
    user_answer: Optional[str] = Field(None, alias="userAnswer")
    explanation: str

    def to_record(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


# -- Request --

class MockInterviewCreateIn(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    questions: List[MockQuestion] = Field(..., min_length=1)
    category: Optional[str] = None


class MockInterviewGenerateIn(BaseModel):
    category: Optional[str] = None
    number_of_questions: Optional[int] = Field(None, ge=1)


class AnswerIn(BaseModel):
    question_index: int
    answer: str


# -- Response --

class MockInterviewOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    title: str
    category: Optional[str] = None
    questions: List[MockQuestion]
    status: Literal["in_progress", "completed"]
    score: Optional[float] = None
    feedback: Optional[str] = None
    created_at: datetime
    completed_at: Optional[datetime] = None


class AdminMockInterviewOut(MockInterviewOut):
    user_name: str
    user_email: str
    user_image: str
