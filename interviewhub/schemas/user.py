from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

Role = Literal["candidate", "interviewer", "admin"]


# -- Request --

class UserSyncIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    image: Optional[str] = Field(None, max_length=500)


class RoleUpdateIn(BaseModel):
    role: Role


# -- Response --

class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    external_id: str
    image: Optional[str] = None
    role: Role
    created_at: Optional[datetime] = None
