# interviewhub/models/registry.py
# Import every model so Base.metadata knows all tables before create_all.
from interviewhub.models.user import User, SystemBootstrap
from interviewhub.models.interview import Interview
from interviewhub.models.live_code import LiveCodeEvent
from interviewhub.models.custom_question import CustomQuestion
from interviewhub.models.comment import Comment
from interviewhub.models.mock_interview import MockInterview
from interviewhub.models.user_skills_profile import UserSkillsProfile
from interviewhub.models.resume import Resume

__all__ = [
    "User",
    "SystemBootstrap",
    "Interview",
    "LiveCodeEvent",
    "CustomQuestion",
    "Comment",
    "MockInterview",
    "UserSkillsProfile",
    "Resume",
]
