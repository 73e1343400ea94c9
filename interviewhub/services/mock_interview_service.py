"""
Mock interview engine
- generate a quiz from the caller's skills profile
- record answers while in progress
- complete: score + canned feedback

in_progress -> completed is the only transition.
"""
import copy
import logging
import random
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from interviewhub.db.base import utcnow
from interviewhub.errors import NotFound, OutOfRange, PolicyViolation, Unauthorized
from interviewhub.models.mock_interview import MockInterview
from interviewhub.models.user_skills_profile import UserSkillsProfile
from interviewhub.services import question_bank

logger = logging.getLogger(__name__)

# (lower bound, feedback), checked top-down
FEEDBACK_BANDS = [
    (90, "Excellent job! You have a strong understanding of these concepts."),
    (70, "Good work! You have a solid foundation, but there's room for improvement in certain areas."),
    (50, "You're making progress, but consider reviewing the concepts you missed in this interview."),
    (0, "This seems to be a challenging area for you. Consider focusing more study time on these concepts."),
]


def feedback_for_score(score: float) -> str:
    for lower, text in FEEDBACK_BANDS:
        if score >= lower:
            return text
    return FEEDBACK_BANDS[-1][1]


def calculate_score(questions: List[Dict]) -> float:
    """
    Percentage of correct answers among answered questions only.
    Nothing answered -> 0.
    """
    answered = [q for q in questions if q.get("userAnswer")]
    if not answered:
        return 0
    correct = sum(1 for q in answered if q["userAnswer"] == q["correctAnswer"])
    return (correct / len(answered)) * 100


def derive_title(category: Optional[str], skills: Optional[List[str]]) -> str:
    if category:
        return f"{category} Interview"
    if skills:
        return f"{skills[0]} Developer Interview"
    return "Mock Interview"


def build_question_pool(
    skills: Optional[List[str]],
    category: Optional[str] = None,
    number_of_questions: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> List[Dict]:
    pool = copy.deepcopy(question_bank.DEFAULT_QUESTIONS)
    pool.extend(copy.deepcopy(question_bank.questions_for_skills(skills)))
    pool.extend(copy.deepcopy(question_bank.questions_for_category(category)))

    if number_of_questions and 0 < number_of_questions < len(pool):
        # random.shuffle is Fisher-Yates
        (rng or random).shuffle(pool)
        pool = pool[:number_of_questions]
    return pool


# ----------------------------
# ownership
# ----------------------------
def get_owned(db: Session, owner_id: str, mock_interview_id: int) -> MockInterview:
    """
    Raises:
        NotFound: unknown id
        Unauthorized: 403, caller is not the owner
    """
    interview = db.get(MockInterview, mock_interview_id)
    if interview is None:
        raise NotFound("mock_interview_not_found", f"Mock interview {mock_interview_id} does not exist")
    if interview.user_id != owner_id:
        raise Unauthorized.forbidden("Not the owner of this mock interview")
    return interview


# ----------------------------
# create / generate
# ----------------------------
def create(
    db: Session,
    owner_id: str,
    title: str,
    questions: List[Dict],
    category: Optional[str] = None,
) -> MockInterview:
    interview = MockInterview(
        user_id=owner_id,
        title=title,
        questions=[dict(q) for q in questions],
        status="in_progress",
        category=category,
    )
    db.add(interview)
    db.commit()
    db.refresh(interview)
    return interview


def generate(
    db: Session,
    owner_id: str,
    category: Optional[str] = None,
    number_of_questions: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> MockInterview:
    profile = (
        db.query(UserSkillsProfile)
        .filter(UserSkillsProfile.user_id == owner_id)
        .first()
    )
    skills = list(profile.skills or []) if profile is not None else []
    logger.info("generating mock interview for %s, skills=%s", owner_id, question_bank.normalize_skills(skills))

    questions = build_question_pool(skills, category, number_of_questions, rng)
    title = derive_title(category, skills)

    logger.info("mock interview '%s' with %d questions", title, len(questions))
    return create(db, owner_id, title, questions, category)


# ----------------------------
# listing
# ----------------------------
def list_for_owner(db: Session, owner_id: str, status: Optional[str] = None) -> List[MockInterview]:
    q = db.query(MockInterview).filter(MockInterview.user_id == owner_id)
    if status is not None:
        q = q.filter(MockInterview.status == status)
    return q.order_by(MockInterview.created_at.desc(), MockInterview.id.desc()).all()


def list_all(db: Session) -> List[MockInterview]:
    return (
        db.query(MockInterview)
        .order_by(MockInterview.created_at.desc(), MockInterview.id.desc())
        .all()
    )


# ----------------------------
# answer / complete
# ----------------------------
def submit_answer(
    db: Session,
    owner_id: str,
    mock_interview_id: int,
    question_index: int,
    answer: str,
) -> MockInterview:
    interview = get_owned(db, owner_id, mock_interview_id)

    if interview.status != "in_progress":
        raise PolicyViolation("mock_interview_completed", "Answers cannot change after completion")

    questions = [dict(q) for q in interview.questions]
    if question_index < 0 or question_index >= len(questions):
        raise OutOfRange(
            "question_index_out_of_range",
            f"Question index {question_index} is out of bounds (0..{len(questions) - 1})",
        )

    questions[question_index]["userAnswer"] = answer
    interview.questions = questions  # new list so the JSON column is flagged dirty
    db.commit()
    db.refresh(interview)
    return interview


def complete(db: Session, owner_id: str, mock_interview_id: int) -> MockInterview:
    """
    Score and close. A second call recomputes from the (frozen) answers and
    therefore yields the same score.
    """
    interview = get_owned(db, owner_id, mock_interview_id)

    score = calculate_score(interview.questions)
    interview.score = score
    interview.feedback = feedback_for_score(score)
    interview.status = "completed"
    interview.completed_at = utcnow()

    db.commit()
    db.refresh(interview)
    logger.info("mock interview %s completed, score=%.1f", interview.id, score)
    return interview
