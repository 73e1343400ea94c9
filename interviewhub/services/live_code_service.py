"""
Live code synchronization

State per interview is an append-only log of full editor snapshots. The
"current" editor state is the newest row: greatest last_updated, ties broken
by the per-interview seq. There is no locking and no merging; last writer
wins at read time.
"""
import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from interviewhub.db.base import as_naive_utc, utcnow
from interviewhub.errors import PolicyViolation
from interviewhub.models.live_code import LiveCodeEvent
from interviewhub.schemas.live_code import LiveCodeEventOut
from interviewhub.services.live_code_hub import live_code_hub

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "javascript"
MAX_APPEND_ATTEMPTS = 5


def _latest_query(db: Session, interview_id: str):
    return (
        db.query(LiveCodeEvent)
        .filter(LiveCodeEvent.interview_id == interview_id)
        .order_by(LiveCodeEvent.last_updated.desc(), LiveCodeEvent.seq.desc())
    )


def get_latest(db: Session, interview_id: str) -> Optional[LiveCodeEvent]:
    return _latest_query(db, interview_id).first()


def get_history(db: Session, interview_id: str, limit: int = 50) -> List[LiveCodeEvent]:
    return _latest_query(db, interview_id).limit(limit).all()


def _next_seq(db: Session, interview_id: str) -> int:
    current = (
        db.query(func.max(LiveCodeEvent.seq))
        .filter(LiveCodeEvent.interview_id == interview_id)
        .scalar()
    )
    return (current or 0) + 1


def _append(
    db: Session,
    interview_id: str,
    code: str,
    language: str,
    question_id: Optional[str],
    updated_by: str,
    now: Optional[datetime] = None,
) -> LiveCodeEvent:
    stamp = as_naive_utc(now) if now is not None else utcnow()

    for _ in range(MAX_APPEND_ATTEMPTS):
        event = LiveCodeEvent(
            interview_id=interview_id,
            seq=_next_seq(db, interview_id),
            code=code,
            language=language,
            question_id=question_id,
            updated_by=updated_by,
            last_updated=stamp,
        )
        try:
            with db.begin_nested():
                db.add(event)
        except IntegrityError:
            # a concurrent append took this seq; read max again
            continue
        break
    else:
        raise PolicyViolation(
            "live_code_conflict",
            f"Could not append to live code log of {interview_id}",
        )

    db.commit()
    db.refresh(event)
    logger.debug("live-code %s seq=%s by %s", interview_id, event.seq, updated_by)

    # listeners get the current latest, which is not `event` for a late write
    latest = get_latest(db, interview_id)
    live_code_hub.publish(
        interview_id,
        {"type": "update", "event": LiveCodeEventOut.model_validate(latest).model_dump(mode="json")},
    )
    return event


def append_code_update(
    db: Session,
    interview_id: str,
    code: str,
    language: str,
    updated_by: str,
    question_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> LiveCodeEvent:
    """Full snapshot of the editor. Always appends, never merges."""
    return _append(db, interview_id, code, language, question_id, updated_by, now)


def append_question_switch(
    db: Session,
    interview_id: str,
    question_id: str,
    updated_by: str,
    now: Optional[datetime] = None,
) -> LiveCodeEvent:
    """
    Select a question for everyone in the session. The newest code/language
    is carried forward unchanged; code is not kept per question.
    """
    latest = get_latest(db, interview_id)
    code = latest.code if latest is not None else ""
    language = latest.language if latest is not None else DEFAULT_LANGUAGE
    return _append(db, interview_id, code, language, question_id, updated_by, now)
