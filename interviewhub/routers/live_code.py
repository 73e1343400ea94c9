# interviewhub/routers/live_code.py
import asyncio
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, WebSocket, WebSocketDisconnect, status
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from interviewhub.db.base import SessionLocal
from interviewhub.deps import get_db, require_identity
from interviewhub.schemas.live_code import (
    CodeUpdateIn,
    LiveCodeEventOut,
    QuestionSwitchIn,
)
from interviewhub.services import live_code_service
from interviewhub.services.live_code_hub import live_code_hub
from interviewhub.services.token_auth import decode_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/live-code", tags=["live-code"])


# 1) editor snapshot (debounced on the client, full code every time)
@router.post("/{interview_id}", response_model=LiveCodeEventOut, status_code=201)
def append_code_update(
    interview_id: str,
    body: CodeUpdateIn,
    identity: dict = Depends(require_identity),
    db: Session = Depends(get_db),
):
    return live_code_service.append_code_update(
        db,
        interview_id,
        code=body.code,
        language=body.language,
        question_id=body.question_id,
        updated_by=identity["user_id"],
    )


# 2) question switch, code/language carried forward
@router.post("/{interview_id}/question", response_model=LiveCodeEventOut, status_code=201)
def append_question_switch(
    interview_id: str,
    body: QuestionSwitchIn,
    identity: dict = Depends(require_identity),
    db: Session = Depends(get_db),
):
    return live_code_service.append_question_switch(
        db,
        interview_id,
        question_id=body.question_id,
        updated_by=identity["user_id"],
    )


# 3) reads
@router.get("/{interview_id}/latest", response_model=Optional[LiveCodeEventOut])
def get_latest(
    interview_id: str,
    identity: dict = Depends(require_identity),
    db: Session = Depends(get_db),
):
    return live_code_service.get_latest(db, interview_id)


@router.get("/{interview_id}/history", response_model=List[LiveCodeEventOut])
def get_history(
    interview_id: str,
    limit: int = Query(50, ge=1, le=500),
    identity: dict = Depends(require_identity),
    db: Session = Depends(get_db),
):
    return live_code_service.get_history(db, interview_id, limit)


def _snapshot(interview_id: str) -> Optional[dict]:
    # short-lived session; the socket itself may stay open for an hour
    with SessionLocal() as db:
        latest = live_code_service.get_latest(db, interview_id)
        if latest is None:
            return None
        return LiveCodeEventOut.model_validate(latest).model_dump(mode="json")


# 4) subscription: snapshot on connect, then every new event
@router.websocket("/{interview_id}/ws")
async def subscribe_latest(websocket: WebSocket, interview_id: str, token: str = Query("")):
    try:
        identity = decode_token(token)
    except ValueError as e:
        logger.warning("live-code ws rejected for %s: %s", interview_id, e)
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await websocket.accept()
    sub = live_code_hub.subscribe(interview_id)
    _, queue = sub
    logger.info("live-code ws open %s by %s", interview_id, identity["user_id"])

    async def _pump():
        while True:
            payload = await queue.get()
            await websocket.send_json(payload)

    pump = None
    try:
        snapshot = await run_in_threadpool(_snapshot, interview_id)
        await websocket.send_json({"type": "snapshot", "event": snapshot})
        pump = asyncio.create_task(_pump())
        while True:
            # clients may send keepalives; content is ignored
            await websocket.receive_text()
    except WebSocketDisconnect:
        pass
    finally:
        if pump is not None:
            pump.cancel()
            try:
                await pump
            except asyncio.CancelledError:
                pass
            except Exception as e:
                logger.warning("live-code push to %s failed: %s", interview_id, e)
        live_code_hub.unsubscribe(interview_id, sub)
        logger.info("live-code ws closed %s", interview_id)
