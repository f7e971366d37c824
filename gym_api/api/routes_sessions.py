import json
from typing import Any

from fastapi import APIRouter, Depends, Request

from gym_api.api.deps import get_repo
from gym_api.core.errors import MalformedRequest
from gym_api.repositories.sessions_repo import SessionsRepo

router = APIRouter(tags=["sessions"])

async def json_body(request: Request) -> Any:
    raw = await request.body()
    if not raw.strip():
        raise MalformedRequest("Expected JSON body")
    try:
        return json.loads(raw)
    except ValueError:
        raise MalformedRequest("Expected JSON body")

@router.post("/start")
def session_start(repo: SessionsRepo = Depends(get_repo)):
    started = repo.create_session()
    return {"ok": True, **started}

@router.post("/end")
def session_end(payload: Any = Depends(json_body), repo: SessionsRepo = Depends(get_repo)):
    session_id = payload.get("session_id") if isinstance(payload, dict) else None
    if not isinstance(session_id, str) or not session_id.strip():
        raise MalformedRequest("session_id is required")

    ended = repo.end_session(session_id.strip())
    return {"ok": True, **ended}
