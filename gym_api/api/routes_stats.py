import logging
import re

from fastapi import APIRouter, Depends

from gym_api.api.deps import get_repo
from gym_api.repositories.sessions_repo import SessionsRepo

logger = logging.getLogger(__name__)

router = APIRouter(tags=["stats"])

DEFAULT_HOURS = 24
MAX_HOURS = 168

# leading integer only: "12abc" -> 12, "1.5" -> 1
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

def window_hours(raw: str | None) -> int:
    m = _LEADING_INT.match(raw or "")
    hours = int(m.group(1)) if m else DEFAULT_HOURS
    return max(1, min(MAX_HOURS, hours))

@router.get("/stats")
def stats(mode: str = "", hours: str | None = None, repo: SessionsRepo = Depends(get_repo)):
    if mode.strip() == "hour_of_day":
        rows = repo.hour_of_day_stats()
        logger.debug("hour_of_day stats: %d rows", len(rows))
        return {"ok": True, "mode": "hour_of_day", "rows": rows}

    window = window_hours(hours)
    rows = repo.recent_stats(window)
    logger.debug("recent stats over %dh: %d rows", window, len(rows))
    return {"ok": True, "hours": window, "rows": rows}
