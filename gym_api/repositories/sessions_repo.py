import logging
import sqlite3
import uuid
from datetime import datetime, timedelta
from typing import Any, Callable

from gym_api.core.errors import SessionAlreadyEnded, SessionNotFound
from gym_api.core.utils import parse_iso, to_iso, utc_now

logger = logging.getLogger(__name__)

class SessionsRepo:
    def __init__(self, conn: sqlite3.Connection, clock: Callable[[], datetime] = utc_now):
        self.conn = conn
        self.clock = clock

    def create_session(self) -> dict[str, Any]:
        session_id = str(uuid.uuid4())
        started_at = to_iso(self.clock())

        self.conn.execute(
            "INSERT INTO gym_sessions(session_id, started_at) VALUES(?,?)",
            (session_id, started_at)
        )
        self.conn.commit()

        logger.info("Session %s started at %s", session_id, started_at)
        return {"session_id": session_id, "started_at": started_at}

    def end_session(self, session_id: str) -> dict[str, Any]:
        row = self.conn.execute(
            "SELECT started_at, ended_at FROM gym_sessions WHERE session_id = ?",
            (session_id,)
        ).fetchone()
        if not row:
            raise SessionNotFound()
        if row["ended_at"] is not None:
            raise SessionAlreadyEnded()

        ended_at = to_iso(self.clock())
        elapsed = parse_iso(ended_at) - parse_iso(row["started_at"])
        duration_sec = max(0, int(elapsed.total_seconds()))

        # the ended_at guard makes a concurrent second close a no-op we can detect
        cur = self.conn.execute(
            """
            UPDATE gym_sessions
            SET ended_at = ?, duration_sec = ?
            WHERE session_id = ? AND ended_at IS NULL
            """,
            (ended_at, duration_sec, session_id)
        )
        if cur.rowcount == 0:
            self.conn.rollback()
            raise SessionAlreadyEnded()
        self.conn.commit()

        logger.info("Session %s ended after %ss", session_id, duration_sec)
        return {"session_id": session_id, "ended_at": ended_at, "duration_sec": duration_sec}

    def hour_of_day_stats(self) -> list[dict[str, int]]:
        rows = self.conn.execute(
            """
            SELECT
              CAST(strftime('%H', started_at) AS INTEGER) AS hour,
              COUNT(*) AS starts
            FROM gym_sessions
            WHERE started_at IS NOT NULL
            GROUP BY hour
            ORDER BY hour ASC
            """
        ).fetchall()
        return [{"hour": int(r["hour"]), "starts": int(r["starts"])} for r in rows]

    def recent_stats(self, hours: int) -> list[dict[str, Any]]:
        since = to_iso(self.clock() - timedelta(hours=hours))
        rows = self.conn.execute(
            """
            SELECT
              strftime('%Y-%m-%dT%H:00Z', started_at) AS hour,
              COUNT(*) AS starts
            FROM gym_sessions
            WHERE started_at >= ?
            GROUP BY hour
            ORDER BY hour ASC
            """,
            (since,)
        ).fetchall()
        return [{"hour": r["hour"], "starts": int(r["starts"])} for r in rows]
