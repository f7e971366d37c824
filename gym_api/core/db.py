import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator

from fastapi import Request

from gym_api.core.config import settings

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS gym_sessions (
    session_id TEXT PRIMARY KEY,
    started_at TEXT NOT NULL,
    ended_at TEXT,
    duration_sec INTEGER
);

CREATE INDEX IF NOT EXISTS idx_gym_sessions_started_at ON gym_sessions(started_at);
"""

def connect(db_path: str | None = None) -> sqlite3.Connection:
    con = sqlite3.connect(db_path or settings.db_path, check_same_thread=False)
    con.row_factory = sqlite3.Row
    return con

@contextmanager
def db_session(db_path: str | None = None) -> Iterator[sqlite3.Connection]:
    con = connect(db_path)
    try:
        yield con
        con.commit()
    finally:
        con.close()

def init_db(db_path: str | None = None) -> None:
    with db_session(db_path) as con:
        con.executescript(SCHEMA)
    logger.info("Database ready at %s", db_path or settings.db_path)

def get_db(request: Request) -> Iterator[sqlite3.Connection]:
    # one connection per request, against the database this app was built for
    with db_session(request.app.state.settings.db_path) as con:
        yield con
