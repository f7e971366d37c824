"""
Shared pytest fixtures for gym-api tests.

Every test gets its own SQLite file under ``tmp_path`` and a controllable
clock, so durations and stats windows can be asserted exactly.
"""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi import Depends
from fastapi.testclient import TestClient

from gym_api.api.deps import get_repo
from gym_api.core.config import Settings
from gym_api.core.db import connect, get_db, init_db
from gym_api.main import create_app
from gym_api.repositories.sessions_repo import SessionsRepo

T0 = datetime(2026, 3, 14, 9, 30, 0, tzinfo=timezone.utc)


class FakeClock:
    """Callable stand-in for ``utc_now`` that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock(T0)


@pytest.fixture
def db_path(tmp_path):
    path = str(tmp_path / "gym.db")
    init_db(path)
    return path


@pytest.fixture
def conn(db_path):
    con = connect(db_path)
    yield con
    con.close()


@pytest.fixture
def repo(conn, clock):
    return SessionsRepo(conn, clock=clock)


@pytest.fixture
def seed(conn):
    """Insert sessions with explicit start timestamps."""

    def _seed(*started_at: str) -> None:
        for i, ts in enumerate(started_at):
            conn.execute(
                "INSERT INTO gym_sessions(session_id, started_at) VALUES(?,?)",
                (f"seed-{i}-{ts}", ts),
            )
        conn.commit()

    return _seed


@pytest.fixture
def app(db_path, clock):
    app = create_app(Settings(db_path=db_path))

    def repo_with_clock(db=Depends(get_db)) -> SessionsRepo:
        return SessionsRepo(db, clock=clock)

    app.dependency_overrides[get_repo] = repo_with_clock
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
