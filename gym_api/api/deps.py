import sqlite3

from fastapi import Depends

from gym_api.core.db import get_db
from gym_api.repositories.sessions_repo import SessionsRepo

def get_repo(db: sqlite3.Connection = Depends(get_db)) -> SessionsRepo:
    return SessionsRepo(db)
