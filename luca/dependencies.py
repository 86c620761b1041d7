"""
FastAPI dependencies.
"""

from typing import Generator, Optional

from fastapi import Header
from sqlalchemy.orm import Session

from luca.config import settings
from luca.database import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for getting database sessions.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_user_id(x_user_id: Optional[str] = Header(None)) -> str:
    """Identify the caller. Authentication happens before requests reach us."""
    return x_user_id or settings.default_user_id
