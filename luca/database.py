"""
Database engine and session setup.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from luca.config import settings


def _connect_args(url: str) -> dict:
    if url.startswith("sqlite"):
        # timeout: seconds to wait on a locked database before OperationalError
        return {"check_same_thread": False, "timeout": settings.database_timeout_seconds}
    return {}


engine = create_engine(settings.database_url, connect_args=_connect_args(settings.database_url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()
