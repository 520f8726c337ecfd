"""Database session management."""

from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from mindtrack.core.config import settings


def _connect_args(url: str) -> dict:
    # SQLite connections are shared across FastAPI's threadpool
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.database_url,
    connect_args=_connect_args(settings.database_url),
    pool_pre_ping=True,
    echo=settings.debug,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """Yield a session per request; journal reads and appends share it."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
