"""
Database session management.

Engine and transaction scope for the SQLite file that holds the
storage slots.
"""

from contextlib import contextmanager
from functools import lru_cache
from pathlib import Path
from typing import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from thoughtdiary.core.config import Config
from thoughtdiary.core.models import Base


@lru_cache(maxsize=None)
def _engine_for(db_path: str) -> Engine:
    path = Path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(
        f"sqlite:///{path}",
        connect_args={"check_same_thread": False},
    )

    # Enable WAL mode so a reader never sees a half-written document
    with engine.connect() as conn:
        conn.execute(text("PRAGMA journal_mode=WAL"))
        conn.commit()

    return engine


def get_engine(config: Config) -> Engine:
    """
    Get the SQLAlchemy engine for the configured database.

    One engine per database file per process.
    """
    return _engine_for(str(Path(config.database_path)))


def init_db(config: Config) -> None:
    """
    Initialize database schema.

    Creates all tables if they don't exist.
    """
    engine = get_engine(config)
    Base.metadata.create_all(engine)


@lru_cache(maxsize=None)
def _session_factory(db_path: str) -> sessionmaker:
    return sessionmaker(bind=_engine_for(db_path), expire_on_commit=False)


@contextmanager
def session_scope(config: Config) -> Generator[Session, None, None]:
    """
    One slot read or write as a single transaction.

    The whole journal document is replaced inside one commit, so a
    failed write leaves the previous document in place.

    Usage:
        with session_scope(config) as session:
            session.merge(StorageSlot(key=key, value=document))
    """
    session = _session_factory(str(Path(config.database_path)))()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
