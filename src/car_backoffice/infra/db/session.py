from __future__ import annotations

import logging
from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from car_backoffice.infra.db.config import database_url, max_overflow, pool_size

logger = logging.getLogger(__name__)


@lru_cache
def get_engine() -> Engine:
    """
    Process-wide engine, created on first use so importing the app needs no
    DATABASE_URL.

    Pool sizing comes from DB_POOL_SIZE / DB_MAX_OVERFLOW. Connections are
    pinged before checkout and recycled hourly.
    """
    return create_engine(
        database_url(),
        pool_size=pool_size(),
        max_overflow=max_overflow(),
        pool_pre_ping=True,
        pool_recycle=3600,
    )


@lru_cache
def get_session_factory() -> sessionmaker[Session]:
    return sessionmaker(bind=get_engine(), expire_on_commit=False)


@contextmanager
def get_session() -> Iterator[Session]:
    """
    Unit of work for one request.

    Everything a use case writes, including both steps of a listing delete,
    commits together or is rolled back together.
    """
    session = get_session_factory()()

    try:
        yield session
        session.commit()
    except Exception as exc:
        session.rollback()
        logger.warning("db.session.rolled_back", extra={"error_type": type(exc).__name__})
        raise
    finally:
        session.close()
