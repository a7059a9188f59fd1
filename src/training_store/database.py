"""Engine and session factory for the training database."""

from __future__ import annotations

import logging

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all training tables."""


def make_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine for *url*.

    In-memory SQLite shares one connection so every session sees the same
    database.
    """
    kwargs: dict = {"echo": echo, "future": True}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url or url == "sqlite://":
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True
    logger.debug("Creating database engine for %s", url.split("@")[-1])
    return create_engine(url, **kwargs)


def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )


def init_db(engine: Engine) -> None:
    """Create any missing tables."""
    # Table classes register themselves on Base.metadata at import time
    from training_store import tables  # noqa: F401

    Base.metadata.create_all(engine)
