"""
Database engine and session management.

Builds the SQLAlchemy engine for a given URL (SQLite by default, see
``proofstore.config``) and creates the schema on demand.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from proofstore.config import get_settings
from proofstore.errors import StoreInitError

logger = logging.getLogger(__name__)


def _is_memory_sqlite(url: str) -> bool:
    if not url.startswith("sqlite"):
        return False
    database = make_url(url).database
    return database in (None, "", ":memory:") or "mode=memory" in url


def engine_kwargs(url: str) -> Dict[str, Any]:
    """Return create_engine keyword arguments appropriate for ``url``."""
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}
    kwargs: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if _is_memory_sqlite(url):
        # In-memory SQLite with StaticPool so the schema persists across connections
        kwargs["poolclass"] = StaticPool
    return kwargs


def create_db_engine(url: str, *, echo: Optional[bool] = None) -> Engine:
    if echo is None:
        echo = get_settings().sql_echo
    try:
        engine = create_engine(url, echo=echo, **engine_kwargs(url))
    except (ArgumentError, SQLAlchemyError, ImportError) as exc:
        raise StoreInitError(f"Could not create database engine for {url!r}: {exc}") from exc
    logger.debug("Created engine for dialect %s", engine.dialect.name)
    return engine


def create_schema(engine: Engine) -> None:
    """Create the proofs/admins tables and the unique index if missing."""
    from proofstore.db import models  # local import to avoid circular import at module load

    try:
        models.Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as exc:
        raise StoreInitError(f"Schema creation failed: {exc}") from exc


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
