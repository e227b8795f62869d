"""Opening database connections from a URL or the DATABASE_URL variable."""

from __future__ import annotations

import os
from typing import Any

from sqlalchemy import Connection, Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .errors import AppError, DatabaseError

MAX_CONNECTIONS = 5
CONNECT_TIMEOUT = 8


def database_url() -> str:
    """Return the DATABASE_URL environment variable."""
    try:
        return os.environ["DATABASE_URL"]
    except KeyError as exc:
        raise AppError("environment variable DATABASE_URL not found") from exc


def _engine(url: str | None) -> Engine:
    target = url if url is not None else database_url()
    try:
        parsed = make_url(target)
        options: dict[str, Any] = {}
        if parsed.get_backend_name() != "sqlite":
            options.update(
                pool_size=MAX_CONNECTIONS,
                max_overflow=0,
                pool_timeout=CONNECT_TIMEOUT,
            )
            if parsed.get_backend_name() == "postgresql":
                options["connect_args"] = {"connect_timeout": CONNECT_TIMEOUT}
        return create_engine(parsed, **options)
    except SQLAlchemyError as exc:
        raise DatabaseError(exc) from exc


def connect_orm(url: str | None = None) -> Session:
    """Open an ORM session; one connection is made up front to check the URL."""
    engine = _engine(url)
    try:
        with engine.connect():
            pass
    except SQLAlchemyError as exc:
        engine.dispose()
        raise DatabaseError(exc) from exc
    return Session(engine)


def connect_raw(url: str | None = None) -> Connection:
    """Open a plain connection for running SQL text."""
    engine = _engine(url)
    try:
        return engine.connect()
    except SQLAlchemyError as exc:
        engine.dispose()
        raise DatabaseError(exc) from exc