"""Helpers shared by the lessons: comparison, connections and debug output."""

from __future__ import annotations

import pprint
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any

from sqlalchemy import Connection
from sqlalchemy.orm import Session

from .connection import connect_orm, connect_raw


def compare_sequences(first: Sequence[Any], second: Sequence[Any]) -> bool:
    """True when both sequences have the same length and equal items in order."""
    return len(first) == len(second) and all(a == b for a, b in zip(first, second))


@contextmanager
def get_database(url: str | None = None) -> Iterator[tuple[Session, Connection]]:
    """Open an ORM session and a plain connection, closing both afterwards."""
    session = connect_orm(url)
    try:
        connection = connect_raw(url)
    except Exception:
        session.close()
        session.get_bind().dispose()
        raise
    try:
        yield session, connection
    finally:
        session.close()
        session.get_bind().dispose()
        connection.close()
        connection.engine.dispose()


def log_debug(title: str, data: Any, use_debug: bool | None = None) -> None:
    """Print data under a title: plain repr by default, pretty when True, nothing when False."""
    if use_debug is False:
        return
    body = pprint.pformat(data) if use_debug else repr(data)
    print(f"{title}:")
    print(f"\n{body}\n")