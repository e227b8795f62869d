"""A lesson: one query run through the ORM, as SQL text and as a data frame."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import pandas as pd
from sqlalchemy import Connection, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql import Executable

from .entities import Base
from .errors import DatabaseError, FrameError
from .utils import compare_sequences, log_debug


def _unchanged(frame: pd.DataFrame) -> pd.DataFrame:
    return frame


@dataclass(frozen=True)
class Lesson:
    """One query expressed three ways; display shows the frame when ORM and SQL agree."""

    number: int
    sql: str
    statement: Executable
    row_type: Callable[..., Any]
    source: Callable[[Session], pd.DataFrame]
    transform: Callable[[pd.DataFrame], pd.DataFrame] = _unchanged
    debug: bool = False

    def _record(self, row: Any) -> Any:
        if len(row) == 1 and isinstance(row[0], Base):
            return row[0]
        return self.row_type(**row._mapping)

    def orm_rows(self, session: Session) -> list:
        """Run the ORM statement and return its rows as records."""
        try:
            rows = [self._record(row) for row in session.execute(self.statement)]
        except SQLAlchemyError as exc:
            raise DatabaseError(exc) from exc
        log_debug("ORM", rows, self.debug)
        return rows

    def sql_rows(self, connection: Connection) -> list:
        """Run the SQL text and return its rows as records."""
        try:
            rows = [self.row_type(**row._mapping) for row in connection.execute(text(self.sql))]
        except SQLAlchemyError as exc:
            raise DatabaseError(exc) from exc
        log_debug("SQL", rows, self.debug)
        return rows

    def frame(self, session: Session) -> pd.DataFrame:
        """Load the source table and apply the lesson's transformation."""
        data = self.source(session)
        try:
            return self.transform(data)
        except (KeyError, ValueError, TypeError) as exc:
            raise FrameError(exc) from exc

    def display(self, session: Session, connection: Connection) -> bool:
        """Print the frame if both query forms agree; return whether they agreed."""
        frame = self.frame(session)
        matched = compare_sequences(self.orm_rows(session), self.sql_rows(connection))
        if matched:
            log_debug("DATAFRAME", frame)
        return matched