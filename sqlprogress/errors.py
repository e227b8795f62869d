"""Error types raised by the package."""

from __future__ import annotations


class AppError(Exception):
    """Base error; its text is a label followed by the underlying detail."""

    label = "Dynamic error"

    def __init__(self, detail: object) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.label}: {self.detail}"


class DatabaseError(AppError):
    """A query or connection against the database failed."""

    label = "Database error"


class FrameError(AppError):
    """Building or transforming a data frame failed."""

    label = "Frame error"