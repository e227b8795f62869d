"""Lessons on plain selection: columns, filters and ordering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pandas as pd
from sqlalchemy import select

from .entities import Customer, Order
from .frames import customers_frame, orders_frame
from .lesson import Lesson


@dataclass(frozen=True)
class _CustomerProfile:
    first_name: str
    country: Optional[str]
    score: Optional[int]


@dataclass(frozen=True)
class _CustomerCountry:
    first_name: str
    country: Optional[str]


def _profile_columns(frame: pd.DataFrame) -> pd.DataFrame:
    return frame[["first_name", "country", "score"]]


def _nonzero_score(frame: pd.DataFrame) -> pd.DataFrame:
    mask = frame["score"].ne(0).fillna(False).astype(bool)
    return frame[mask].reset_index(drop=True)


def _germans(frame: pd.DataFrame) -> pd.DataFrame:
    picked = frame[["first_name", "country"]]
    return picked[picked["country"] == "Germany"].reset_index(drop=True)


def _by_score_desc(frame: pd.DataFrame) -> pd.DataFrame:
    return frame.sort_values(
        "score", ascending=False, kind="stable", na_position="first"
    ).reset_index(drop=True)


def _by_country_then_score(frame: pd.DataFrame) -> pd.DataFrame:
    return frame.sort_values(
        ["country", "score"],
        ascending=[True, False],
        kind="stable",
        na_position="first",
    ).reset_index(drop=True)


LESSON_001 = Lesson(
    number=1,
    sql="SELECT * FROM customers;",
    statement=select(Customer),
    row_type=Customer,
    source=customers_frame,
)

LESSON_002 = Lesson(
    number=2,
    sql="SELECT * FROM orders;",
    statement=select(Order),
    row_type=Order,
    source=orders_frame,
)

LESSON_003 = Lesson(
    number=3,
    sql="""
    SELECT first_name, country, score
    FROM customers;
    """,
    statement=select(Customer.first_name, Customer.country, Customer.score),
    row_type=_CustomerProfile,
    source=customers_frame,
    transform=_profile_columns,
)

LESSON_004 = Lesson(
    number=4,
    sql="""
    SELECT * FROM
    customers
    WHERE score != 0;
    """,
    statement=select(Customer).where(Customer.score != 0),
    row_type=Customer,
    source=customers_frame,
    transform=_nonzero_score,
)

LESSON_005 = Lesson(
    number=5,
    sql="""
    SELECT first_name, country
    FROM customers
    WHERE country = 'Germany';
    """,
    statement=select(Customer.first_name, Customer.country).where(
        Customer.country == "Germany"
    ),
    row_type=_CustomerCountry,
    source=customers_frame,
    transform=_germans,
)

LESSON_006 = Lesson(
    number=6,
    sql="""
    SELECT *
    FROM customers
    ORDER BY score DESC;
    """,
    statement=select(Customer).order_by(Customer.score.desc()),
    row_type=Customer,
    source=customers_frame,
    transform=_by_score_desc,
)

LESSON_007 = Lesson(
    number=7,
    sql="""
    SELECT *
    FROM customers
    ORDER BY country ASC, score DESC;
    """,
    statement=select(Customer).order_by(Customer.country.asc(), Customer.score.desc()),
    row_type=Customer,
    source=customers_frame,
    transform=_by_country_then_score,
)

SELECT_LESSONS: tuple[Lesson, ...] = (
    LESSON_001,
    LESSON_002,
    LESSON_003,
    LESSON_004,
    LESSON_005,
    LESSON_006,
    LESSON_007,
)