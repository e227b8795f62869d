"""Lessons on grouping: aggregates, GROUP BY and HAVING."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pandas as pd
from sqlalchemy import Float, cast, func, select

from .entities import Customer
from .frames import customers_frame
from .lesson import Lesson


@dataclass(frozen=True)
class _CountryTotal:
    country: Optional[str]
    total_score: int


@dataclass(frozen=True)
class _CountryTotalCount:
    country: Optional[str]
    total_score: int
    total_customers: int


@dataclass(frozen=True)
class _CountryAverage:
    country: Optional[str]
    avg_score: float


def _keep(frame: pd.DataFrame, mask: pd.Series) -> pd.DataFrame:
    """Rows where the mask holds; missing mask values count as false."""
    return frame[mask.fillna(False).astype(bool)].reset_index(drop=True)


def _by_country(frame: pd.DataFrame, **aggregates: tuple[str, str]) -> pd.DataFrame:
    grouped = frame.groupby("country", dropna=False, sort=False)
    return grouped.agg(**aggregates).reset_index()


def _total_score(frame: pd.DataFrame) -> pd.DataFrame:
    return _by_country(frame, total_score=("score", "sum"))


def _total_score_and_customers(frame: pd.DataFrame) -> pd.DataFrame:
    return _by_country(
        frame,
        total_score=("score", "sum"),
        total_customers=("id", "count"),
    )


def _total_score_over_800(frame: pd.DataFrame) -> pd.DataFrame:
    totals = _total_score(frame)
    return _keep(totals, totals["total_score"].gt(800))


def _high_scorers_total_over_800(frame: pd.DataFrame) -> pd.DataFrame:
    high = _keep(frame, frame["score"].gt(400))
    return _total_score_over_800(high)


def _average_nonzero_over_430(frame: pd.DataFrame) -> pd.DataFrame:
    nonzero = _keep(frame, frame["score"].ne(0))
    averages = _by_country(nonzero, avg_score=("score", "mean"))
    averages["avg_score"] = averages["avg_score"].astype("Float64")
    return _keep(averages, averages["avg_score"].gt(430))


_SUM_SCORE = func.sum(Customer.score)
_AVG_SCORE = func.avg(cast(Customer.score, Float))


LESSON_008 = Lesson(
    number=8,
    sql="""
    SELECT
        country,
        SUM(score) AS total_score
    FROM customers
    GROUP BY country;
    """,
    statement=select(Customer.country, _SUM_SCORE.label("total_score")).group_by(
        Customer.country
    ),
    row_type=_CountryTotal,
    source=customers_frame,
    transform=_total_score,
)

LESSON_009 = Lesson(
    number=9,
    sql="""
    SELECT
        country,
        SUM(score) AS total_score,
        COUNT(id) AS total_customers
    FROM customers
    GROUP BY country;
    """,
    statement=select(
        Customer.country,
        _SUM_SCORE.label("total_score"),
        func.count(Customer.id).label("total_customers"),
    ).group_by(Customer.country),
    row_type=_CountryTotalCount,
    source=customers_frame,
    transform=_total_score_and_customers,
)

LESSON_010 = Lesson(
    number=10,
    sql="""
    SELECT
        country,
        SUM(score) AS total_score
    FROM customers
    GROUP BY country
    HAVING SUM(score) > 800;
    """,
    statement=select(Customer.country, _SUM_SCORE.label("total_score"))
    .group_by(Customer.country)
    .having(_SUM_SCORE > 800),
    row_type=_CountryTotal,
    source=customers_frame,
    transform=_total_score_over_800,
)

LESSON_011 = Lesson(
    number=11,
    sql="""
    SELECT
        country,
        SUM(score) AS total_score
    FROM customers
    WHERE score > 400
    GROUP BY country
    HAVING SUM(score) > 800;
    """,
    statement=select(Customer.country, _SUM_SCORE.label("total_score"))
    .where(Customer.score > 400)
    .group_by(Customer.country)
    .having(_SUM_SCORE > 800),
    row_type=_CountryTotal,
    source=customers_frame,
    transform=_high_scorers_total_over_800,
)

LESSON_012 = Lesson(
    number=12,
    sql="""
    SELECT
        country,
        AVG(score)::FLOAT8 AS avg_score
    FROM customers
    WHERE score != 0
    GROUP BY country
    HAVING AVG(score) > 430;
    """,
    statement=select(Customer.country, _AVG_SCORE.label("avg_score"))
    .where(Customer.score != 0)
    .group_by(Customer.country)
    .having(_AVG_SCORE > 430),
    row_type=_CountryAverage,
    source=customers_frame,
    transform=_average_nonzero_over_430,
)

GROUPING_LESSONS: tuple[Lesson, ...] = (
    LESSON_008,
    LESSON_009,
    LESSON_010,
    LESSON_011,
    LESSON_012,
)