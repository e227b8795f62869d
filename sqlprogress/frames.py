"""Loading whole tables into pandas data frames."""

from __future__ import annotations

import pandas as pd
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .entities import Base, Customer, Order
from .errors import DatabaseError


def _load_all(session: Session, entity: type[Base]) -> list:
    try:
        return list(session.scalars(select(entity)))
    except SQLAlchemyError as exc:
        raise DatabaseError(exc) from exc


def customers_frame(session: Session) -> pd.DataFrame:
    """Every customer as a frame with columns id, first_name, country, score."""
    customers = _load_all(session, Customer)
    return pd.DataFrame(
        {
            "id": pd.array([c.id for c in customers], dtype="int32"),
            "first_name": pd.Series([c.first_name for c in customers], dtype=object),
            "country": pd.Series([c.country for c in customers], dtype=object),
            "score": pd.array([c.score for c in customers], dtype="Int32"),
        }
    )


def orders_frame(session: Session) -> pd.DataFrame:
    """Every order as a frame with columns order_id, customer_id, order_date, sales."""
    orders = _load_all(session, Order)
    return pd.DataFrame(
        {
            "order_id": pd.array([o.order_id for o in orders], dtype="int32"),
            "customer_id": pd.array([o.customer_id for o in orders], dtype="int32"),
            "order_date": pd.to_datetime(
                pd.Series([o.order_date for o in orders], dtype=object)
            ),
            "sales": pd.array([o.sales for o in orders], dtype="Int32"),
        }
    )