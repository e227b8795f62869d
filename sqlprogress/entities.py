"""Mapped tables of the sample database."""

from __future__ import annotations

import datetime
from typing import Optional

from sqlalchemy.orm import DeclarativeBase, Mapped, MappedAsDataclass, mapped_column


class Base(MappedAsDataclass, DeclarativeBase):
    """Declarative base; mapped classes compare by field values."""


class Customer(Base):
    """A row of the customers table."""

    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=False)
    first_name: Mapped[str]
    country: Mapped[Optional[str]]
    score: Mapped[Optional[int]]


class Order(Base):
    """A row of the orders table."""

    __tablename__ = "orders"

    order_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=False)
    customer_id: Mapped[int]
    order_date: Mapped[Optional[datetime.date]]
    sales: Mapped[Optional[int]]