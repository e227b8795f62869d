import datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from sqlprogress.entities import Base, Customer, Order
from sqlprogress.errors import DatabaseError
from sqlprogress.lessons_select import (
    LESSON_001,
    LESSON_002,
    LESSON_003,
    LESSON_004,
    LESSON_005,
    LESSON_006,
    LESSON_007,
    SELECT_LESSONS,
)

CUSTOMERS = [
    (1, "Maria", "Germany", 350),
    (2, " John", "USA", 900),
    (3, "Georg", "UK", 750),
    (4, "Martin", "Germany", 500),
    (5, "Peter", "USA", 0),
]

ORDERS = [
    (1001, 1, datetime.date(2021, 1, 11), 35),
    (1002, 2, datetime.date(2021, 4, 5), 15),
    (1003, 3, datetime.date(2021, 6, 18), 20),
    (1004, 6, datetime.date(2021, 8, 31), 10),
]


def _make_engine(path, customers=CUSTOMERS):
    engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(engine)
    with Session(engine) as seed:
        seed.add_all(
            Customer(id=i, first_name=n, country=c, score=s) for i, n, c, s in customers
        )
        seed.add_all(
            Order(order_id=o, customer_id=c, order_date=d, sales=s) for o, c, d, s in ORDERS
        )
        seed.commit()
    return engine


@pytest.fixture
def engine(tmp_path):
    eng = _make_engine(tmp_path / "sample.db")
    yield eng
    eng.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as sess:
        yield sess


@pytest.fixture
def connection(engine):
    with engine.connect() as conn:
        yield conn


def test_lessons_are_numbered_in_order(session):
    numbers = [lesson.number for lesson in SELECT_LESSONS if len(lesson.frame(session)) > 0]
    assert numbers == [1, 2, 3, 4, 5, 6, 7]


@pytest.mark.parametrize(
    "lesson", [LESSON_001, LESSON_003, LESSON_004, LESSON_005, LESSON_006, LESSON_007]
)
def test_orm_and_sql_agree(lesson, session, connection):
    assert lesson.orm_rows(session) == lesson.sql_rows(connection)


def test_select_all_customers(session, connection, capsys):
    assert LESSON_001.display(session, connection) is True
    frame = LESSON_001.frame(session)
    assert frame.shape == (5, 4)
    assert list(frame.columns) == ["id", "first_name", "country", "score"]
    assert "DATAFRAME:" in capsys.readouterr().out


def test_select_all_orders(session, connection):
    frame = LESSON_002.frame(session)
    assert frame.shape == (4, 4)
    assert list(frame["order_id"]) == [1001, 1002, 1003, 1004]
    orm_ids = [o.order_id for o in LESSON_002.orm_rows(session)]
    sql_ids = [o.order_id for o in LESSON_002.sql_rows(connection)]
    assert orm_ids == sql_ids == [1001, 1002, 1003, 1004]


def test_selected_columns(session):
    frame = LESSON_003.frame(session)
    assert list(frame.columns) == ["first_name", "country", "score"]
    rows = LESSON_003.orm_rows(session)
    assert [r.first_name for r in rows] == list(frame["first_name"])


def test_nonzero_score_filter(session):
    frame = LESSON_004.frame(session)
    assert list(frame["id"]) == [1, 2, 3, 4]
    assert [c.id for c in LESSON_004.orm_rows(session)] == [1, 2, 3, 4]


def test_nonzero_filter_drops_missing_scores(tmp_path):
    rows = CUSTOMERS + [(7, "Nobody", "UK", None)]
    eng = _make_engine(tmp_path / "nulls.db", rows)
    try:
        with Session(eng) as sess, eng.connect() as conn:
            frame = LESSON_004.frame(sess)
            assert 7 not in list(frame["id"])
            assert LESSON_004.orm_rows(sess) == LESSON_004.sql_rows(conn)
    finally:
        eng.dispose()


def test_germany_filter(session):
    frame = LESSON_005.frame(session)
    assert list(frame["first_name"]) == ["Maria", "Martin"]
    assert set(frame["country"]) == {"Germany"}
    assert [r.first_name for r in LESSON_005.orm_rows(session)] == ["Maria", "Martin"]


def test_order_by_score_desc(session, connection):
    frame = LESSON_006.frame(session)
    assert list(frame["id"]) == [2, 3, 4, 1, 5]
    assert [c.id for c in LESSON_006.sql_rows(connection)] == [2, 3, 4, 1, 5]


def test_order_by_country_then_score(session):
    frame = LESSON_007.frame(session)
    assert list(frame["id"]) == [4, 1, 3, 2, 5]
    assert [c.id for c in LESSON_007.orm_rows(session)] == [4, 1, 3, 2, 5]


def test_missing_tables_raise_database_error(tmp_path):
    eng = create_engine(f"sqlite:///{tmp_path / 'empty.db'}")
    try:
        with Session(eng) as sess:
            with pytest.raises(DatabaseError):
                LESSON_001.orm_rows(sess)
    finally:
        eng.dispose()