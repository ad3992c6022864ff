import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import select

from finance_dashboard.models.financial_record import FinancialRecord
from finance_dashboard.models.user import User
from finance_dashboard.utils.record_helpers import list_records_for_year, replace_records


def _months(session, user_id=1, year=2024):
    return [r.month for r in list_records_for_year(session, user_id, year)]


def test_replace_inserts_rows(session):
    inserted = replace_records(session, 1, 2024, [("January", 100.0), ("February", 25.5)])

    records = list_records_for_year(session, 1, 2024)
    assert inserted == 2
    assert [(r.month, float(r.amount)) for r in records] == [("January", 100.0), ("February", 25.5)]
    assert all(r.created_at is not None for r in records)
    assert all(r.record_id is not None for r in records)


def test_replace_overwrites_whole_year(session):
    replace_records(session, 1, 2024, [("January", 1), ("February", 2), ("March", 3)])
    replace_records(session, 1, 2024, [("April", 4)])

    assert _months(session) == ["April"]


def test_replace_leaves_other_years_and_users_alone(session):
    session.add(User(user_id=2, name="Bob"))
    session.commit()
    replace_records(session, 1, 2023, [("January", 1)])
    replace_records(session, 2, 2024, [("January", 2)])

    replace_records(session, 1, 2024, [("May", 5)])

    assert _months(session, 1, 2023) == ["January"]
    assert _months(session, 2, 2024) == ["January"]
    assert _months(session, 1, 2024) == ["May"]


def test_replace_keeps_duplicate_months(session):
    replace_records(session, 1, 2024, [("January", 1), ("January", 2)])
    assert _months(session) == ["January", "January"]


def test_replace_rolls_back_on_insert_failure(session):
    replace_records(session, 1, 2024, [("January", 1), ("February", 2)])

    # A NULL month violates the NOT NULL constraint after the delete ran
    with pytest.raises(IntegrityError):
        replace_records(session, 1, 2024, [("March", 3), (None, 4)])

    assert _months(session) == ["January", "February"]
    count = len(session.exec(select(FinancialRecord)).all())
    assert count == 2


def test_query_orders_by_calendar_month(session):
    replace_records(session, 1, 2023, [("January", 1), ("March", 3), ("February", 2)])
    assert _months(session, 1, 2023) == ["January", "February", "March"]


def test_query_orders_abbreviations_and_mixed_case(session):
    replace_records(session, 1, 2023, [("dec", 12), ("Oct", 10), ("JANUARY", 1)])
    assert _months(session, 1, 2023) == ["JANUARY", "Oct", "dec"]


def test_query_puts_unknown_labels_last(session):
    replace_records(session, 1, 2023, [("Q1", 0), ("June", 6)])
    assert _months(session, 1, 2023) == ["June", "Q1"]


def test_query_empty_year(session):
    assert list_records_for_year(session, 1, 1999) == []


def test_month_column_has_no_length_limit():
    from sqlalchemy import Text

    column = FinancialRecord.__table__.c.month
    assert isinstance(column.type, Text)
    assert column.type.length is None
    assert column.nullable is False
