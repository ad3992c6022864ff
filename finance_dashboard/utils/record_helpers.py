import logging
from decimal import Decimal
from typing import List, Sequence, Tuple

from sqlalchemy import case, delete, func
from sqlmodel import Session, select

from finance_dashboard.models.financial_record import FinancialRecord

logger = logging.getLogger(__name__)

MONTH_NAMES = [
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
]

# Full names and three letter abbreviations, lower case -> 1..12
MONTH_NUMBERS = {name: i for i, name in enumerate(MONTH_NAMES, start=1)}
MONTH_NUMBERS.update({name[:3]: i for name, i in list(MONTH_NUMBERS.items())})


def month_order():
    """
    SQL expression giving the calendar position (1-12) of a month label.

    Labels that are not a month name sort after December.
    """
    label = func.lower(func.trim(FinancialRecord.month))
    return case(MONTH_NUMBERS, value=label, else_=13)


def replace_records(
    session: Session,
    user_id: int,
    year: int,
    rows: Sequence[Tuple[str, float]],
) -> int:
    """
    Replace every record of (user_id, year) with `rows` in one transaction.

    On any failure the transaction is rolled back, the previous records
    stay in place and the exception propagates.
    """
    try:
        session.exec(
            delete(FinancialRecord).where(
                FinancialRecord.user_id == user_id,
                FinancialRecord.year == year,
            )
        )
        session.add_all([
            FinancialRecord(
                user_id=user_id,
                year=year,
                month=month,
                amount=Decimal(str(amount)),
            )
            for month, amount in rows
        ])
        session.commit()
    except Exception:
        session.rollback()
        raise

    logger.info("Replaced records for user %s, year %s (%d rows)", user_id, year, len(rows))
    return len(rows)


def list_records_for_year(session: Session, user_id: int, year: int) -> List[FinancialRecord]:
    return session.exec(
        select(FinancialRecord)
        .where(FinancialRecord.user_id == user_id, FinancialRecord.year == year)
        .order_by(month_order(), FinancialRecord.record_id)
    ).all()
