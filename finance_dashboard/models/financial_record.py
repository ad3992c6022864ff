# finance_dashboard/models/financial_record.py

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Column, DateTime, Index, Text, func
from sqlmodel import SQLModel, Field

class FinancialRecord(SQLModel, table=True):
    __tablename__ = "financial_records"
    __table_args__ = (Index("ix_financial_records_user_year", "user_id", "year"),)

    record_id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.user_id")
    year: int
    # label as found in the sheet, e.g. "January"; unbounded
    month: str = Field(sa_column=Column(Text, nullable=False))
    amount: Decimal = Field(max_digits=15, decimal_places=2)
    created_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime, nullable=False, server_default=func.now()),
    )
