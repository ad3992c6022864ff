from sqlmodel import SQLModel
from finance_dashboard.database import create_db_and_tables, engine
from finance_dashboard.models.financial_record import FinancialRecord

# Only our own table; "users" belongs to the user-management service
SQLModel.metadata.drop_all(engine, tables=[FinancialRecord.__table__])
create_db_and_tables()

print("✅ financial_records table reset.")
