from sqlmodel import SQLModel, Session, create_engine

from finance_dashboard.core.config import DATABASE_URL, SQL_ECHO

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, echo=SQL_ECHO, connect_args=connect_args)  # echo=True logs every query

def create_db_and_tables():
    from finance_dashboard.models.user import User  # register the models
    from finance_dashboard.models.financial_record import FinancialRecord
    SQLModel.metadata.create_all(engine)

def get_session():
    with Session(engine) as session:
        yield session
