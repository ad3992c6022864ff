from sqlmodel import SQLModel, Field

class User(SQLModel, table=True):
    # Owned by the user-management service; this backend only reads it.
    __tablename__ = "users"

    user_id: int = Field(primary_key=True)
    name: str = Field(max_length=255)
