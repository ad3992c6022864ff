from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

class UserRead(BaseModel):
    user_id: int
    name: str

    class Config:
        from_attributes = True  # read straight from SQLModel rows (Pydantic v2)

class FinancialRecordRead(BaseModel):
    record_id: int
    user_id: int
    year: int
    month: str
    amount: float
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class FinancesRead(BaseModel):
    user: UserRead
    year: int
    records: List[FinancialRecordRead]

class UploadResult(BaseModel):
    message: str
    inserted: int
