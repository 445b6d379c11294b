# budget_planner/schemas/debt.py

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date, datetime

class DebtCreate(BaseModel):
    name: str
    description: Optional[str] = None
    original_amount: float = Field(gt=0)
    original_currency: str = "USD"
    interest_rate: Optional[float] = None
    due_date: Optional[date] = None

class DebtRead(DebtCreate):
    id: int
    paid_amount: float
    is_paid: bool
    transactions_count: Optional[int] = 0

    model_config = ConfigDict(from_attributes=True)

class DebtPayment(BaseModel):
    amount: float
    category_id: Optional[int] = None
    description: Optional[str] = None
    date: Optional[datetime] = None
