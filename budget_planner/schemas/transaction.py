from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime
from budget_planner.models.enums import PaymentMethod, TransactionType

class TransactionCreate(BaseModel):
    amount: float
    type: TransactionType
    category_id: Optional[int] = None
    description: Optional[str] = None
    payment_method: PaymentMethod = PaymentMethod.other
    date: Optional[datetime] = None
    debt_id: Optional[int] = None

class TransactionRead(TransactionCreate):
    id: int
    date: datetime

    model_config = ConfigDict(from_attributes=True)
