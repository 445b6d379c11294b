# budget_planner/models/debt.py

from sqlmodel import Relationship, SQLModel, Field
from typing import List, Optional, TYPE_CHECKING
from datetime import date, datetime

if TYPE_CHECKING:
    from budget_planner.models.transaction import Transaction

class Debt(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str  # Ej: "Préstamo auto", "Tarjeta Visa"
    description: Optional[str] = None
    original_amount: float  # Capital original
    paid_amount: float = 0.0  # Pagos acumulados
    original_currency: str = "USD"
    interest_rate: Optional[float] = None  # En porcentaje anual
    due_date: Optional[date] = None
    is_paid: bool = Field(default=False)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    transactions: List["Transaction"] = Relationship(back_populates="debt")
