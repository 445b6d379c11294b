from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, TYPE_CHECKING
from datetime import datetime

from budget_planner.models.enums import PaymentMethod, TransactionType

if TYPE_CHECKING:
    from budget_planner.models.category import Category
    from budget_planner.models.debt import Debt

class Transaction(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    # En "savings" el signo indica la dirección: + depósito, - retiro
    amount: float
    type: TransactionType = Field(index=True)
    date: datetime = Field(default_factory=datetime.utcnow, index=True)
    description: Optional[str] = None
    payment_method: PaymentMethod = Field(default=PaymentMethod.other)

    # Categoría opcional (los movimientos de ahorro no llevan)
    category_id: Optional[int] = Field(default=None, foreign_key="category.id", index=True)
    category: Optional["Category"] = Relationship(back_populates="transactions")

    # Si está presente, la transacción es un pago de deuda
    debt_id: Optional[int] = Field(default=None, foreign_key="debt.id", index=True)
    debt: Optional["Debt"] = Relationship(back_populates="transactions")

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
