# budget_planner/models/category.py

from sqlmodel import SQLModel, Field, Relationship
from typing import List, Optional, TYPE_CHECKING
from datetime import datetime

if TYPE_CHECKING:
    from budget_planner.models.transaction import Transaction

class Category(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    color: str = "#6b7280"  # Hex, ej: "#6366f1"
    icon: str = "more-horizontal"
    monthly_budget: float = 0.0  # Presupuesto por defecto cuando el mes no tiene fila propia
    is_default: bool = Field(default=False)
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    transactions: List["Transaction"] = Relationship(back_populates="category")
