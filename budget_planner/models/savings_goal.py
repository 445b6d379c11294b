# budget_planner/models/savings_goal.py

from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import date, datetime

class SavingsGoal(SQLModel, table=True):
    __tablename__ = "savings_goal"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str  # Ej: "Fondo de viaje", "Auto nuevo"
    target_amount: float
    current_amount: float = 0.0
    target_date: date = Field(index=True)
    monthly_contribution: float = 0.0  # Aporte mensual planeado
    color: str = "#10b981"
    icon: str = "piggy-bank"
    is_completed: bool = Field(default=False)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
