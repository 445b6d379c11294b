# budget_planner/models/monthly_budget.py

from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime

class MonthlyBudget(SQLModel, table=True):
    __tablename__ = "monthly_budget"
    __table_args__ = (
        UniqueConstraint("category_id", "year", "month", name="uq_monthly_budget_category_period"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    category_id: int = Field(foreign_key="category.id", index=True)
    year: int = Field(index=True)
    month: int = Field(index=True)  # 1-12
    planned_amount: float
    rollover_enabled: bool = Field(default=False)
    rollover_amount: float = 0.0
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
