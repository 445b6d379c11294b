# budget_planner/models/app_settings.py

from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime

class AppSettings(SQLModel, table=True):
    __tablename__ = "app_settings"

    id: Optional[int] = Field(default=None, primary_key=True)
    currency: str = "USD"
    first_day_of_month: int = 1  # 1-28, inicio del periodo de presupuesto
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
