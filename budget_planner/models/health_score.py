# budget_planner/models/health_score.py

from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime

class HealthScoreSnapshot(SQLModel, table=True):
    """Puntaje guardado de un mes. Único por (year, month) vía upsert, no por constraint."""
    __tablename__ = "health_score_snapshot"

    id: Optional[int] = Field(default=None, primary_key=True)
    year: int = Field(index=True)
    month: int = Field(index=True)  # 1-12
    total_score: int

    # Puntajes 0-100 de cada componente
    savings_rate: float
    budget_adherence: float
    debt_progress: float
    spending_stability: float
    emergency_fund: float

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
