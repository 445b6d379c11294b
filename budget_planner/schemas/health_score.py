# budget_planner/schemas/health_score.py

from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from datetime import datetime

class ComponentScore(BaseModel):
    score: float  # 0-100
    value: float  # valor crudo para mostrar (porcentaje, meses, CV...)
    label: str
    description: str

class HealthScoreComponents(BaseModel):
    savings_rate: ComponentScore
    budget_adherence: ComponentScore
    debt_progress: ComponentScore
    spending_stability: ComponentScore
    emergency_fund: ComponentScore

class HealthScoreResult(BaseModel):
    total_score: int
    components: HealthScoreComponents

class MonthlyHealthScoreRead(HealthScoreResult):
    year: int
    month: int
    prev_score: Optional[int] = None

class MonthlyInputs(BaseModel):
    """Agregados crudos del mes que alimentan a los cinco componentes."""
    income: float = 0.0
    expenses: float = 0.0
    savings: float = 0.0
    planned_budget: float = 0.0
    spent_budget: float = 0.0
    total_debt: float = 0.0
    total_debt_paid: float = 0.0
    daily_spending: List[float] = []
    current_balance: float = 0.0
    avg_monthly_expenses: float = 0.0

class ComponentScoresRead(BaseModel):
    savings_rate: float
    budget_adherence: float
    debt_progress: float
    spending_stability: float
    emergency_fund: float

class HealthScoreSnapshotRead(BaseModel):
    id: int
    year: int
    month: int
    total_score: int
    component_scores: ComponentScoresRead
    created_at: datetime
    updated_at: datetime

class TrendPoint(BaseModel):
    month: int  # 1-12
    actual: Optional[int] = None
    predicted: Optional[int] = None
    is_future: bool
