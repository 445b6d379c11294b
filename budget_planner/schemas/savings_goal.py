# budget_planner/schemas/savings_goal.py

from datetime import date, datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

class SavingsGoalCreate(BaseModel):
    name: str
    target_amount: float = Field(gt=0)
    current_amount: float = Field(default=0.0, ge=0)
    target_date: date
    monthly_contribution: float = Field(default=0.0, ge=0)
    color: str = "#10b981"
    icon: str = "piggy-bank"

class SavingsGoalUpdate(BaseModel):
    name: Optional[str] = None
    target_amount: Optional[float] = Field(default=None, gt=0)
    current_amount: Optional[float] = Field(default=None, ge=0)
    target_date: Optional[date] = None
    monthly_contribution: Optional[float] = Field(default=None, ge=0)
    color: Optional[str] = None
    icon: Optional[str] = None

class SavingsGoalRead(SavingsGoalCreate):
    id: int
    is_completed: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Calculados al leer
    progress: float = 0.0  # 0-100
    remaining: float = 0.0
    days_remaining: int = 0
    months_remaining: int = 0
    required_monthly: float = 0.0
    on_track: bool = False

    model_config = ConfigDict(from_attributes=True)

class SavingsGoalContribution(BaseModel):
    amount: float = Field(..., description="Monto a aportar; negativo para retirar")

class SavingsGoalSummary(BaseModel):
    goals: List[SavingsGoalRead]
    total_target: float
    total_saved: float
    total_remaining: float
    overall_progress: float  # 0-100
