from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class MonthlyBudgetUpsert(BaseModel):
    category_id: int
    year: int = Field(ge=1970, le=9999)
    month: int = Field(ge=1, le=12)
    planned_amount: float = Field(ge=0)
    rollover_enabled: bool = False

class MonthlyBudgetRead(BaseModel):
    id: Optional[int] = None  # None cuando es el presupuesto por defecto de la categoría
    category_id: int
    category_name: Optional[str] = None
    year: int
    month: int
    planned_amount: float
    rollover_enabled: bool = False
    rollover_amount: float = 0.0
    is_default: bool = False

    model_config = ConfigDict(from_attributes=True)
