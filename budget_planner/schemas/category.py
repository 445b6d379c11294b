from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class CategoryCreate(BaseModel):
    name: str
    color: str = "#6b7280"
    icon: str = "more-horizontal"
    monthly_budget: float = Field(default=0.0, ge=0)

class CategoryRead(CategoryCreate):
    id: int
    is_default: bool
    is_active: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
