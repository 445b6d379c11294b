from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class AppSettingsUpdate(BaseModel):
    currency: Optional[str] = None
    first_day_of_month: Optional[int] = Field(default=None, ge=1, le=28)

class AppSettingsRead(BaseModel):
    id: int
    currency: str
    first_day_of_month: int

    model_config = ConfigDict(from_attributes=True)
