from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import date

class HolidayCreate(BaseModel):
    date: date
    description: Optional[str] = None
    is_blocked: bool = True

class HolidayResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    date: date
    description: Optional[str] = None
    is_blocked: bool
