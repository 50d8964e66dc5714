from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

class WaitlistCreate(BaseModel):
    patient_name: str = Field(..., min_length=1)
    phone: Optional[str] = None
    reason: Optional[str] = None
    priority: int = Field(1, ge=1, le=2)

class WaitlistResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    patient_name: str
    phone: Optional[str] = None
    reason: Optional[str] = None
    priority: int
    created_at: Optional[datetime] = None
