from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime

class ValidationCreate(BaseModel):
    code: Optional[str] = None
    patient_name: Optional[str] = None
    doc_type: Optional[str] = None
    doc_url: Optional[str] = None
    valid: bool = True

class ValidationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    code: str
    patient_name: Optional[str] = None
    doc_type: Optional[str] = None
    doc_url: Optional[str] = None
    valid: bool
    created_at: Optional[datetime] = None

class PublicValidationResponse(BaseModel):
    code: str
    patient_name: Optional[str] = None
    doc_type: Optional[str] = None
    doc_url: Optional[str] = None
    valid: bool
    message: str
