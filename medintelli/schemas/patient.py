from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import date, datetime

class PatientBase(BaseModel):
    name: str = Field(..., min_length=1)
    cpf: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    birth_date: Optional[date] = None
    notes: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value.strip()

    @field_validator("cpf", "phone", "email", "notes", "birth_date", mode="before")
    @classmethod
    def empty_as_null(cls, value):
        """Blank form fields are stored as null."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

class PatientCreate(PatientBase):
    pass

class PatientUpdate(PatientBase):
    pass

class PatientResponse(PatientBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: Optional[datetime] = None
