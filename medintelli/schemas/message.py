from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime

from ..models.message import MessageDirection
from .appointment import as_naive_utc

class TemplateCreate(BaseModel):
    name: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)

class TemplateResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    content: str
    created_at: Optional[datetime] = None

class MessageLogCreate(BaseModel):
    patient_id: Optional[str] = None
    external_id: Optional[str] = None
    phone: Optional[str] = None
    template_id: Optional[str] = None
    message: Optional[str] = None
    direction: MessageDirection = MessageDirection.OUT
    status: Optional[str] = None
    channel: str = "whatsapp"
    sent_at: Optional[datetime] = None

    normalize_sent_at = field_validator("sent_at")(as_naive_utc)

class MessageLogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    patient_id: Optional[str] = None
    external_id: Optional[str] = None
    phone: Optional[str] = None
    template_id: Optional[str] = None
    message: Optional[str] = None
    direction: MessageDirection
    status: Optional[str] = None
    channel: str
    sent_at: datetime

class ConversationResponse(BaseModel):
    key: str
    external_id: Optional[str] = None
    patient_id: Optional[str] = None
    patient_name: Optional[str] = None
    last_message: Optional[str] = None
    last_status: Optional[str] = None
    last_direction: MessageDirection
    last_sent_at: datetime
    message_count: int
