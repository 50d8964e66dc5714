from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional, List, Dict, Any
from datetime import date, datetime, timezone

from ..models.appointment import AppointmentStatus

def as_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Timestamps are stored as naive UTC."""
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value

class AppointmentCreate(BaseModel):
    patient_id: str
    start_time: datetime
    end_time: Optional[datetime] = None
    reason: Optional[str] = None
    force: bool = False

    normalize_times = field_validator("start_time", "end_time")(as_naive_utc)

class AppointmentStatusUpdate(BaseModel):
    status: AppointmentStatus

class AppointmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    patient_id: str
    patient_name: Optional[str] = None
    start_time: datetime
    end_time: Optional[datetime] = None
    status: AppointmentStatus
    reason: Optional[str] = None
    created_at: Optional[datetime] = None

class DayBucket(BaseModel):
    date: date
    weekday: int
    is_holiday: bool
    holiday_description: Optional[str] = None
    appointments: List[AppointmentResponse]

class WeekView(BaseModel):
    week_start: date
    week_end: date
    days: List[DayBucket]

class CalendarEvent(BaseModel):
    id: str
    title: str
    start: str
    end: Optional[str] = None
    allDay: bool = False
    display: Optional[str] = None
    color: Optional[str] = None
    extendedProps: Dict[str, Any] = {}
