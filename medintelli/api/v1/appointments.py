from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from datetime import date, datetime
from typing import List, Optional

from ...core.database import get_db
from ...api.deps import get_current_user, get_doctor_user, get_front_desk_user
from ...models.appointment import AppointmentStatus
from ...services.appointment_service import AppointmentService
from ...schemas.appointment import (
    AppointmentCreate, AppointmentStatusUpdate, AppointmentResponse,
    CalendarEvent, WeekView
)

router = APIRouter(prefix="/appointments", tags=["Agenda"])

@router.get("", response_model=List[AppointmentResponse], dependencies=[Depends(get_current_user)])
async def list_appointments(
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    status_filter: Optional[AppointmentStatus] = Query(None, alias="status"),
    patient_id: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """List appointments ordered by start time."""
    return AppointmentService(db).list_appointments(start, end, status_filter, patient_id)

@router.get("/today", response_model=List[AppointmentResponse], dependencies=[Depends(get_doctor_user)])
async def doctor_panel(db: Session = Depends(get_db)):
    """Today's agenda for the doctor panel."""
    return AppointmentService(db).today()

@router.get("/week", response_model=WeekView, dependencies=[Depends(get_current_user)])
async def week_view(
    day: Optional[date] = Query(None, alias="date"),
    db: Session = Depends(get_db)
):
    """Monday to Sunday view of the week containing ``day``."""
    return AppointmentService(db).week_view(day)

@router.get("/events", response_model=List[CalendarEvent], dependencies=[Depends(get_current_user)])
async def calendar_events(
    start: date,
    end: date,
    db: Session = Depends(get_db)
):
    """Calendar feed of appointments and blocked days."""
    if end < start:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Intervalo de datas inválido"
        )
    return AppointmentService(db).calendar_events(start, end)

@router.get("/{appointment_id}", response_model=AppointmentResponse, dependencies=[Depends(get_current_user)])
async def get_appointment(appointment_id: str, db: Session = Depends(get_db)):
    return AppointmentService(db).get_appointment(appointment_id)

@router.post("", response_model=AppointmentResponse, status_code=201, dependencies=[Depends(get_front_desk_user)])
async def create_appointment(data: AppointmentCreate, db: Session = Depends(get_db)):
    return AppointmentService(db).create_appointment(data)

@router.patch("/{appointment_id}/status", response_model=AppointmentResponse, dependencies=[Depends(get_current_user)])
async def update_status(
    appointment_id: str,
    data: AppointmentStatusUpdate,
    db: Session = Depends(get_db)
):
    return AppointmentService(db).update_status(appointment_id, data.status)

@router.delete("/{appointment_id}", status_code=204, dependencies=[Depends(get_front_desk_user)])
async def delete_appointment(appointment_id: str, db: Session = Depends(get_db)):
    AppointmentService(db).delete_appointment(appointment_id)
