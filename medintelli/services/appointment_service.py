from sqlalchemy.orm import Session, joinedload
from fastapi import HTTPException, status
from datetime import date, datetime, time, timedelta
from typing import Dict, List, Optional
import logging

from ..core.config import settings
from ..models.appointment import Appointment, AppointmentStatus
from ..models.patient import Patient
from ..schemas.appointment import (
    AppointmentCreate, AppointmentResponse, CalendarEvent, DayBucket, WeekView,
    as_naive_utc
)
from .holiday_service import HolidayService

logger = logging.getLogger(__name__)

STATUS_COLORS = {
    AppointmentStatus.AGENDADO: "#1a73e8",
    AppointmentStatus.CONFIRMADO: "#188038",
    AppointmentStatus.CANCELADO: "#d93025",
    AppointmentStatus.CONCLUIDO: "#5f6368",
}

HOLIDAY_COLOR = "#fce8e6"

def get_monday(day: date) -> date:
    """Monday of the week containing ``day``; Sunday closes its week."""
    return day - timedelta(days=day.weekday())

def day_bounds(day: date):
    """First and last second of ``day``."""
    return datetime.combine(day, time.min), datetime.combine(day, time(23, 59, 59))

def bucket_by_day(appointments: List[Appointment], week_start: date) -> Dict[date, List[Appointment]]:
    """Spread appointments over the seven days starting at ``week_start``.

    Appointments outside the week are ignored.
    """
    buckets = {week_start + timedelta(days=i): [] for i in range(7)}
    for appointment in appointments:
        day = appointment.start_time.date()
        if day in buckets:
            buckets[day].append(appointment)
    return buckets

class AppointmentService:
    def __init__(self, db: Session):
        self.db = db
        self.holidays = HolidayService(db)

    def _query(self):
        return self.db.query(Appointment).options(joinedload(Appointment.patient))

    def list_appointments(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        status_filter: Optional[AppointmentStatus] = None,
        patient_id: Optional[str] = None,
    ) -> List[Appointment]:
        query = self._query()
        start, end = as_naive_utc(start), as_naive_utc(end)
        if start:
            query = query.filter(Appointment.start_time >= start)
        if end:
            query = query.filter(Appointment.start_time <= end)
        if status_filter:
            query = query.filter(Appointment.status == AppointmentStatus(status_filter).value)
        if patient_id:
            query = query.filter(Appointment.patient_id == patient_id)
        return query.order_by(Appointment.start_time).all()

    def get_appointment(self, appointment_id: str) -> Appointment:
        appointment = self._query().filter(Appointment.id == appointment_id).first()
        if not appointment:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Consulta não encontrada"
            )
        return appointment

    def create_appointment(self, data: AppointmentCreate) -> Appointment:
        """Book an appointment with status ``agendado``.

        Booking on a blocked day needs ``force``; the caller is expected to
        have asked the user for confirmation.
        """
        patient = self.db.query(Patient).filter(Patient.id == data.patient_id).first()
        if not patient:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Paciente não encontrado"
            )

        if data.end_time and data.end_time <= data.start_time:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="O término deve ser posterior ao início"
            )

        holiday = self.holidays.blocked_holiday(data.start_time.date())
        if holiday and not data.force:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="A data está marcada como feriado/bloqueio. Envie force=true para agendar mesmo assim."
            )

        appointment = Appointment(
            patient_id=data.patient_id,
            start_time=data.start_time,
            end_time=data.end_time,
            reason=data.reason or None,
            status=AppointmentStatus.AGENDADO.value,
        )
        self.db.add(appointment)
        self.db.commit()
        self.db.refresh(appointment)

        if holiday:
            logger.warning(f"Appointment {appointment.id} booked on blocked day {holiday.date}")
        logger.info(f"Appointment created: {appointment.id} for patient {patient.id}")
        return appointment

    def update_status(self, appointment_id: str, new_status: AppointmentStatus) -> Appointment:
        appointment = self.get_appointment(appointment_id)
        appointment.status = AppointmentStatus(new_status).value
        self.db.commit()
        self.db.refresh(appointment)

        logger.info(f"Appointment {appointment_id} status -> {appointment.status}")
        return appointment

    def delete_appointment(self, appointment_id: str) -> None:
        appointment = self.get_appointment(appointment_id)
        self.db.delete(appointment)
        self.db.commit()

    def appointments_on(self, day: date) -> List[Appointment]:
        start, end = day_bounds(day)
        return self.list_appointments(start=start, end=end)

    def today(self) -> List[Appointment]:
        """Doctor panel: today's agenda (UTC)."""
        return self.appointments_on(datetime.utcnow().date())

    def week_view(self, day: Optional[date] = None) -> WeekView:
        week_start = get_monday(day or datetime.utcnow().date())
        week_end = week_start + timedelta(days=6)

        appointments = self.list_appointments(
            start=day_bounds(week_start)[0],
            end=day_bounds(week_end)[1],
        )
        blocked = {
            h.date: h for h in self.holidays.list_holidays(week_start, week_end)
            if h.is_blocked
        }

        days = []
        for bucket_day, items in bucket_by_day(appointments, week_start).items():
            holiday = blocked.get(bucket_day)
            days.append(DayBucket(
                date=bucket_day,
                weekday=bucket_day.weekday(),
                is_holiday=holiday is not None,
                holiday_description=holiday.description if holiday else None,
                appointments=[AppointmentResponse.model_validate(a) for a in items],
            ))

        return WeekView(week_start=week_start, week_end=week_end, days=days)

    def calendar_events(self, start: date, end: date) -> List[CalendarEvent]:
        """Appointments and blocked days as a calendar JSON feed."""
        slot = timedelta(minutes=settings.APPOINTMENT_SLOT_MINUTES)
        events = []

        for appointment in self.list_appointments(
            start=day_bounds(start)[0], end=day_bounds(end)[1]
        ):
            appointment_status = AppointmentStatus(appointment.status)
            events.append(CalendarEvent(
                id=appointment.id,
                title=appointment.patient_name or "-",
                start=appointment.start_time.isoformat(),
                end=(appointment.end_time or appointment.start_time + slot).isoformat(),
                color=STATUS_COLORS[appointment_status],
                extendedProps={
                    "type": "appointment",
                    "status": appointment_status.value,
                    "reason": appointment.reason,
                    "patient_id": appointment.patient_id,
                },
            ))

        for holiday in self.holidays.list_holidays(start, end):
            if not holiday.is_blocked:
                continue
            events.append(CalendarEvent(
                id=f"holiday-{holiday.id}",
                title=holiday.description or "Bloqueio",
                start=holiday.date.isoformat(),
                allDay=True,
                display="background",
                color=HOLIDAY_COLOR,
                extendedProps={"type": "holiday"},
            ))

        return events

    def count(self) -> int:
        return self.db.query(Appointment).count()

    def count_today(self) -> int:
        start, end = day_bounds(datetime.utcnow().date())
        return self.db.query(Appointment).filter(
            Appointment.start_time >= start,
            Appointment.start_time <= end
        ).count()
