from sqlalchemy import Column, String, ForeignKey, DateTime, Text
from datetime import datetime
from sqlalchemy.orm import relationship
import enum

from ..core.database import Base
from .user import new_id

class AppointmentStatus(str, enum.Enum):
    AGENDADO = "agendado"
    CONFIRMADO = "confirmado"
    CANCELADO = "cancelado"
    CONCLUIDO = "concluido"

class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(String(36), primary_key=True, default=new_id)

    patient_id = Column(
        String(36),
        ForeignKey("patients.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Appointment details
    start_time = Column(DateTime, nullable=False, index=True)
    end_time = Column(DateTime, nullable=True)
    status = Column(String(20), nullable=False, default=AppointmentStatus.AGENDADO.value)
    reason = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)

    patient = relationship("Patient", back_populates="appointments")

    @property
    def patient_name(self):
        return self.patient.name if self.patient else None

    def __repr__(self):
        return f"<Appointment(id={self.id}, patient_id={self.patient_id}, start='{self.start_time}')>"
