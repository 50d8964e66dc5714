from sqlalchemy import Column, String, Date, DateTime, Text
from datetime import datetime
from sqlalchemy.orm import relationship

from ..core.database import Base
from .user import new_id

class Patient(Base):
    __tablename__ = "patients"

    id = Column(String(36), primary_key=True, default=new_id)

    # Personal information
    name = Column(String(255), nullable=False, index=True)
    cpf = Column(String(14), nullable=True)
    birth_date = Column(Date, nullable=True)

    # Contact information
    phone = Column(String(20), nullable=True)
    email = Column(String(255), nullable=True)

    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)

    # Relationships
    appointments = relationship(
        "Appointment",
        back_populates="patient",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<Patient(id={self.id}, name='{self.name}')>"
