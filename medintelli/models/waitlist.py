from sqlalchemy import Column, String, Integer, DateTime, Text
from datetime import datetime

from ..core.database import Base
from .user import new_id

PRIORITY_NORMAL = 1
PRIORITY_URGENT = 2

class WaitlistItem(Base):
    __tablename__ = "waitlist"

    id = Column(String(36), primary_key=True, default=new_id)
    patient_name = Column(String(255), nullable=False)
    phone = Column(String(20), nullable=True)
    reason = Column(Text, nullable=True)
    priority = Column(Integer, nullable=False, default=PRIORITY_NORMAL)
    created_at = Column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f"<WaitlistItem(id={self.id}, patient_name='{self.patient_name}', priority={self.priority})>"
