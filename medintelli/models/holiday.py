from sqlalchemy import Column, String, Date, DateTime, Boolean
from datetime import datetime

from ..core.database import Base
from .user import new_id

class Holiday(Base):
    __tablename__ = "holidays"

    id = Column(String(36), primary_key=True, default=new_id)
    date = Column(Date, nullable=False, index=True)
    description = Column(String(255), nullable=True)
    is_blocked = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f"<Holiday(id={self.id}, date='{self.date}', blocked={self.is_blocked})>"
