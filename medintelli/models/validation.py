from sqlalchemy import Column, String, DateTime, Boolean
from datetime import datetime

from ..core.database import Base
from .user import new_id

class ValidationRecord(Base):
    __tablename__ = "public_validations"

    id = Column(String(36), primary_key=True, default=new_id)
    code = Column(String(64), unique=True, nullable=False, index=True)
    patient_name = Column(String(255), nullable=True)
    doc_type = Column(String(100), nullable=True)
    doc_url = Column(String(1024), nullable=True)
    valid = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f"<ValidationRecord(code='{self.code}', valid={self.valid})>"
