from sqlalchemy import Column, String, DateTime, Text
from datetime import datetime
import enum

from ..core.database import Base
from .user import new_id

class MessageDirection(str, enum.Enum):
    OUT = "out"
    IN = "in"

class MessageTemplate(Base):
    __tablename__ = "whatsapp_templates"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f"<MessageTemplate(id={self.id}, name='{self.name}')>"

class MessageLog(Base):
    __tablename__ = "whatsapp_logs"

    id = Column(String(36), primary_key=True, default=new_id)

    # No foreign keys: logs outlive the patients and templates they mention
    patient_id = Column(String(36), nullable=True, index=True)
    template_id = Column(String(36), nullable=True)
    external_id = Column(String(255), nullable=True, index=True)
    phone = Column(String(20), nullable=True)

    message = Column(Text, nullable=True)
    direction = Column(String(3), nullable=False, default=MessageDirection.OUT.value)
    status = Column(String(20), nullable=True)
    channel = Column(String(20), nullable=False, default="whatsapp")
    sent_at = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)

    def __repr__(self):
        return f"<MessageLog(id={self.id}, external_id='{self.external_id}', sent_at='{self.sent_at}')>"
