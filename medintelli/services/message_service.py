from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from datetime import datetime
from typing import Dict, Iterable, List, Optional
import logging

from ..models.message import MessageTemplate, MessageLog, MessageDirection
from ..models.patient import Patient
from ..schemas.message import TemplateCreate, MessageLogCreate, ConversationResponse

logger = logging.getLogger(__name__)

DEFAULT_STATUS = {
    MessageDirection.OUT: "enviado",
    MessageDirection.IN: "recebido",
}

def contact_id(log: MessageLog) -> Optional[str]:
    """External contact id, falling back to the phone number."""
    return log.external_id or log.phone

def conversation_key(external_id: Optional[str], patient_id: Optional[str]) -> str:
    return f"{external_id or ''}|{patient_id or ''}"

def group_conversations(
    logs: Iterable[MessageLog],
    patient_names: Optional[Dict[str, str]] = None,
) -> List[ConversationResponse]:
    """Collapse message rows into one entry per conversation.

    Rows are walked newest first; the first row seen for a key is the
    conversation's latest message. The result is ordered by recency.
    """
    patient_names = patient_names or {}
    ordered = sorted(logs, key=lambda log: log.sent_at, reverse=True)

    latest: Dict[str, MessageLog] = {}
    counts: Dict[str, int] = {}
    for log in ordered:
        key = conversation_key(contact_id(log), log.patient_id)
        if key not in latest:
            latest[key] = log
        counts[key] = counts.get(key, 0) + 1

    return [
        ConversationResponse(
            key=key,
            external_id=contact_id(log),
            patient_id=log.patient_id,
            patient_name=patient_names.get(log.patient_id) if log.patient_id else None,
            last_message=log.message,
            last_status=log.status,
            last_direction=MessageDirection(log.direction),
            last_sent_at=log.sent_at,
            message_count=counts[key],
        )
        for key, log in latest.items()
    ]

class MessageService:
    def __init__(self, db: Session):
        self.db = db

    # Templates
    def list_templates(self) -> List[MessageTemplate]:
        return self.db.query(MessageTemplate).order_by(MessageTemplate.created_at).all()

    def get_template(self, template_id: str) -> MessageTemplate:
        template = self.db.query(MessageTemplate).filter(MessageTemplate.id == template_id).first()
        if not template:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Modelo de mensagem não encontrado"
            )
        return template

    def create_template(self, data: TemplateCreate) -> MessageTemplate:
        template = MessageTemplate(**data.model_dump())
        self.db.add(template)
        self.db.commit()
        self.db.refresh(template)

        logger.info(f"Message template created: {template.name}")
        return template

    def delete_template(self, template_id: str) -> None:
        template = self.get_template(template_id)
        self.db.delete(template)
        self.db.commit()

    # Log
    def list_logs(self, limit: int = 50) -> List[MessageLog]:
        return self.db.query(MessageLog).order_by(MessageLog.sent_at.desc()).limit(limit).all()

    def record_message(self, data: MessageLogCreate) -> MessageLog:
        """Store a sent or received message.

        A template reference without text sends the template content.
        """
        text = data.message
        if data.template_id:
            template = self.get_template(data.template_id)
            if not text:
                text = template.content

        if not text:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Informe a mensagem ou um modelo"
            )

        if not (data.external_id or data.phone or data.patient_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Informe o destinatário (external_id, telefone ou paciente)"
            )

        log = MessageLog(
            patient_id=data.patient_id,
            external_id=data.external_id,
            phone=data.phone,
            template_id=data.template_id,
            message=text,
            direction=data.direction.value,
            status=data.status or DEFAULT_STATUS[data.direction],
            channel=data.channel,
            sent_at=data.sent_at or datetime.utcnow(),
        )
        self.db.add(log)
        self.db.commit()
        self.db.refresh(log)

        logger.info(f"Message logged: {log.id} ({log.direction}, {log.channel})")
        return log

    # Inbox
    def conversations(self, limit: Optional[int] = None) -> List[ConversationResponse]:
        logs = self.db.query(MessageLog).order_by(MessageLog.sent_at.desc()).all()
        grouped = group_conversations(logs, self._patient_names(logs))
        return grouped[:limit] if limit else grouped

    def thread(self, external_id: Optional[str], patient_id: Optional[str]) -> List[MessageLog]:
        """All rows of one conversation, oldest first."""
        key = conversation_key(external_id, patient_id)
        query = self.db.query(MessageLog)
        if patient_id:
            query = query.filter(MessageLog.patient_id == patient_id)
        else:
            query = query.filter(MessageLog.patient_id.is_(None))
        logs = query.order_by(MessageLog.sent_at.asc()).all()
        return [
            log for log in logs
            if conversation_key(contact_id(log), log.patient_id) == key
        ]

    def _patient_names(self, logs: List[MessageLog]) -> Dict[str, str]:
        ids = {log.patient_id for log in logs if log.patient_id}
        if not ids:
            return {}
        rows = self.db.query(Patient.id, Patient.name).filter(Patient.id.in_(ids)).all()
        return {patient_id: name for patient_id, name in rows}
