from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from ...core.database import get_db
from ...api.deps import get_current_user, get_front_desk_user
from ...services.message_service import MessageService
from ...schemas.message import (
    TemplateCreate, TemplateResponse, MessageLogCreate, MessageLogResponse,
    ConversationResponse
)

router = APIRouter(prefix="/messages", tags=["Messages"])

# Templates
@router.get("/templates", response_model=List[TemplateResponse], dependencies=[Depends(get_current_user)])
async def list_templates(db: Session = Depends(get_db)):
    return MessageService(db).list_templates()

@router.post("/templates", response_model=TemplateResponse, status_code=201, dependencies=[Depends(get_front_desk_user)])
async def create_template(data: TemplateCreate, db: Session = Depends(get_db)):
    return MessageService(db).create_template(data)

@router.delete("/templates/{template_id}", status_code=204, dependencies=[Depends(get_front_desk_user)])
async def delete_template(template_id: str, db: Session = Depends(get_db)):
    MessageService(db).delete_template(template_id)

# Log
@router.get("/logs", response_model=List[MessageLogResponse], dependencies=[Depends(get_current_user)])
async def list_logs(
    limit: int = Query(50, ge=1, le=500),
    db: Session = Depends(get_db)
):
    """Most recent messages first."""
    return MessageService(db).list_logs(limit)

@router.post("/logs", response_model=MessageLogResponse, status_code=201, dependencies=[Depends(get_current_user)])
async def record_message(data: MessageLogCreate, db: Session = Depends(get_db)):
    return MessageService(db).record_message(data)

# Inbox
@router.get("/conversations", response_model=List[ConversationResponse], dependencies=[Depends(get_current_user)])
async def list_conversations(
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db)
):
    """One entry per conversation, most recent first."""
    return MessageService(db).conversations(limit)

@router.get("/conversations/thread", response_model=List[MessageLogResponse], dependencies=[Depends(get_current_user)])
async def conversation_thread(
    external_id: Optional[str] = None,
    patient_id: Optional[str] = None,
    db: Session = Depends(get_db)
):
    return MessageService(db).thread(external_id, patient_id)
