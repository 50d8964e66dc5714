from fastapi import APIRouter, Depends
from typing import List

from ...api.deps import get_current_user
from ...services.chat_service import ChatService, get_chat_service
from ...schemas.chat import ChatMessage, ChatRequest, ChatResponse

router = APIRouter(
    prefix="/chat",
    tags=["Chat"],
    dependencies=[Depends(get_current_user)]
)

@router.get("", response_model=List[ChatMessage])
async def start_chat():
    """Opening message of a new conversation."""
    return ChatService.greeting()

@router.post("", response_model=ChatResponse)
async def send_message(
    request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service)
):
    return await chat_service.reply(request)
