from fastapi import HTTPException, status
from typing import List, Optional
import httpx
import logging

from ..core.config import settings
from ..schemas.chat import ChatMessage, ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

CLINIC_SYSTEM_PROMPT = """
Você é o assistente oficial da clínica MedIntelli.
Regras:
- Seja objetivo, cordial e profissional.
- Responda sobre agendamentos, retornos, orientações gerais, preparo de exames.
- NÃO dê diagnósticos nem prescrições.
- Em caso de urgência, oriente procurar pronto-atendimento.
- Quando tiver dúvida, sugira falar com a equipe da clínica.
"""

GREETING = "Olá! Sou o assistente virtual da clínica MedIntelli. Como posso ajudar?"

FALLBACK_REPLY = "Desculpe, não consegui gerar uma resposta agora."

class ChatService:
    """Proxy to a hosted chat-completion endpoint.

    Every call sends the clinic system prompt followed by the whole
    conversation; nothing is kept server side.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.api_url = api_url or settings.OPENAI_API_URL
        self.model = model or settings.OPENAI_MODEL
        self.timeout = timeout or settings.CHAT_TIMEOUT_SECONDS
        self.transport = transport

    @staticmethod
    def greeting() -> List[ChatMessage]:
        return [ChatMessage(role="assistant", content=GREETING)]

    def build_payload(self, history: List[ChatMessage]) -> dict:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": CLINIC_SYSTEM_PROMPT},
                *[m.model_dump() for m in history],
            ],
        }

    async def reply(self, request: ChatRequest) -> ChatResponse:
        if not self.api_key:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="OPENAI_API_KEY não configurado."
            )

        text = request.message.strip()
        if not text:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Mensagem vazia"
            )

        history = [*request.history, ChatMessage(role="user", content=text)]
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    self.api_url,
                    json=self.build_payload(history),
                    headers=headers
                )
        except httpx.HTTPError as e:
            logger.error(f"Chat completion request failed: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Erro ao conversar com a IA. Verifique a chave de API."
            )

        if response.status_code != 200:
            logger.error(f"Chat completion API returned {response.status_code}")
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Erro API OpenAI: {response.status_code}"
            )

        answer = self._extract_answer(response)
        history.append(ChatMessage(role="assistant", content=answer))
        return ChatResponse(reply=answer, history=history)

    @staticmethod
    def _extract_answer(response: httpx.Response) -> str:
        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError):
            return FALLBACK_REPLY
        return str(content) if content else FALLBACK_REPLY

def get_chat_service() -> ChatService:
    """Chat service dependency."""
    return ChatService(api_key=settings.OPENAI_API_KEY)
