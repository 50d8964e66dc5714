from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from typing import List
import logging

from ..models.waitlist import WaitlistItem
from ..schemas.waitlist import WaitlistCreate

logger = logging.getLogger(__name__)

class WaitlistService:
    def __init__(self, db: Session):
        self.db = db

    def list_items(self) -> List[WaitlistItem]:
        """Priority cases first, then first come first served."""
        return self.db.query(WaitlistItem).order_by(
            WaitlistItem.priority.desc(),
            WaitlistItem.created_at.asc()
        ).all()

    def add_item(self, data: WaitlistCreate) -> WaitlistItem:
        item = WaitlistItem(**data.model_dump())
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)

        logger.info(f"Waitlist item added: {item.id} (priority={item.priority})")
        return item

    def remove_item(self, item_id: str) -> None:
        item = self.db.query(WaitlistItem).filter(WaitlistItem.id == item_id).first()
        if not item:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Item da fila não encontrado"
            )
        self.db.delete(item)
        self.db.commit()

    def count(self) -> int:
        return self.db.query(WaitlistItem).count()
