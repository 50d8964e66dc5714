from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from datetime import date
from typing import List, Optional
import logging

from ..models.holiday import Holiday
from ..schemas.holiday import HolidayCreate

logger = logging.getLogger(__name__)

class HolidayService:
    def __init__(self, db: Session):
        self.db = db

    def list_holidays(self, start: Optional[date] = None, end: Optional[date] = None) -> List[Holiday]:
        query = self.db.query(Holiday)
        if start:
            query = query.filter(Holiday.date >= start)
        if end:
            query = query.filter(Holiday.date <= end)
        return query.order_by(Holiday.date).all()

    def create_holiday(self, data: HolidayCreate) -> Holiday:
        holiday = Holiday(**data.model_dump())
        self.db.add(holiday)
        self.db.commit()
        self.db.refresh(holiday)

        logger.info(f"Holiday created: {holiday.date} (blocked={holiday.is_blocked})")
        return holiday

    def delete_holiday(self, holiday_id: str) -> None:
        holiday = self.db.query(Holiday).filter(Holiday.id == holiday_id).first()
        if not holiday:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Feriado não encontrado"
            )
        self.db.delete(holiday)
        self.db.commit()

    def blocked_holiday(self, day: date) -> Optional[Holiday]:
        """The blocking holiday on ``day``, if any."""
        return self.db.query(Holiday).filter(
            Holiday.date == day,
            Holiday.is_blocked == True  # noqa: E712
        ).first()

    def is_blocked_day(self, day: date) -> bool:
        return self.blocked_holiday(day) is not None
