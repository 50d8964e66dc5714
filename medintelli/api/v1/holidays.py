from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from ...core.database import get_db
from ...api.deps import get_current_user, get_front_desk_user
from ...services.holiday_service import HolidayService
from ...schemas.holiday import HolidayCreate, HolidayResponse

router = APIRouter(prefix="/holidays", tags=["Holidays"])

@router.get("", response_model=List[HolidayResponse], dependencies=[Depends(get_current_user)])
async def list_holidays(db: Session = Depends(get_db)):
    return HolidayService(db).list_holidays()

@router.post("", response_model=HolidayResponse, status_code=201, dependencies=[Depends(get_front_desk_user)])
async def create_holiday(data: HolidayCreate, db: Session = Depends(get_db)):
    return HolidayService(db).create_holiday(data)

@router.delete("/{holiday_id}", status_code=204, dependencies=[Depends(get_front_desk_user)])
async def delete_holiday(holiday_id: str, db: Session = Depends(get_db)):
    HolidayService(db).delete_holiday(holiday_id)
