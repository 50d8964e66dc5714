from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from ...core.database import get_db
from ...api.deps import get_current_user, get_front_desk_user
from ...services.waitlist_service import WaitlistService
from ...schemas.waitlist import WaitlistCreate, WaitlistResponse

router = APIRouter(prefix="/waitlist", tags=["Waitlist"])

@router.get("", response_model=List[WaitlistResponse], dependencies=[Depends(get_current_user)])
async def list_waitlist(db: Session = Depends(get_db)):
    """Waiting patients, priority cases first."""
    return WaitlistService(db).list_items()

@router.post("", response_model=WaitlistResponse, status_code=201, dependencies=[Depends(get_front_desk_user)])
async def add_to_waitlist(data: WaitlistCreate, db: Session = Depends(get_db)):
    return WaitlistService(db).add_item(data)

@router.delete("/{item_id}", status_code=204, dependencies=[Depends(get_front_desk_user)])
async def remove_from_waitlist(item_id: str, db: Session = Depends(get_db)):
    WaitlistService(db).remove_item(item_id)
