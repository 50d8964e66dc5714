from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from ...core.database import get_db
from ...api.deps import get_current_user, get_admin_user
from ...models.user import User
from ...services.dashboard_service import DashboardService, menu_for
from ...schemas.auth import MenuItem
from ...schemas.dashboard import DashboardCounts, ConfigStatus

router = APIRouter(tags=["Dashboard"])

@router.get("/dashboard", response_model=DashboardCounts, dependencies=[Depends(get_current_user)])
async def dashboard(db: Session = Depends(get_db)):
    """Clinic activity summary."""
    return DashboardService(db).counts()

@router.get("/menu", response_model=List[MenuItem])
async def menu(current_user: User = Depends(get_current_user)):
    """Sidebar sections visible to the current role."""
    return menu_for(current_user.role)

@router.get("/config", response_model=ConfigStatus, dependencies=[Depends(get_admin_user)])
async def config_status():
    return DashboardService.config_status()
