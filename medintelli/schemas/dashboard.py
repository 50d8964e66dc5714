from pydantic import BaseModel
from typing import List

class DashboardCounts(BaseModel):
    patients: int
    appointments: int
    today_appointments: int
    waitlist: int

class ConfigStatus(BaseModel):
    app_name: str
    version: str
    database: str
    chat_configured: bool
    chat_model: str
    tables: List[str]
