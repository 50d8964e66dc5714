from sqlalchemy.orm import Session
from typing import List

from ..core.config import settings
from ..core.database import Base
from ..core.security import UserRole
from ..schemas.auth import MenuItem
from ..schemas.dashboard import DashboardCounts, ConfigStatus
from .appointment_service import AppointmentService
from .patient_service import PatientService
from .waitlist_service import WaitlistService

# Sidebar sections, in display order
SECTIONS = [
    ("dashboard", "Dashboard"),
    ("pacientes", "Pacientes"),
    ("agenda", "Agenda"),
    ("waitlist", "Fila de Espera"),
    ("holidays", "Feriados/Bloqueios"),
    ("mensagens", "Central de Mensagens"),
    ("validation", "Validação Pública"),
    ("chat", "Chat IA"),
    ("medico", "Painel Médico"),
    ("config", "Configurações"),
]

ROLE_SECTIONS = {
    UserRole.ADMIN: {section_id for section_id, _ in SECTIONS},
    UserRole.RECEPCAO: {
        "dashboard", "pacientes", "agenda", "waitlist", "holidays",
        "mensagens", "validation", "chat",
    },
    UserRole.MEDICO: {"dashboard", "agenda", "medico", "mensagens", "chat"},
}

def menu_for(role: UserRole) -> List[MenuItem]:
    allowed = ROLE_SECTIONS[UserRole(role)]
    return [
        MenuItem(id=section_id, label=label)
        for section_id, label in SECTIONS
        if section_id in allowed
    ]

def database_kind(url: str) -> str:
    if url.startswith("postgresql"):
        return "PostgreSQL"
    if url.startswith("sqlite"):
        return "SQLite"
    return "Unknown"

class DashboardService:
    def __init__(self, db: Session):
        self.db = db

    def counts(self) -> DashboardCounts:
        appointments = AppointmentService(self.db)
        return DashboardCounts(
            patients=PatientService(self.db).count(),
            appointments=appointments.count(),
            today_appointments=appointments.count_today(),
            waitlist=WaitlistService(self.db).count(),
        )

    @staticmethod
    def config_status() -> ConfigStatus:
        return ConfigStatus(
            app_name=settings.APP_NAME,
            version=settings.VERSION,
            database=database_kind(settings.get_database_url),
            chat_configured=settings.chat_configured,
            chat_model=settings.OPENAI_MODEL,
            tables=sorted(Base.metadata.tables.keys()),
        )
