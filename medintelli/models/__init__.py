from .user import User, RefreshToken
from .patient import Patient
from .appointment import Appointment, AppointmentStatus
from .waitlist import WaitlistItem
from .holiday import Holiday
from .message import MessageTemplate, MessageLog, MessageDirection
from .validation import ValidationRecord

__all__ = [
    "User",
    "RefreshToken",
    "Patient",
    "Appointment",
    "AppointmentStatus",
    "WaitlistItem",
    "Holiday",
    "MessageTemplate",
    "MessageLog",
    "MessageDirection",
    "ValidationRecord",
]
