"""
MedIntelli Clínica

A FastAPI-based clinic management service: patient registry, agenda,
waitlist, holidays, message log, public document validation and an
AI chat assistant for the front desk.
"""

__version__ = "1.0.0"
