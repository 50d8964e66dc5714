from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from typing import List, Optional
import logging

from ..models.patient import Patient
from ..schemas.patient import PatientCreate, PatientUpdate

logger = logging.getLogger(__name__)

class PatientService:
    def __init__(self, db: Session):
        self.db = db

    def list_patients(self, search: Optional[str] = None) -> List[Patient]:
        """Patients, newest first, optionally filtered by name."""
        query = self.db.query(Patient)
        if search and search.strip():
            term = search.strip().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
            query = query.filter(Patient.name.ilike(f"%{term}%", escape="\\"))
        return query.order_by(Patient.created_at.desc()).all()

    def get_patient(self, patient_id: str) -> Patient:
        patient = self.db.query(Patient).filter(Patient.id == patient_id).first()
        if not patient:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Paciente não encontrado"
            )
        return patient

    def create_patient(self, data: PatientCreate) -> Patient:
        patient = Patient(**data.model_dump())
        self.db.add(patient)
        self.db.commit()
        self.db.refresh(patient)

        logger.info(f"Patient created: {patient.id}")
        return patient

    def update_patient(self, patient_id: str, data: PatientUpdate) -> Patient:
        patient = self.get_patient(patient_id)
        for field, value in data.model_dump().items():
            setattr(patient, field, value)

        self.db.commit()
        self.db.refresh(patient)
        return patient

    def delete_patient(self, patient_id: str) -> None:
        """Delete a patient together with their appointments."""
        patient = self.get_patient(patient_id)
        self.db.delete(patient)
        self.db.commit()

        logger.info(f"Patient deleted: {patient_id}")

    def count(self) -> int:
        return self.db.query(Patient).count()
