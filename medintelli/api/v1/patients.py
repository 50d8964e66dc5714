from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional

from ...core.database import get_db
from ...api.deps import get_current_user, get_front_desk_user
from ...services.patient_service import PatientService
from ...schemas.patient import PatientCreate, PatientUpdate, PatientResponse

router = APIRouter(prefix="/patients", tags=["Patients"])

@router.get("", response_model=List[PatientResponse], dependencies=[Depends(get_current_user)])
async def list_patients(
    search: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """List patients, newest first."""
    return PatientService(db).list_patients(search)

@router.get("/{patient_id}", response_model=PatientResponse, dependencies=[Depends(get_current_user)])
async def get_patient(patient_id: str, db: Session = Depends(get_db)):
    return PatientService(db).get_patient(patient_id)

@router.post("", response_model=PatientResponse, status_code=201, dependencies=[Depends(get_front_desk_user)])
async def create_patient(data: PatientCreate, db: Session = Depends(get_db)):
    return PatientService(db).create_patient(data)

@router.put("/{patient_id}", response_model=PatientResponse, dependencies=[Depends(get_front_desk_user)])
async def update_patient(patient_id: str, data: PatientUpdate, db: Session = Depends(get_db)):
    return PatientService(db).update_patient(patient_id, data)

@router.delete("/{patient_id}", status_code=204, dependencies=[Depends(get_front_desk_user)])
async def delete_patient(patient_id: str, db: Session = Depends(get_db)):
    """Delete a patient and their appointments."""
    PatientService(db).delete_patient(patient_id)
