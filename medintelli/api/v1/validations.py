from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...api.deps import get_admin_user
from ...services.validation_service import ValidationService
from ...schemas.validation import (
    ValidationCreate, ValidationResponse, PublicValidationResponse
)

router = APIRouter(tags=["Validation"])

@router.get("/public/validations/{code}", response_model=PublicValidationResponse)
async def public_validation(code: str, db: Session = Depends(get_db)):
    """Public document check, no login required."""
    return ValidationService(db).public_lookup(code)

@router.post("/validations", response_model=ValidationResponse, status_code=201, dependencies=[Depends(get_admin_user)])
async def create_validation(data: ValidationCreate, db: Session = Depends(get_db)):
    return ValidationService(db).create(data)

@router.patch("/validations/{code}/revoke", response_model=ValidationResponse, dependencies=[Depends(get_admin_user)])
async def revoke_validation(code: str, db: Session = Depends(get_db)):
    return ValidationService(db).revoke(code)
