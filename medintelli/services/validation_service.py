from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from fastapi import HTTPException, status
import logging
import secrets

from ..models.validation import ValidationRecord
from ..schemas.validation import ValidationCreate, PublicValidationResponse

logger = logging.getLogger(__name__)

CODE_BYTES = 6

def generate_code() -> str:
    return secrets.token_hex(CODE_BYTES).upper()

class ValidationService:
    def __init__(self, db: Session):
        self.db = db

    def get_by_code(self, code: str) -> ValidationRecord:
        code = (code or "").strip()
        record = None
        if code:
            record = self.db.query(ValidationRecord).filter(ValidationRecord.code == code).first()
        if not record:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Código de validação não encontrado"
            )
        return record

    def public_lookup(self, code: str) -> PublicValidationResponse:
        record = self.get_by_code(code)
        return PublicValidationResponse(
            code=record.code,
            patient_name=record.patient_name,
            doc_type=record.doc_type,
            doc_url=record.doc_url,
            valid=record.valid,
            message="Documento VÁLIDO" if record.valid else "Documento INVÁLIDO/REVOGADO",
        )

    def create(self, data: ValidationCreate) -> ValidationRecord:
        """Register a document; code uniqueness is enforced by the database."""
        payload = data.model_dump()
        payload["code"] = (data.code or "").strip() or generate_code()

        record = ValidationRecord(**payload)
        self.db.add(record)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning(f"Duplicate validation code rejected: {payload['code']}")
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Código de validação já existe"
            )
        self.db.refresh(record)

        logger.info(f"Validation record created: {record.code}")
        return record

    def revoke(self, code: str) -> ValidationRecord:
        record = self.get_by_code(code)
        record.valid = False
        self.db.commit()
        self.db.refresh(record)

        logger.info(f"Validation record revoked: {record.code}")
        return record
