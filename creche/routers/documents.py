# creche/routers/documents.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from creche.db.session import get_db
from creche.models import User
from creche.routers.auth import require_user
from creche.schemas.document import DocumentIn, DocumentOut
from creche.services.documents import attach_document

router = APIRouter(prefix="/documents", tags=["Documents"])


@router.post("", response_model=DocumentOut, status_code=201)
def create_document(payload: DocumentIn, user: User = Depends(require_user), db: Session = Depends(get_db)):
    return attach_document(db, user, payload)
