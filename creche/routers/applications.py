# creche/routers/applications.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from creche.db.session import get_db
from creche.models import User
from creche.routers.auth import require_user
from creche.schemas.application import (
    ApplicationDetailOut, ApplicationIn, ApplicationOut, DecisionIn, DecisionOut,
)
from creche.services import applications as svc

router = APIRouter(prefix="/applications", tags=["Applications"])


@router.get("", response_model=List[ApplicationOut])
def list_applications(user: User = Depends(require_user), db: Session = Depends(get_db)):
    return svc.list_applications(db, user)


@router.post("", response_model=ApplicationOut, status_code=201)
def submit_application(payload: ApplicationIn, user: User = Depends(require_user), db: Session = Depends(get_db)):
    return svc.submit_application(db, user, payload)


@router.get("/{application_id}", response_model=ApplicationDetailOut)
def get_application(application_id: int, user: User = Depends(require_user), db: Session = Depends(get_db)):
    return svc.get_application(db, user, application_id)


@router.patch("/{application_id}", response_model=DecisionOut)
def decide_application(
    application_id: int,
    payload: DecisionIn,
    user: User = Depends(require_user),
    db: Session = Depends(get_db),
):
    a = svc.decide_application(db, user, application_id, payload.status)
    return DecisionOut(status=a.status)
