# creche/routers/fees.py
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from creche.db.session import get_db
from creche.models import User
from creche.routers.auth import require_user
from creche.schemas.common import Ack
from creche.schemas.fee import FeeIn, FeeOut, FeeStatusIn, FeeStatusOut
from creche.services import fees as svc
from creche.services.export_service import XLSX_MEDIA_TYPE
from creche.utils.datetime import today

router = APIRouter(prefix="/fees", tags=["Fees"])


@router.get("", response_model=List[FeeOut])
def list_fees(user: User = Depends(require_user), db: Session = Depends(get_db)):
    return svc.list_fees(db, user)


@router.post("", response_model=FeeOut, status_code=201)
def create_fee(payload: FeeIn, user: User = Depends(require_user), db: Session = Depends(get_db)):
    return svc.create_fee(db, user, payload)


# before /{fee_id} so "export" is not read as an id
@router.get("/export")
def export_fees(user: User = Depends(require_user), db: Session = Depends(get_db)):
    data = svc.export_fees(db, user)
    fname = f"fees_{today().strftime('%Y%m%d')}.xlsx"
    return Response(
        content=data,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{fname}"'},
    )


@router.get("/{fee_id}", response_model=FeeOut)
def get_fee(fee_id: int, user: User = Depends(require_user), db: Session = Depends(get_db)):
    return svc.get_fee(db, user, fee_id)


@router.patch("/{fee_id}", response_model=FeeStatusOut)
def set_fee_status(
    fee_id: int,
    payload: FeeStatusIn,
    user: User = Depends(require_user),
    db: Session = Depends(get_db),
):
    fee = svc.set_fee_status(db, user, fee_id, payload.status)
    return FeeStatusOut(status=fee.status)


@router.post("/{fee_id}/remind", response_model=Ack)
def remind_fee(fee_id: int, user: User = Depends(require_user), db: Session = Depends(get_db)):
    svc.remind_fee(db, user, fee_id)
    return Ack()


@router.get("/{fee_id}/receipt")
def fee_receipt(fee_id: int, user: User = Depends(require_user), db: Session = Depends(get_db)):
    pdf = svc.fee_receipt(db, user, fee_id)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="receipt_{fee_id}.pdf"'},
    )
