# creche/services/fees.py
"""
Fee lifecycle.

    pending --admin or owning parent pays--> paid
    pending --admin--> overdue --admin/parent pays--> paid

``paid_date`` is stamped on the way into ``paid`` and cleared whenever an
admin moves a fee back out of it, so it is set exactly while status == paid.
"""
from __future__ import annotations

import logging
from typing import List

from sqlalchemy.orm import Session

from creche.core.errors import Conflict, Forbidden, NotFound, ValidationFailed
from creche.core.policy import authorize, is_admin
from creche.db.session import atomic
from creche.models import Child, Fee, Message, User
from creche.models.fee import FEE_STATUSES
from creche.services.activity import log_activity, money, notify
from creche.services.export_service import build_fees_xlsx
from creche.services.receipt_pdf import render_fee_receipt
from creche.utils.datetime import fmt_dmy, utcnow

log = logging.getLogger("creche.lifecycle")


def _get(db: Session, fee_id: int) -> Fee:
    fee = db.get(Fee, fee_id)
    if not fee:
        raise NotFound("Fee not found")
    return fee


def create_fee(db: Session, me: User, data) -> Fee:
    authorize(me, "fee.create", message="Forbidden - only admins can create fees")
    child = db.get(Child, data.student_id)
    if not child:
        raise ValidationFailed.field("studentId", "Student not found")

    with atomic(db):
        fee = Fee(
            student_id=child.id,
            amount=data.amount,
            description=data.description.strip(),
            due_date=data.due_date,
            status="pending",
        )
        db.add(fee)
        notify(
            db,
            user_id=child.parent_id,
            title="New Fee Added",
            message=f"A new fee of {money(fee.amount)} for {fee.description} has been added",
        )
    log.info("fee %s created for student %s", fee.id, child.id)
    return fee


def set_fee_status(db: Session, me: User, fee_id: int, status: str) -> Fee:
    """
    Admins may set any status. A parent may only pay ("paid") a fee of one of
    their own children. Paying writes one payment Activity; no Notification.
    """
    if status not in FEE_STATUSES:
        raise ValidationFailed.field("status", "Invalid status value")

    fee = _get(db, fee_id)
    if is_admin(me):
        authorize(me, "fee.set_status")
    elif status == "paid":
        authorize(me, "fee.pay", fee.parent_id, message="Forbidden - you can only pay your own fees")
    else:
        raise Forbidden("Forbidden - parents can only mark fees as paid")

    if fee.status == status:
        return fee

    with atomic(db):
        fee.status = status
        if status == "paid":
            fee.paid_date = utcnow()
            log_activity(
                db,
                user_id=fee.parent_id,
                type="payment",
                title="Fee payment received",
                description=f"Payment of {money(fee.amount)} for {fee.description} has been received",
            )
        else:
            fee.paid_date = None
    log.info("fee %s -> %s by user %s", fee.id, status, me.id)
    return fee


def remind_fee(db: Session, me: User, fee_id: int) -> Message:
    """Send the owning parent a reminder as a direct Message from ``me``."""
    authorize(me, "fee.remind", message="Forbidden - only admins can send reminders")
    fee = _get(db, fee_id)
    if fee.parent_id is None:
        raise NotFound("Parent not found")

    with atomic(db):
        msg = Message(
            sender_id=me.id,
            receiver_id=fee.parent_id,
            subject="Fee Payment Reminder",
            content=(
                f"This is a reminder that your payment of {money(fee.amount)} "
                f"for {fee.description} is due on {fmt_dmy(fee.due_date)}."
            ),
            status="unread",
        )
        db.add(msg)
    return msg


def list_fees(db: Session, me: User) -> List[Fee]:
    authorize(me, "fee.list")
    q = db.query(Fee)
    if not is_admin(me):
        q = q.join(Child, Fee.student_id == Child.id).filter(Child.parent_id == me.id)
    return q.order_by(Fee.due_date.desc(), Fee.id.desc()).all()


def get_fee(db: Session, me: User, fee_id: int) -> Fee:
    fee = _get(db, fee_id)
    authorize(me, "fee.read", fee.parent_id)
    return fee


def fee_receipt(db: Session, me: User, fee_id: int) -> bytes:
    fee = get_fee(db, me, fee_id)
    if fee.status != "paid":
        raise Conflict("A receipt is only available for paid fees")
    return render_fee_receipt(fee)


def export_fees(db: Session, me: User) -> bytes:
    authorize(me, "fee.export", message="Forbidden - only admins can export fees")
    fees = db.query(Fee).order_by(Fee.due_date.asc(), Fee.id.asc()).all()
    return build_fees_xlsx(fees)
