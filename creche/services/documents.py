# creche/services/documents.py
from __future__ import annotations

from sqlalchemy.orm import Session

from creche.core.errors import NotFound
from creche.core.policy import authorize
from creche.models import Application, Child, Document, User

# owner kind -> (model, label for errors)
OWNERS = {
    "application": (Application, "Application"),
    "child": (Child, "Child"),
}


def attach_document(db: Session, me: User, data) -> Document:
    """
    Register metadata of a file stored elsewhere. Parents can attach only to
    their own application or child.
    """
    model, label = OWNERS[data.owner.kind]
    owner = db.get(model, data.owner.id)
    if not owner:
        raise NotFound(f"{label} not found")
    authorize(me, "document.attach", owner.parent_id)

    doc = Document(
        owner_kind=data.owner.kind,
        owner_id=owner.id,
        type=data.type,
        file_name=data.file_name,
        file_url=data.file_url,
    )
    db.add(doc)
    db.commit()
    return doc
