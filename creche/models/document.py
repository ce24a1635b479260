# creche/models/document.py
from sqlalchemy import Column, Integer, String, DateTime, Enum, Index, Text

from creche.db.base import Base
from creche.utils.datetime import utcnow

OWNER_KINDS = ("application", "child")

class Document(Base):
    """
    Metadata of an uploaded file. The owner is either an Application or a
    Child, told apart by ``owner_kind``; the file itself lives elsewhere.
    """
    __tablename__ = "documents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_kind = Column(Enum(*OWNER_KINDS, name="document_owner_kind"), nullable=False)
    owner_id = Column(Integer, nullable=False)

    type = Column(String(64), nullable=False)  # birth_certificate, vaccination_record, ...
    file_name = Column(String(255), nullable=False)
    file_url = Column(Text, nullable=False)
    upload_date = Column(DateTime, nullable=False, default=utcnow)

    __table_args__ = (
        Index("ix_documents_owner", "owner_kind", "owner_id"),
    )

    @property
    def owner(self) -> dict:
        return {"kind": self.owner_kind, "id": self.owner_id}
