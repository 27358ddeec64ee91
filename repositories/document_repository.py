"""
Document Repository - Data access layer for uploaded documents
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from repositories.base import OwnedRepository
from domain.models import Document


class DocumentRepository(OwnedRepository[Document]):
    """Repository for document data access"""

    label = "Document"

    def __init__(self, db: Session):
        super().__init__(db, Document)

    def list_filtered(self, user_id: str, doc_type: Optional[str] = None) -> List[Document]:
        """Get documents for a user, optionally only one type"""
        query = self.db.query(Document).filter(Document.user_id == user_id)
        if doc_type:
            query = query.filter(Document.type == doc_type)
        return query.order_by(Document.created_at.desc()).all()
