from typing import BinaryIO, List, Optional
from sqlalchemy.orm import Session
import logging

from adapters import file_storage
from domain.enums import DocumentType
from domain.models import Document
from repositories import DocumentRepository
from app.exceptions import ServiceValidationError

logger = logging.getLogger("nutritrack.documents")


def parse_document_type(value: Optional[str]) -> DocumentType:
    try:
        return DocumentType((value or "").strip())
    except ValueError:
        raise ServiceValidationError(
            "Invalid document type",
            details={"allowed": [t.value for t in DocumentType]},
        )


class DocumentService:
    """Business logic for uploaded diet plans and consultations"""

    @staticmethod
    def list_documents(
        db: Session, user_id: str, doc_type: Optional[str] = None
    ) -> List[Document]:
        return DocumentRepository(db).list_filtered(user_id, doc_type=doc_type or None)

    @staticmethod
    def upload_document(
        db: Session,
        user_id: str,
        source: Optional[BinaryIO],
        filename: Optional[str],
        doc_type: Optional[str],
    ) -> Document:
        """
        Store an uploaded file and record it for the user.

        The type is checked before any bytes are written. If the database
        insert fails the stored file is removed again.
        """
        if source is None or not filename:
            raise ServiceValidationError("No file provided")
        kind = parse_document_type(doc_type)

        stored = file_storage.save_stream(source, filename)
        try:
            document = DocumentRepository(db).create(
                Document(
                    user_id=user_id,
                    name=filename,
                    type=kind.value,
                    url=stored.url,
                    size=stored.size,
                )
            )
        except Exception:
            db.rollback()
            stored.path.unlink(missing_ok=True)
            raise

        logger.info(
            f"document_uploaded user_id={user_id} document_id={document.id} "
            f"type={kind.value} size={stored.size}"
        )
        return document

    @staticmethod
    def delete_document(db: Session, user_id: str, document_id: str) -> None:
        """Delete the record, then its file; a missing file is only logged."""
        document = DocumentRepository(db).delete_owned(document_id, user_id)
        try:
            file_storage.delete_by_url(document.url)
        except OSError as exc:
            logger.warning(f"document_file_delete_failed url={document.url} error={exc}")
        logger.info(f"document_deleted user_id={user_id} document_id={document_id}")
